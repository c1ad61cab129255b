# file: tests/conftest.py
from __future__ import annotations

from pathlib import Path

import pytest

SAMPLE_XML = r"""<?xml version="1.0" encoding="UTF-8"?>
<phoneNumberMetadata>
  <territories>
    <territory id="CA" countryCode="1" internationalPrefix="011" nationalPrefix="1">
      <generalDesc>
        <nationalNumberPattern>[2-9]\d{9}</nationalNumberPattern>
      </generalDesc>
      <fixedLine>
        <possibleLengths national="10" localOnly="7"/>
        <exampleNumber>5062345678</exampleNumber>
        <nationalNumberPattern>
          (?:2(?:04|[23]6)|3(?:06|43))
          [2-9]\d{6}
        </nationalNumberPattern>
      </fixedLine>
    </territory>
    <territory id="US" countryCode="1" mainCountryForCode="true" internationalPrefix="011"
               nationalPrefix="1">
      <availableFormats>
        <numberFormat pattern="(\d{3})(\d{3})(\d{4})" nationalPrefixOptionalWhenFormatting="true">
          <leadingDigits>
            [2-9]
          </leadingDigits>
          <format>($1) $2-$3</format>
          <intlFormat>$1-$2-$3</intlFormat>
        </numberFormat>
      </availableFormats>
      <generalDesc>
        <nationalNumberPattern>[2-9]\d{9}</nationalNumberPattern>
      </generalDesc>
      <mobile>
        <possibleLengths national="[9-10]"/>
        <exampleNumber>2015550123</exampleNumber>
        <nationalNumberPattern>[2-9]\d{9}</nationalNumberPattern>
      </mobile>
    </territory>
    <territory id="GB" countryCode="44" internationalPrefix="00" nationalPrefix="0">
      <generalDesc>
        <nationalNumberPattern>[1-357-9]\d{9}</nationalNumberPattern>
      </generalDesc>
    </territory>
    <territory id="001" countryCode="800">
      <generalDesc>
        <nationalNumberPattern>\d{8}</nationalNumberPattern>
      </generalDesc>
      <tollFree>
        <possibleLengths national="8"/>
        <exampleNumber>12345678</exampleNumber>
        <nationalNumberPattern>\d{8}</nationalNumberPattern>
      </tollFree>
    </territory>
  </territories>
</phoneNumberMetadata>
"""


@pytest.fixture
def sample_xml(tmp_path: Path) -> Path:
    path = tmp_path / "PhoneNumberMetadata.xml"
    path.write_text(SAMPLE_XML, encoding="utf-8")
    return path
