# file: phonemeta/io/source_writer.py
"""
Generated source file composition.

Emission happens in two phases:

1. The emitter fills an `ImportsBuilder` and a `BodyBuilder`.
2. `compose_source` consumes both builders (each may be built only once) and
   frames the result with the copyright header, generation notice, package
   declaration and class declaration.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

_COPYRIGHT_NOTICE = """\
/*
 * Copyright (C) {year} The Libphonenumber Authors
 *
 * Licensed under the Apache License, Version 2.0 (the "License");
 * you may not use this file except in compliance with the License.
 * You may obtain a copy of the License at
 *
 * http://www.apache.org/licenses/LICENSE-2.0
 *
 * Unless required by applicable law or agreed to in writing, software
 * distributed under the License is distributed on an "AS IS" BASIS,
 * WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
 * See the License for the specific language governing permissions and
 * limitations under the License.
 */

"""

_GENERATION_COMMENT = """\
/* This file is automatically generated by {{@link {generator}}}.
 * Please don't modify it directly.
 */

"""


def copyright_notice(year: int) -> str:
    return _COPYRIGHT_NOTICE.format(year=year)


class BuilderConsumedError(RuntimeError):
    """Raised when a builder is used after it has been built."""


class ImportsBuilder:
    """Collects import names; duplicates collapse and output is sorted."""

    def __init__(self) -> None:
        self._names: set[str] = set()
        self._built = False

    def add(self, name: str) -> None:
        if self._built:
            raise BuilderConsumedError("imports already built")
        self._names.add(name)

    def build(self) -> tuple[str, ...]:
        if self._built:
            raise BuilderConsumedError("imports already built")
        self._built = True
        return tuple(sorted(self._names))


class BodyBuilder:
    """Accumulates class body text in order."""

    def __init__(self) -> None:
        self._parts: list[str] = []
        self._built = False

    def add(self, text: str) -> None:
        if self._built:
            raise BuilderConsumedError("body already built")
        self._parts.append(text)

    def add_format(self, template: str, *args: Any) -> None:
        self.add(template % args)

    def build(self) -> str:
        if self._built:
            raise BuilderConsumedError("body already built")
        self._built = True
        return "".join(self._parts)


@dataclass(frozen=True, slots=True)
class SourceHeader:
    """Framing values for a generated class."""

    class_name: str
    package: str
    generator_name: str
    copyright_year: int


def compose_source(imports: ImportsBuilder, body: BodyBuilder, header: SourceHeader) -> str:
    """Consume both builders and return the complete source text."""

    import_names = imports.build()
    body_text = body.build()

    out: list[str] = []
    out.append(copyright_notice(header.copyright_year))
    out.append(_GENERATION_COMMENT.format(generator=header.generator_name))
    out.append(f"package {header.package};\n\n")

    if import_names:
        for name in import_names:
            out.append(f"import {name};\n")
        out.append("\n")

    out.append(f"public class {header.class_name} {{\n")
    out.append(body_text)
    out.append("}\n")
    return "".join(out)


def write_source_file(path: Path, text: str) -> Path:
    """Write `text` to `path`; the file handle is closed even if writing fails."""

    with path.open("w", encoding="utf-8", newline="\n") as fh:
        fh.write(text)
    logger.info("Wrote generated source %s", path)
    return path
