# file: phonemeta/cli.py
"""
phonemeta CLI.

Converts phone number metadata from XML (or the dataset bundled with
`phonenumbers`) into per-region binary files and a generated calling-code
mapping class.

Every parameter must be given as `--key=value`; anything else is a usage error.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
import click

from phonemeta import __version__
from phonemeta.build import BuildOptions, run_build
from phonemeta.config import load_settings
from phonemeta.logging_config import configure_logging

logger = logging.getLogger(__name__)

_WELL_FORMED_PARAM = re.compile(r"--(.+?)=(.*)")
_BARE_FLAGS = frozenset({"--help", "--version"})

_EPILOG = """\
\b
Example:
  phonemeta-build \\
    --input-file=resources/PhoneNumberMetadata.xml \\
    --output-dir=java/libphonenumber/src/com/google/i18n/phonenumbers \\
    --data-prefix=data/PhoneNumberMetadataProto \\
    --mapping-class=CountryCodeToRegionCodeMap \\
    --copyright=2010 \\
    --lite-build=false
"""


class KeyValueCommand(click.Command):
    """A click command that only accepts `--key=value` tokens (plus --help/--version)."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        for token in args:
            if token in _BARE_FLAGS:
                continue
            if _WELL_FORMED_PARAM.fullmatch(token) is None:
                raise click.UsageError(f"Illegal command line parameter: {token}", ctx=ctx)
        return super().parse_args(ctx, args)


_BOOL_CHOICE = click.Choice(["true", "false"], case_sensitive=False)


@click.command(cls=KeyValueCommand, epilog=_EPILOG)
@click.version_option(__version__, prog_name="phonemeta")
@click.option(
    "--input-file",
    "input_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Read phone number metadata in XML format from PATH (unless --bundled=true).",
)
@click.option(
    "--output-dir",
    "output_dir",
    required=True,
    type=click.Path(file_okay=False, path_type=Path),
    help="Use PATH as the root directory for output files.",
)
@click.option(
    "--data-prefix",
    "data_prefix",
    required=True,
    help="Basename (relative to --output-dir) for the per-region metadata files.",
)
@click.option(
    "--mapping-class",
    "mapping_class",
    required=True,
    help="Store country code mappings in the class NAME, written to --output-dir.",
)
@click.option(
    "--copyright",
    "copyright_year",
    required=True,
    type=int,
    help="Use YEAR in generated copyright headers.",
)
@click.option(
    "--lite-build",
    "lite_build",
    type=_BOOL_CHOICE,
    default="false",
    show_default=True,
    help="Omit example numbers from the generated metadata.",
)
@click.option(
    "--bundled",
    "bundled",
    type=_BOOL_CHOICE,
    default="false",
    show_default=True,
    help="Read metadata from the phonenumbers package instead of --input-file.",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="YAML config path.",
)
def main(
    input_file: Path | None,
    output_dir: Path,
    data_prefix: str,
    mapping_class: str,
    copyright_year: int,
    lite_build: str,
    bundled: str,
    config_path: Path | None,
) -> None:
    """Convert phone number metadata into build artifacts."""

    use_bundled = bundled.lower() == "true"
    if input_file is None and not use_bundled:
        raise click.UsageError("Missing option '--input-file'.")

    options = BuildOptions(
        input_file=input_file,
        output_dir=output_dir,
        data_prefix=data_prefix,
        mapping_class=mapping_class,
        copyright_year=copyright_year,
        lite_build=lite_build.lower() == "true",
        bundled=use_bundled,
    )

    try:
        settings = load_settings(yaml_path=config_path)
        configure_logging(level=settings.log_level, json_logging=settings.json_logging)
        run_build(options, settings)
    except Exception as exc:
        logger.exception("Metadata generation failed")
        raise click.ClickException(f"{type(exc).__name__}: {exc}") from exc

    click.echo("Metadata code successfully generated.")
