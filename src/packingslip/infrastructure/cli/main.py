"""Command-line entry point.

Every failure (bad options, missing files, malformed input, rendering
errors) ends the run with exit status 1 and a message on stderr.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from packingslip.domain.exceptions import PackingSlipException
from packingslip.infrastructure.bootstrap import (
    build_manifest_handler,
    render_packing_slip_handler,
)
from packingslip.infrastructure.config import (
    DEFAULT_BUSINESS_INFO,
    DEFAULT_CATALOG,
    DEFAULT_LOGO,
    DEFAULT_SHIPPING_AND_HANDLING,
    load_config,
)

logger = logging.getLogger(__name__)


@click.command("packingslip")
@click.option(
    "-m", "--manifest", "manifest_path", required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Order manifest (YAML).",
)
@click.option(
    "-o", "--output", "output_path", required=True,
    type=click.Path(dir_okay=False, path_type=Path),
    help="Where to write the packing slip PDF.",
)
@click.option(
    "-c", "--catalog", "catalog_path", default=None,
    type=click.Path(dir_okay=False, path_type=Path),
    help=f"Tab-delimited catalog (default: {DEFAULT_CATALOG}).",
)
@click.option(
    "-b", "--business-info", "business_info_path", default=None,
    type=click.Path(dir_okay=False, path_type=Path),
    help=f"Business info (YAML, default: {DEFAULT_BUSINESS_INFO}).",
)
@click.option(
    "--logo", "logo_path", default=None,
    type=click.Path(dir_okay=False, path_type=Path),
    help=f"Logo image for the header (default: {DEFAULT_LOGO}).",
)
@click.option(
    "--shipping-and-handling", "shipping_and_handling", default=None,
    help=f"Shipping & handling amount (default: {DEFAULT_SHIPPING_AND_HANDLING}).",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log progress to stderr.")
def cli(
    manifest_path: Path,
    output_path: Path,
    catalog_path: Path | None,
    business_info_path: Path | None,
    logo_path: Path | None,
    shipping_and_handling: str | None,
    verbose: bool,
) -> int:
    """Render a printable packing slip for one order."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(
            catalog=catalog_path,
            business_info=business_info_path,
            logo=logo_path,
            shipping_and_handling=shipping_and_handling,
        )
    except PackingSlipException as exc:
        raise click.ClickException(str(exc))

    for path in (config.catalog_path, config.business_info_path):
        if not path.is_file():
            raise click.ClickException(f"no such file: {path}")

    try:
        manifest = build_manifest_handler(config, manifest_path).handle()
        return render_packing_slip_handler(config).handle(
            manifest, output_path, config.shipping_and_handling
        )
    except (PackingSlipException, OSError) as exc:
        logger.debug("Packing slip run failed", exc_info=True)
        raise click.ClickException(str(exc))


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return its exit status instead of exiting."""
    try:
        rv = cli.main(args=argv, prog_name="packingslip", standalone_mode=False)
    except click.ClickException as exc:
        exc.show()
        return 1
    except click.Abort:
        click.echo("Aborted!", err=True)
        return 1
    return rv or 0


def run() -> None:
    sys.exit(main())
