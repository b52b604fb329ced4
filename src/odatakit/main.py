"""Client entry point and composition root."""

import argparse
import asyncio
import sys
from pathlib import Path

from odatakit import __version__
from odatakit.application.use_cases.metadata.load_catalog import LoadCatalogUseCase
from odatakit.config import Settings, get_settings
from odatakit.domain.exceptions import ODataError
from odatakit.infrastructure.metadata import EdmxCatalog, HttpMetadataSource
from odatakit.log_config import configure_logging


def create_metadata_source(settings: Settings, transport=None) -> HttpMetadataSource:
    """Build the HTTP metadata source from settings."""
    return HttpMetadataSource(
        service_url=settings.service_url,
        metadata_path=settings.metadata_path,
        timeout=settings.request_timeout,
        verify_ssl=settings.verify_ssl,
        transport=transport,
    )


async def load_catalog(settings: Settings | None = None, transport=None) -> EdmxCatalog:
    """Composition root - fetch $metadata for the configured service and parse it."""
    settings = settings or get_settings()
    use_case = LoadCatalogUseCase(
        metadata_source=create_metadata_source(settings, transport),
        catalog_factory=EdmxCatalog.from_xml,
    )
    return await use_case.execute()


def describe_catalog(catalog: EdmxCatalog, type_name: str | None = None) -> list[str]:
    """Human-readable listing of complex types and their declared properties."""
    names = [type_name] if type_name else list(catalog.complex_types())
    lines = [f"Namespace: {catalog.namespace()}"]
    for name in names:
        definitions = catalog.definitions_for_complex_type(name)
        lines.append(f"{catalog.namespace()}.{name}")
        for d in definitions:
            nullable = "" if d.nullable else " (not null)"
            lines.append(f"  {d.name}: {d.type_name}{nullable}")
    return lines


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="odatakit",
        description="List complex types declared by an OData service",
    )
    parser.add_argument("--version", action="version", version=f"odatakit {__version__}")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--url", type=str, help="Service root URL (default from ODATAKIT_SERVICE_URL)")
    source.add_argument("--file", type=Path, help="Local $metadata document")
    parser.add_argument("--type", dest="type_name", type=str, help="Only show this complex type")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default from ODATAKIT_LOG_LEVEL)",
    )
    args = parser.parse_args(argv)

    settings = get_settings()
    if args.url:
        settings = settings.model_copy(update={"service_url": args.url})
    configure_logging(args.log_level or settings.log_level)

    try:
        if args.file:
            catalog = EdmxCatalog.from_xml(args.file.read_bytes())
        else:
            catalog = asyncio.run(load_catalog(settings))
        lines = describe_catalog(catalog, args.type_name)
    except (ODataError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
