"""
CLI entry point for the conversion service.

Usage:
    # Start the HTTP API
    timeconvert serve --port 8000

    # Convert a single value offline
    timeconvert convert --type unix --format all --value 1700000000 --gmt -03:00
"""

import argparse
import json
import logging
import sys
from dataclasses import asdict
from typing import Optional, Sequence

from timeconvert.application.conversion.convert_time import ConvertTimeUseCase
from timeconvert.application.conversion.dtos import (
    ConversionFailure,
    ConvertTimeCommand,
)
from timeconvert.core.config import settings
from timeconvert.domain.conversion.entities import AllFormatsRecord
from timeconvert.infrastructure.catalogs.json_catalog_loader import (
    JsonCatalogRepository,
    load_catalogs,
)
from timeconvert.shared.logging import configure_logging

logger = logging.getLogger(__name__)


def cmd_serve(args: argparse.Namespace) -> int:
    """Start the HTTP API with uvicorn."""
    import uvicorn

    logger.info("Starting API at http://%s:%d", args.host, args.port)
    uvicorn.run("timeconvert.main:app", host=args.host, port=args.port, reload=False)
    return 0


def cmd_convert(args: argparse.Namespace) -> int:
    """Run one conversion and print the JSON body the API would return."""
    repository = JsonCatalogRepository(
        documentation_url=settings.documentation_url,
        error_catalog_path=settings.error_catalog_path,
        locale_catalog_path=settings.locale_catalog_path,
    )
    error_catalog, locale_catalog = load_catalogs(
        repository, settings.documentation_url, settings.allow_degraded_catalogs
    )
    use_case = ConvertTimeUseCase(error_catalog, locale_catalog)

    outcome = use_case.execute(
        ConvertTimeCommand(
            type=args.type,
            format=args.format,
            value=args.value,
            offset=args.gmt,
            language=args.lang,
            error_language=args.error,
        )
    )

    if isinstance(outcome, ConversionFailure):
        body = {
            "error": {"code": outcome.code.value, "message": outcome.message},
            "documentation": outcome.documentation_url,
        }
        print(json.dumps(body, ensure_ascii=False))
        return 1

    result = outcome.value
    if isinstance(result, AllFormatsRecord):
        result = asdict(result)
    print(json.dumps({"result": result}, ensure_ascii=False))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Time Convert CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # Serve
    serve_parser = subparsers.add_parser("serve", help="Start the HTTP API")
    serve_parser.add_argument("--host", default="127.0.0.1", help="Bind address")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port (default 8000)")
    serve_parser.set_defaults(func=cmd_serve)

    # Convert
    convert_parser = subparsers.add_parser("convert", help="Convert a single value")
    convert_parser.add_argument("--type", help="time or unix")
    convert_parser.add_argument("--format", help="utc, readable, iso8601, unix or all")
    convert_parser.add_argument("--value", help="YYYY/MM/DD@HH:MM:SS or epoch seconds")
    convert_parser.add_argument("--gmt", default=None, help="Signed offset, e.g. +0530")
    convert_parser.add_argument("--lang", default=None, help="en, es or pt")
    convert_parser.add_argument("--error", default=None, help="Language for error messages")
    convert_parser.set_defaults(func=cmd_convert)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    # convert prints its JSON result on stdout, next to the log stream
    configure_logging(level=settings.log_level if args.command == "serve" else "WARNING")
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
