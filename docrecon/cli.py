"""Command line entry point: reconstruct a document from saved OCR result pages."""

import argparse
import sys

import docrecon.common.utils.config as config_module
from docrecon.common.utils.logger import logger

DEFAULT_OUTPUTS = {"json": "output.json", "markdown": "output.md"}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="docrecon", description="Rebuild documents from OCR result blocks")
    subparsers = parser.add_subparsers(dest="action", help="Action to perform")

    extract_parser = subparsers.add_parser("extract", help="Reconstruct a document from result page files")
    extract_parser.add_argument(
        "--input",
        required=True,
        nargs="+",
        help="Result page JSON files, in pagination order",
    )
    extract_parser.add_argument(
        "--operation",
        type=str,
        default=None,
        help="ANALYSIS for tables and forms; anything else is text detection (default: inferred)",
    )
    extract_parser.add_argument(
        "--format",
        type=str,
        choices=["raw", "json", "markdown"],
        default="json",
        help="Output format: 'raw' for pydantic repr, 'json' for the result record, 'markdown' for reading",
    )
    extract_parser.add_argument("--output", type=str, default=None, help="Where to write json/markdown output")

    subparsers.add_parser("config", help="Print configuration")
    return parser


def _extract(args: argparse.Namespace) -> int:
    from docrecon.blocks import JobFailedError, read_result_files
    from docrecon.processor import process_document

    try:
        block_set = read_result_files(args.input, operation=args.operation)
    except JobFailedError as e:
        logger.error(str(e))
        return 1
    except (OSError, ValueError) as e:
        logger.error(f"Could not read result pages: {e}")
        return 1

    result = process_document(block_set)

    match str(args.format).lower():
        case "raw":
            logger.info(repr(result))

        case "json" | "markdown" as fmt:
            path = args.output or DEFAULT_OUTPUTS[fmt]
            with open(path, "w", encoding="utf-8") as f:
                f.write(result.json if fmt == "json" else result.markdown)
            logger.info(f"{fmt.title()} output written to {path}")

        case _:
            logger.error(f"Unknown format: {args.format}")
            return 1

    return 0


def main(argv: list[str] | None = None) -> int:
    """Main CLI entrypoint."""
    args = _build_parser().parse_args(argv)

    match args.action:
        case "extract":
            return _extract(args)

        case "config":
            for key, value in sorted(config_module.config.model_dump().items()):
                print(f"{key}={value}")
            return 0

        case _:
            _build_parser().print_help()
            return 2


if __name__ == "__main__":
    sys.exit(main())
