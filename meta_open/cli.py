"""Command-line entry point: open a local metadata file in the org's Setup UI."""

import argparse
import json
import logging
from collections.abc import Sequence
from pathlib import Path

from meta_open.connect_org import connect_org
from meta_open.errors import MetaOpenError
from meta_open.load_config import load_config
from meta_open.open_metadata import open_metadata
from meta_open.open_result import OpenResult

logger = logging.getLogger(__name__)


def _existing_file(value: str) -> str:
    if not Path(value).is_file():
        msg = f"No such file: {value}"
        raise argparse.ArgumentTypeError(msg)
    return value


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the command."""
    ap = argparse.ArgumentParser(
        prog="sf-meta-open",
        description="Open a metadata source file in the Setup UI of a Salesforce org.",
    )
    ap.add_argument(
        "-f",
        "--metadata",
        required=True,
        type=_existing_file,
        help="Metadata source file, e.g. force-app/main/default/classes/Foo.cls",
    )
    ap.add_argument(
        "-o",
        "--target-org",
        help="Username or alias of the org (default: config or SF_TARGET_ORG)",
    )
    ap.add_argument(
        "--config",
        help="Path to a YAML configuration file (default: .sf-meta-open.yml)",
    )
    ap.add_argument(
        "--url-only",
        action="store_true",
        help="Print the URL instead of opening the browser",
    )
    ap.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON",
    )
    ap.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log lookups and commands",
    )
    return ap


def run(args: argparse.Namespace) -> OpenResult:
    """Resolve and open the metadata, converting any failure into a result."""
    try:
        config = load_config(args.config)
        if not args.verbose:
            logging.getLogger().setLevel(config["logging"]["level"])
        conn = connect_org(args.target_org, config)
        url = open_metadata(
            conn,
            args.metadata,
            launch=not args.url_only,
            browser_override=config["browser"]["command"],
        )
    except MetaOpenError as e:
        logger.info("Open failed for %s: %s", args.metadata, e)
        return OpenResult(is_success=False, error=str(e))
    except Exception as e:
        logger.exception("Unexpected failure opening %s", args.metadata)
        return OpenResult(is_success=False, error=str(e))
    return OpenResult(is_success=True, url=url)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command and return its exit code."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    result = run(args)

    if args.json:
        print(json.dumps(result.as_dict(), indent=2))
    elif not result.is_success:
        print(f"Error to open Metadata: {result.error}")
    elif args.url_only:
        print(result.url)
    else:
        print(f"Opening {result.url}")
    return 0 if result.is_success else 1


if __name__ == "__main__":
    raise SystemExit(main())
