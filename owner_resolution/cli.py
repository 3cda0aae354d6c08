"""
Command-line entry point.

    owner-resolution mentions.json -o owners.json --parcel-id 12345

INPUT is either a JSON list of mentions ({"text": ..., "context": ...}) or a
property document {"current_owners": str|list, "sales": [{date, grantee, grantor}]}.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, List, Optional

from loguru import logger

from owner_resolution.config import ResolverSettings
from owner_resolution.grouper import build_owner_record
from owner_resolution.logging import configure_logger
from owner_resolution.models import RawOwnerMention
from owner_resolution.sources import mentions_from_document


def load_mentions(data: Any) -> List[RawOwnerMention]:
    if isinstance(data, list):
        return [RawOwnerMention.from_dict(item) for item in data]
    if isinstance(data, dict):
        return mentions_from_document(data)
    raise ValueError("Input must be a list of mentions or a property document object")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="owner-resolution",
        description="Resolve scraped owner strings into typed owners grouped by date.",
    )
    parser.add_argument("input", help="JSON file with mentions or a property document")
    parser.add_argument("-o", "--output", help="Write the record here instead of stdout")
    parser.add_argument("--parcel-id", help="Wrap output under property_<parcel-id>")
    parser.add_argument("--emit-nulls", action="store_true", help="Emit absent person fields as null")
    parser.add_argument(
        "--share-as-company",
        action="store_true",
        help="Classify names with ownership-share annotations as companies",
    )
    parser.add_argument("--log-level", default=None, help="Log level (default: LOG_LEVEL env or INFO)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logger(level=args.log_level)

    try:
        data = json.loads(Path(args.input).read_text(encoding="utf-8"))
        mentions = load_mentions(data)
    except (OSError, ValueError) as exc:
        logger.error(f"Cannot read owner mentions from {args.input}: {exc}")
        return 2

    settings = ResolverSettings.from_env()
    overrides = {}
    if args.emit_nulls:
        overrides["emit_null_fields"] = True
    if args.share_as_company:
        overrides["share_annotations_as_company"] = True
    if overrides:
        settings = settings.model_copy(update=overrides)

    record = build_owner_record(mentions, settings=settings)
    if args.parcel_id is not None:
        payload = record.to_property_json(args.parcel_id, emit_null_fields=settings.emit_null_fields)
    else:
        payload = record.to_json(emit_null_fields=settings.emit_null_fields)

    text = json.dumps(payload, indent=2)
    if args.output:
        out_path = Path(args.output)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(text + "\n", encoding="utf-8")
        logger.info(f"Wrote owner record to {out_path}")
    else:
        sys.stdout.write(text + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
