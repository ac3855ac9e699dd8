"""
Validate Elasticsearch index schemas
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from esschema.config import ENV_PREFIX, FailureMode, get_settings
from esschema.elastic import get_current_schema
from esschema.errors import SchemaValidationError
from esschema.models import IndexSchema
from esschema.validator import validate_schema


def read_schema(path: Path, index: str) -> IndexSchema:
    """
    Read a schema from a json file. This can be an index body ({"mappings": ...}) or
    the output of GET <index>/_mapping
    """
    data = json.loads(path.read_text(encoding="utf-8"))
    if "mappings" in data:
        return IndexSchema.from_index_body(index, data)
    return IndexSchema.from_elastic(index, data)


def validate(args) -> None:
    index = args.index or args.expected.stem
    expected = read_schema(args.expected, index)
    if args.actual:
        actual = read_schema(args.actual, index)
    else:
        logging.info(f"Retrieving mapping of index {index!r} from {get_settings().elastic_host}")
        actual = get_current_schema(index)

    try:
        validate_schema(expected, actual, on_failure=args.on_failure)
    except SchemaValidationError as e:
        logging.error(f"Index {index!r} does not match {args.expected}:\n{e.report}")
        sys.exit(1)


def config(_args) -> None:
    for k, v in get_settings().model_dump().items():
        print(f"{ENV_PREFIX.upper()}{k.upper()}={v}")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__, prog="python -m esschema")

    subparsers = parser.add_subparsers(dest="action", title="action", help="Action to perform:", required=True)
    p = subparsers.add_parser("validate", help="Validate an index against an expected mapping")
    p.add_argument("expected", type=Path, help="json file with the expected mapping")
    p.add_argument("-i", "--index", help="Name of the index (default: name of the expected mapping file)")
    p.add_argument(
        "-a",
        "--actual",
        type=Path,
        help="json file with the actual mapping. If not given, the mapping is retrieved from elasticsearch",
    )
    p.add_argument(
        "--on-failure",
        type=FailureMode,
        choices=list(FailureMode),
        metavar="{" + ",".join(m.value for m in FailureMode) + "}",
        help="Override the on_failure setting. "
        + "; ".join(f"{m.value}: {m.__doc__}" for m in FailureMode),
    )
    p.set_defaults(func=validate)

    p = subparsers.add_parser("config", help="Show the current settings")
    p.set_defaults(func=config)

    args = parser.parse_args(argv)

    logging.basicConfig(format="[%(levelname)-7s:%(name)-15s] %(message)s", level=get_settings().log_level)
    es_logger = logging.getLogger("elasticsearch")
    es_logger.setLevel(logging.WARNING)

    args.func(args)


if __name__ == "__main__":
    main()
