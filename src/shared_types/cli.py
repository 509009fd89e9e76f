"""
Command-line interface for shared-types.

Lets non-Python packages check documents against the shared shapes and export
the shapes as JSON Schema.

Usage:
    shared-types validate product products.json
    shared-types schema user
    shared-types shapes
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, List, Optional

from shared_types.bootstrap import load_builtin_shapes
from shared_types.core.exceptions import DocumentLoadError, SharedTypesException
from shared_types.core.logger import configure_root_logger, get_logger, push_source, reset_source
from shared_types.registry import ShapeRegistry
from shared_types.validation import ValidationReport, json_schema, validate_records

logger = get_logger(__name__)


def load_document(path: str) -> Any:
    """
    Load a JSON or YAML document.

    Raises:
        DocumentLoadError: If the file is missing, has an unsupported suffix,
            cannot be read, or cannot be decoded.
    """
    doc_file = Path(path)
    if not doc_file.exists():
        raise DocumentLoadError(f"Document not found: {path}")
    if doc_file.suffix not in (".json", ".yaml", ".yml"):
        raise DocumentLoadError(
            f"Unsupported document format: {doc_file.suffix}. Use .json or .yaml"
        )

    try:
        text = doc_file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DocumentLoadError(f"Cannot read {path}: {exc}") from exc

    if doc_file.suffix == ".json":
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise DocumentLoadError(f"Invalid JSON in {path}: {exc}") from exc

    try:
        import yaml
    except ImportError as exc:
        raise DocumentLoadError(
            "PyYAML required for YAML documents. "
            "Install with: pip install 'shared-types[yaml]'"
        ) from exc
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise DocumentLoadError(f"Invalid YAML in {path}: {exc}") from exc


def validate_file(shape: str, path: str) -> ValidationReport:
    """
    Validate every record of a document against a shape.

    The document holds either a single record (an object) or a list of records.

    Example:
        >>> report = validate_file("product", "products.json")
        >>> report.ok
        True
    """
    token = push_source(path)
    try:
        document = load_document(path)
        records = document if isinstance(document, list) else [document]
        report = validate_records(shape, records)

        for index, error in report.failures:
            logger.error(f"Record {index}: {error.reason}")
            for err in error.errors:
                logger.error(f"  {err['field']}: {err['message']}")

        logger.info(f"{report.passed}/{report.total} record(s) conform to {report.shape!r}")
        return report
    finally:
        reset_source(token)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shared-types",
        description="Shared data contracts (User, Product)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        help="Command to execute"
    )

    validate_parser = subparsers.add_parser(
        "validate",
        help="Validate a JSON/YAML document against a shape"
    )
    validate_parser.add_argument("shape", help="Shape name (e.g. user, product)")
    validate_parser.add_argument("document", help="Path to a JSON or YAML document")

    schema_parser = subparsers.add_parser(
        "schema",
        help="Print the JSON Schema of a shape"
    )
    schema_parser.add_argument("shape", help="Shape name (e.g. user, product)")

    subparsers.add_parser(
        "shapes",
        help="List registered shapes"
    )
    return parser


def cli(argv: Optional[List[str]] = None) -> int:
    """
    Entry point for the ``shared-types`` console script.

    Returns the process exit code: 0 on success, 1 on a failed check or error.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_root_logger("DEBUG" if args.verbose else "INFO")
    load_builtin_shapes()

    if args.command == "validate":
        try:
            report = validate_file(args.shape, args.document)
        except SharedTypesException as e:
            logger.error(f"Validation failed: {e}")
            return 1
        return 0 if report.ok else 1

    if args.command == "schema":
        try:
            schema = json_schema(args.shape)
        except SharedTypesException as e:
            logger.error(f"Schema export failed: {e}")
            return 1
        print(json.dumps(schema, indent=2))
        return 0

    if args.command == "shapes":
        for name in ShapeRegistry.names():
            print(name)
        return 0

    parser.print_help()
    return 0


def main() -> None:
    sys.exit(cli())


if __name__ == "__main__":
    main()
