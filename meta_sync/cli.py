"""Command-line interface for resolving sync config and extracting partition values."""

import argparse
import json
import logging
import sys
from typing import Any, Dict, Iterable, List, Optional, TextIO

import yaml

from meta_sync.application.config_properties import (
    META_SYNC_ASSUME_DATE_PARTITION,
    META_SYNC_BASE_FILE_FORMAT,
    META_SYNC_BASE_PATH,
    META_SYNC_DATABASE_NAME,
    META_SYNC_DECODE_PARTITION,
    META_SYNC_PARTITION_EXTRACTOR_CLASS,
    META_SYNC_PARTITION_FIELDS,
    META_SYNC_TABLE_NAME,
    SYNC_PROPERTIES,
)
from meta_sync.application.partition_sync_use_case import PartitionSyncUseCase
from meta_sync.application.sync_config import SyncConfig
from meta_sync.domain.errors import ConfigurationError, InferenceCycleError, PartitionParseError
from meta_sync.infrastructure.config_loader import YamlPropertiesLoader
from meta_sync.infrastructure.partitioning import PartitionValueExtractorFactory

# argparse destination -> property key
_FLAG_PROPERTIES = {
    "database": META_SYNC_DATABASE_NAME.key,
    "table": META_SYNC_TABLE_NAME.key,
    "base_path": META_SYNC_BASE_PATH.key,
    "base_file_format": META_SYNC_BASE_FILE_FORMAT.key,
    "partitioned_by": META_SYNC_PARTITION_FIELDS.key,
    "partition_value_extractor": META_SYNC_PARTITION_EXTRACTOR_CLASS.key,
    "assume_date_partitioning": META_SYNC_ASSUME_DATE_PARTITION.key,
    "decode_partition": META_SYNC_DECODE_PARTITION.key,
}


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        description="Resolve sync configuration and extract partition values from partition paths",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--database", help="Name of the target database")
    parser.add_argument("--table", help="Name of the target table")
    parser.add_argument("--base-path", help="Base path of the table to sync")
    parser.add_argument("--base-file-format", help="Format of the base files (e.g., PARQUET)")
    parser.add_argument(
        "--partitioned-by",
        action="append",
        help="Partition fields, comma-separated or repeated",
    )
    parser.add_argument(
        "--partition-value-extractor",
        help="Extractor identifier or alias (e.g., 'hive_style')",
    )
    parser.add_argument(
        "--assume-date-partitioning",
        action="store_const",
        const="true",
        help="Assume yyyy/mm/dd partitioning",
    )
    parser.add_argument(
        "--decode-partition",
        action="store_const",
        const="true",
        help="URL-decode partition values",
    )
    parser.add_argument(
        "--props",
        action="append",
        default=[],
        help="YAML properties file (may be repeated; later files win)",
    )
    parser.add_argument(
        "--prop",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Single property override (may be repeated)",
    )
    parser.add_argument(
        "--paths-file",
        help="File with one partition path per line (default: stdin)",
    )
    parser.add_argument(
        "--skip-invalid",
        action="store_true",
        help="Skip partition paths that cannot be parsed instead of failing",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=1,
        help="Number of parallel extraction workers (default: 1)",
    )
    parser.add_argument(
        "--show-config",
        action="store_true",
        help="Print the resolved configuration and exit",
    )
    parser.add_argument(
        "--list-properties",
        action="store_true",
        help="List recognized properties and exit",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging (DEBUG level)",
    )
    return parser


def _parse_prop(item: str) -> Dict[str, str]:
    key, sep, value = item.partition("=")
    if not sep or not key.strip():
        raise ConfigurationError(f"Invalid --prop '{item}' (expected KEY=VALUE)")
    return {key.strip(): value}


def collect_properties(args: argparse.Namespace) -> Dict[str, str]:
    """Merge properties files, --prop overrides and dedicated flags.

    Precedence (highest last): --props files, --prop overrides, flags.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Raw property bag.
    """
    properties: Dict[str, str] = {}

    loader = YamlPropertiesLoader()
    for source in args.props:
        properties.update(loader.load_properties(source))

    for item in args.prop:
        properties.update(_parse_prop(item))

    for dest, key in _FLAG_PROPERTIES.items():
        value = getattr(args, dest, None)
        if value is None:
            continue
        if isinstance(value, list):
            value = ",".join(value)
        properties[key] = value

    return properties


def _read_paths(stream: TextIO) -> List[str]:
    return [line.rstrip("\n") for line in stream if line.strip()]


def _write_json_lines(records: Iterable[Dict[str, Any]], out: TextIO) -> None:
    for record in records:
        out.write(json.dumps(record) + "\n")


def _list_properties(out: TextIO) -> int:
    for prop in SYNC_PROPERTIES:
        default = prop.default_value if prop.has_default() else "(required)"
        out.write(f"{prop.key}\n    default: {default}\n    {prop.documentation}\n")
    return 0


def _execute_sync(args: argparse.Namespace, out: TextIO) -> int:
    """Resolve the configuration and extract partition values without error handling.

    Args:
        args: Parsed command-line arguments.
        out: Output stream.

    Returns:
        Exit code (0 for success).
    """
    if args.list_properties:
        return _list_properties(out)

    config = SyncConfig.from_properties(collect_properties(args))
    extractor = PartitionValueExtractorFactory.create(config)

    if args.show_config:
        out.write(json.dumps(config.to_dict(), indent=2) + "\n")
        return 0

    use_case = PartitionSyncUseCase(
        config=config,
        extractor=extractor,
        skip_invalid=args.skip_invalid,
        workers=args.workers,
    )

    if args.paths_file:
        with open(args.paths_file, encoding="utf-8") as f:
            paths = _read_paths(f)
    else:
        paths = _read_paths(sys.stdin)

    results = use_case.execute(paths)
    _write_json_lines(
        ({"partition_path": r.partition_path, "values": list(r.values)} for r in results), out
    )
    return 0


def _handle_error(error: BaseException) -> int:
    """Handle errors and return appropriate exit code.

    Args:
        error: Exception or BaseException that was raised.

    Returns:
        Exit code (1 for errors, 130 for KeyboardInterrupt).
    """
    if isinstance(error, FileNotFoundError):
        print(f"✗ File not found: {error}", file=sys.stderr)
        return 1
    if isinstance(error, yaml.YAMLError):
        print(f"✗ Invalid YAML properties: {error}", file=sys.stderr)
        return 1
    if isinstance(error, InferenceCycleError):
        print(f"✗ Configuration inference error: {error}", file=sys.stderr)
        return 1
    if isinstance(error, PartitionParseError):
        print(f"✗ Partition parse error: {error}", file=sys.stderr)
        return 1
    if isinstance(error, ValueError):
        print(f"✗ Configuration error: {error}", file=sys.stderr)
        return 1
    if isinstance(error, OSError):
        print(f"✗ I/O error: {error}", file=sys.stderr)
        return 1
    if isinstance(error, KeyboardInterrupt):
        print("\n✗ Operation cancelled by user", file=sys.stderr)
        return 130  # Standard exit code for SIGINT

    # Fallback for unexpected errors
    print(f"✗ Unexpected error: {error}", file=sys.stderr)
    return 1


def run_sync(args: argparse.Namespace, out: Optional[TextIO] = None) -> int:
    """Run partition value extraction with error handling.

    Args:
        args: Parsed command-line arguments.
        out: Output stream (default: stdout).

    Returns:
        Exit code (0 for success, 1 for error, 130 for KeyboardInterrupt).
    """
    try:
        return _execute_sync(args, out or sys.stdout)
    except KeyboardInterrupt as error:
        return _handle_error(error)
    except (FileNotFoundError, yaml.YAMLError, ValueError, OSError) as error:
        return _handle_error(error)


def main(argv: Optional[List[str]] = None):
    """Main entry point for CLI."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )

    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logging.info("Verbose logging enabled")

    exit_code = run_sync(args)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
