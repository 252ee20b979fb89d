#!/usr/bin/env python
"""
Mainframe FTP Report CLI.

Command-line interface for parsing saved FTP listings and JES replies.

Usage:
    mf-ftp parse-listing datasets.txt             # Dataset/member/USS listing
    mf-ftp parse-listing members.txt --json       # As JSON
    mf-ftp job-status status.txt --job-id JOB00083 --log jesmsglg.txt
    mf-ftp job-rc jesmsglg.txt                    # RC from a job log
    mf-ftp export datasets.txt --output out --format parquet

Example:
    python -m mf_ftp.cli --log-level DEBUG parse-listing datasets.txt --raw-fields
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Optional

from mf_ftp.config.settings import ParserConfig
from mf_ftp.core.base import OutputFormat, ParseError
from mf_ftp.core.models import (
    DatasetEntry,
    DatasetMemberEntry,
    LoadLibMemberEntry,
    USSEntry,
)
from mf_ftp.core.resolver import JobStatusResolver
from mf_ftp.parsers.jes_log import RCExtractor
from mf_ftp.parsers.listing import parse_listing
from mf_ftp.utils.file_utils import read_report, read_text
from mf_ftp.utils.log import configure_logging


# Record type -> (attribute, heading, width) columns for table output
TABLE_COLUMNS: dict[type, list[tuple[str, str, int]]] = {
    DatasetEntry: [
        ("name", "Dsname", 44), ("volume", "Volume", 7), ("ds_org", "Dsorg", 6),
        ("record_format", "Recfm", 6), ("record_length", "Lrecl", 6),
        ("extents", "Ext", 4), ("used_tracks", "Used", 6),
    ],
    DatasetMemberEntry: [
        ("name", "Name", 9), ("version", "VV.MM", 6), ("changed", "Changed", 17),
        ("size", "Size", 6), ("user_id", "Id", 8),
    ],
    LoadLibMemberEntry: [
        ("name", "Name", 9), ("size", "Size", 9), ("alias_of", "Alias-of", 9),
        ("amode", "Amode", 6), ("rmode", "Rmode", 6),
    ],
    USSEntry: [
        ("permissions", "Mode", 11), ("owner", "Owner", 9), ("size", "Size", 10),
        ("last_modified", "Modified", 11), ("name", "Name", 30),
    ],
}


def load_config(args) -> ParserConfig:
    """Build the configuration from --config and command line overrides."""
    config = ParserConfig.from_file(args.config) if args.config else ParserConfig()
    if args.log_level:
        config.log_level = args.log_level
    if getattr(args, "raw_fields", False):
        config.keep_raw_fields = True
    return config


def _cell(value: Any) -> str:
    if value is None:
        return "-"
    return str(value)


def print_listing(entries: list[Any]) -> None:
    """Print entries as a fixed-width table."""
    if not entries:
        print("No entries.")
        return

    columns = TABLE_COLUMNS[type(entries[0])]
    print(" ".join(f"{heading:<{width}}" for _, heading, width in columns))
    print("-" * (sum(width for _, _, width in columns) + len(columns) - 1))
    for entry in entries:
        if not entry.is_decoded and not getattr(entry, "name", ""):
            print(f"(undecoded) {entry.raw_text.strip()}")
            continue
        print(" ".join(
            f"{_cell(getattr(entry, attribute)):<{width}}"
            for attribute, _, width in columns
        ))
    print("-" * (sum(width for _, _, width in columns) + len(columns) - 1))
    print(f"Total: {len(entries)} entries")


def cmd_parse_listing(args):
    """Parse and display a saved listing."""
    config = load_config(args)
    try:
        entries = parse_listing(
            read_report(args.file),
            keep_raw_fields=config.keep_raw_fields,
            current_year=config.current_year,
        )
    except FileNotFoundError as e:
        print(f"Error: {e}")
        return 1
    except ParseError as e:
        print(f"Parse error: {e}")
        return 1

    if args.json:
        print(json.dumps([entry.to_dict() for entry in entries], indent=2))
    else:
        print_listing(entries)
    return 0


def cmd_job_status(args):
    """Assemble and display a job status from a saved JES reply."""
    config = load_config(args)
    resolver = JobStatusResolver(keep_raw_fields=config.keep_raw_fields)

    try:
        status = resolver.build_status(read_report(args.file), args.job_id)
        message_log = resolver.message_log_file(status)
        if message_log is not None and args.log:
            rc = RCExtractor().extract(read_text(args.log, config.log_encoding))
            status = resolver.apply_log_rc(status, rc)
    except FileNotFoundError as e:
        print(f"Error: {e}")
        return 1
    except ParseError as e:
        print(f"Parse error: {e}")
        return 1

    state = resolver.classify(status)
    if state is None:
        state = resolver.state_for_rc(status.rc)

    if args.json:
        data = status.to_dict()
        data["state"] = state.value
        data["terminal"] = state.is_terminal
        print(json.dumps(data, indent=2))
        return 0

    print(f"Job:     {status.job_name} ({status.job_id})")
    print(f"Owner:   {status.owner}")
    print(f"Status:  {status.status}")
    print(f"Retcode: {status.retcode or 'unknown'}")
    if state.is_terminal:
        print(f"State:   {state.value}")
    else:
        print(f"State:   {state.value} (not finished, query again later)")
    if status.spool_files:
        print(f"\n{'ID':>4} {'STEPNAME':<9} {'PROCSTEP':<9} C {'DDNAME':<9} {'BYTE-COUNT':>10}")
        for spool_file in status.spool_files:
            print(
                f"{spool_file.id:>4} {_cell(spool_file.step_name):<9} "
                f"{_cell(spool_file.proc_step):<9} {_cell(spool_file.spool_class)} "
                f"{_cell(spool_file.dd_name):<9} {_cell(spool_file.byte_count):>10}"
            )
    return 0


def cmd_job_rc(args):
    """Print the return code found in a saved job log."""
    config = load_config(args)
    try:
        rc = RCExtractor().extract(read_text(args.logfile, config.log_encoding))
    except FileNotFoundError as e:
        print(f"Error: {e}")
        return 1

    if rc is None:
        print("RC unknown: no completion message in log")
        return 1
    print(rc.render())
    return 0


def cmd_export(args):
    """Export a saved listing with Spark."""
    from mf_ftp.core.exporter import ListingExporter

    config = load_config(args)
    config.output_dir = args.output
    if args.format:
        config.output_format = args.format

    is_valid, errors = config.validate()
    if not is_valid:
        print("Configuration validation failed:")
        for error in errors:
            print(f"  - {error}")
        return 1

    try:
        entries = parse_listing(
            read_report(args.file),
            keep_raw_fields=config.keep_raw_fields,
            current_year=config.current_year,
        )
    except FileNotFoundError as e:
        print(f"Error: {e}")
        return 1
    except ParseError as e:
        print(f"Parse error: {e}")
        return 1

    if not entries:
        print("No entries to export.")
        return 0

    exporter = ListingExporter(config)
    try:
        result = exporter.export(entries, Path(args.file).stem, OutputFormat(config.output_format))
        manifest = exporter.save_manifest()
    finally:
        exporter.stop()

    print(f"Exported {result.record_count} {result.record_type} records to {result.output_path}")
    print(f"Manifest saved to: {manifest}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="mf-ftp",
        description="Mainframe FTP report parser",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--config", "-c", help="Configuration file (JSON)")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Parse listing command
    listing_parser = subparsers.add_parser("parse-listing", help="Parse a saved LIST reply")
    listing_parser.add_argument("file", help="Listing file to parse")
    listing_parser.add_argument("--raw-fields", action="store_true", help="Keep header -> text fields")
    listing_parser.add_argument("--json", action="store_true", help="Print entries as JSON")
    listing_parser.set_defaults(func=cmd_parse_listing)

    # Job status command
    status_parser = subparsers.add_parser("job-status", help="Parse a saved job status reply")
    status_parser.add_argument("file", help="Job status reply file")
    status_parser.add_argument("--job-id", "-j", required=True, help="Job ID that was queried")
    status_parser.add_argument("--log", "-l", help="JESMSGLG file for jobs without an RC")
    status_parser.add_argument("--json", action="store_true", help="Print status as JSON")
    status_parser.set_defaults(func=cmd_job_status)

    # Job RC command
    rc_parser = subparsers.add_parser("job-rc", help="Read the return code from a job log")
    rc_parser.add_argument("logfile", help="JESMSGLG file")
    rc_parser.set_defaults(func=cmd_job_rc)

    # Export command
    export_parser = subparsers.add_parser("export", help="Export a saved listing with Spark")
    export_parser.add_argument("file", help="Listing file to export")
    export_parser.add_argument("--output", "-o", required=True, help="Output directory")
    export_parser.add_argument(
        "--format", "-f",
        choices=[fmt.value for fmt in OutputFormat],
        help="Output format"
    )
    export_parser.set_defaults(func=cmd_export)

    return parser


def main(argv: Optional[list[str]] = None):
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    config = ParserConfig.from_file(args.config) if args.config else ParserConfig(log_level="WARNING")
    if args.log_level:
        config.log_level = args.log_level
    configure_logging(config.log_level_number)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
