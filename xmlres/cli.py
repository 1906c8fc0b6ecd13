#!/usr/bin/env python3
"""
xmlres - XML resource file synchronization CLI

Imports localized string tables from a tree of XML files into a JSON record
file, and exports a JSON record file back into the tree.

Commands:
    import    - Read all resource files and print/save the merged records
    export    - Write records from a JSON file into the resource files
    providers - List available providers

Example workflow:
    1. xmlres import --base-dir Resources --output records.json
       → Returns: record count, storage groups, locales

    2. [Translate records.json]

    3. xmlres export --base-dir Resources --input records.json
       → Returns: one result per written file
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Optional

from .config import ProviderConfig, load_config
from .importer import drop_orphans
from .logger import setup_logger
from .models import ResourceRecord, StorageOperationResult
from .providers import ProviderRegistry, ResourcesProvider


def _build_config(args) -> ProviderConfig:
    config = load_config(args.config) if args.config else ProviderConfig()
    config = config.with_overrides(
        base_directory=args.base_dir,
        solution_path=args.solution_path,
        project_name=args.project,
        provider=args.provider,
    )

    errors = config.validate()
    if errors:
        raise ValueError("; ".join(errors))
    return config


def _create_provider(config: ProviderConfig) -> ResourcesProvider:
    return ProviderRegistry.get_provider(
        config.provider,
        storage_location=config.base_directory,
        solution_path=config.solution_path,
    )


def load_records(path: str) -> tuple[Optional[str], list[ResourceRecord]]:
    """
    Load records from a JSON file.

    Accepts either a plain list of records or the object written by
    'xmlres import' ({"project": ..., "records": [...]}).
    """
    data = json.loads(Path(path).read_text(encoding="utf-8"))

    project = None
    if isinstance(data, dict):
        project = data.get("project")
        data = data.get("records", [])

    if not isinstance(data, list):
        raise ValueError(f"Records file must contain a list of records: {path}")

    return project, [ResourceRecord.from_dict(item) for item in data]


def cmd_import(args) -> dict:
    """Import all records from the resource tree."""
    config = _build_config(args)
    provider = _create_provider(config)

    records = provider.import_resource_strings(config.project_name)
    total = len(records)
    if args.drop_orphans:
        records = drop_orphans(records)

    storage_groups = sorted({r.storage_group for r in records})
    locales = sorted({locale for r in records for locale in r.locales()})

    result = {
        "status": "ok",
        "project": config.project_name,
        "base_directory": str(provider.resolve_storage_location()),
        "stats": {
            "records": len(records),
            "dropped_orphans": total - len(records),
            "storage_groups": len(storage_groups),
            "locales": locales,
        },
    }

    payload = {
        "project": config.project_name,
        "records": [r.to_dict() for r in records],
    }

    if args.output:
        Path(args.output).write_text(
            json.dumps(payload, indent=2, ensure_ascii=False),
            encoding="utf-8",
        )
        result["records_file"] = args.output
    else:
        result["records"] = payload["records"]

    result["summary"] = (
        f"Imported {len(records)} records in {len(storage_groups)} storage groups "
        f"({len(locales)} locales)."
    )
    return result


def cmd_export(args) -> dict:
    """Export records from a JSON file into the resource tree."""
    file_project, records = load_records(args.input)
    if args.project is None and file_project:
        args.project = file_project

    config = _build_config(args)
    provider = _create_provider(config)

    results: list[StorageOperationResult] = []
    provider.export_resource_strings(config.project_name, records, results.append)

    failed = [r for r in results if not r.ok]
    return {
        "status": "ok" if not failed else "error",
        "project": config.project_name,
        "stats": {
            "records": len(records),
            "files_written": len(results) - len(failed),
            "files_failed": len(failed),
        },
        "results": [r.to_dict() for r in results],
        "summary": f"{len(results) - len(failed)} files written, {len(failed)} failed.",
    }


def cmd_providers(args) -> dict:
    """List available providers."""
    providers = ProviderRegistry.list_providers()
    return {
        "status": "ok",
        "providers": providers,
        "summary": f"{len(providers)} providers available: {', '.join(p['name'] for p in providers)}",
    }


def _add_storage_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--base-dir", "-d", help="Base directory of the resource files")
    parser.add_argument("--solution-path", "-s", help="Root for a relative base directory (default: current directory)")
    parser.add_argument("--config", "-c", help="YAML configuration file")
    parser.add_argument("--project", "-p", help="Project name reported in results")
    parser.add_argument("--provider", help="Provider name (default: xml)")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="xmlres",
        description="xmlres - XML resource file synchronization CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
File layout:
  <base dir>/<path>/<name>.xml            invariant strings
  <base dir>/<path>/<name>.<locale>.xml   translations, e.g. strings.de-DE.xml

File format:
  <strings>
    <string key="KEY" comment="OPTIONAL">TEXT</string>
  </strings>

Examples:
  # Import into a records file
  xmlres import --base-dir Resources --output records.json

  # Only records with invariant text
  xmlres import --base-dir Resources --drop-orphans

  # Export a records file
  xmlres export --base-dir Resources --input records.json

  # Use a configuration file
  xmlres import --config xmlres.yaml
        """,
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Log progress to stderr")
    parser.add_argument("--log-file", help="Also write log messages to this file")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    import_parser = subparsers.add_parser("import", help="Import records from resource files")
    _add_storage_arguments(import_parser)
    import_parser.add_argument("--output", "-o", help="Write records to this JSON file instead of stdout")
    import_parser.add_argument("--drop-orphans", action="store_true",
                               help="Drop records without invariant text")

    export_parser = subparsers.add_parser("export", help="Export records into resource files")
    _add_storage_arguments(export_parser)
    export_parser.add_argument("--input", "-i", required=True, help="JSON records file")

    subparsers.add_parser("providers", help="List available providers")

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    setup_logger(args.log_file, verbose=args.verbose)

    try:
        if args.command == "import":
            result = cmd_import(args)
        elif args.command == "export":
            result = cmd_export(args)
        else:
            result = cmd_providers(args)
    except Exception as e:
        print(json.dumps({
            "status": "error",
            "error": str(e),
            "error_type": type(e).__name__,
        }), file=sys.stderr)
        return 1

    print(json.dumps(result, indent=2, ensure_ascii=False))
    return 0 if result["status"] == "ok" else 1


if __name__ == "__main__":
    sys.exit(main())
