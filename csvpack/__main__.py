"""
Command line entry point.

    python -m csvpack inspect ARCHIVE

Lists every CSV entry of an archive with its row count and header set,
using the same sandboxed extraction and reader as the importer. Useful for
finding out why an entry is not recognised on import.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import load_config
from .errors import ParseError, PathTraversalError
from .importer.table_reader import read_table
from .importer.unzipper import ZipUnpacker
from .utils.temp import cleanup_temp_dir, ensure_temp_dir

logger = logging.getLogger("csvpack")


def inspect_archive(archive: Path, work_dir: str) -> int:
    sandbox = ensure_temp_dir(prefix="inspect_", parent=work_dir)
    try:
        for entry_name, path in ZipUnpacker().iter_extract(archive, sandbox):
            try:
                table = read_table(path, name=entry_name)
            except ParseError as exc:
                print(f"{entry_name}: unreadable ({exc})")
                continue
            headers = ", ".join(sorted(table.header_set)) or "-"
            print(f"{entry_name}: {len(table.rows)} row(s); header set: {headers}")
    except PathTraversalError as exc:
        logger.error("%s", exc)
        return 2
    finally:
        cleanup_temp_dir(sandbox)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="csvpack", description="csvpack archive tools")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p_inspect = sub.add_parser("inspect", help="list the CSV entries of an archive")
    p_inspect.add_argument("archive", type=Path, help="path to a csvpack ZIP archive")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    cfg = load_config()

    if args.command == "inspect":
        return inspect_archive(args.archive, cfg.work_dir)
    return 1


if __name__ == "__main__":
    sys.exit(main())
