#!/usr/bin/env python3
"""
Validate a records data file before pointing the API at it.

Usage:
  python scripts/check_records.py data/records.json
"""
from __future__ import annotations

import argparse
import sys
from collections import Counter

from recordstore.domain.records import MalformedInputError
from recordstore.repositories.json_storage import load_file


def duplicate_ids(records) -> list[str]:
    counts = Counter(record.id for record in records)
    return [record_id for record_id, n in counts.items() if n > 1]


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Validate a records JSON file")
    ap.add_argument("path", help="JSON array of {id, name, description} objects")
    args = ap.parse_args(argv)

    try:
        records = load_file(args.path)
    except MalformedInputError as exc:
        sys.stderr.write(f"Invalid: {exc.message}\n")
        return 1

    print(f"OK: {len(records)} records")
    dups = duplicate_ids(records)
    if dups:
        # Not fatal: the repository keeps the last occurrence.
        print(f"  duplicate ids (last one wins): {', '.join(sorted(dups))}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
