#!/usr/bin/env python3
"""
Rewrite a records file in canonical form (one record per id, pretty JSON).

Usage:
  python scripts/export_records.py data/records.json out/records.json [--sort]
"""
from __future__ import annotations

import argparse
import sys

from recordstore.domain.records import MalformedInputError
from recordstore.repositories.json_storage import load_file, save
from recordstore.repositories.memory_repository import InMemoryRepository


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Normalize a records JSON file")
    ap.add_argument("source", help="Input JSON file")
    ap.add_argument("dest", help="Output JSON file (parent dirs are created)")
    ap.add_argument("--sort", action="store_true", help="Order output by id")
    args = ap.parse_args(argv)

    try:
        repo = InMemoryRepository.from_records(load_file(args.source))
    except MalformedInputError as exc:
        sys.stderr.write(f"Invalid: {exc.message}\n")
        return 1

    records = repo.find_all()
    if args.sort:
        records.sort(key=lambda record: record.id)
    save(args.dest, records)
    print(f"OK: wrote {len(records)} records to {args.dest}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
