"""
CLI helper to dump a homepage record (message wall or contact submissions) as JSON.

Contact submissions have no read endpoint; this is how they are reviewed.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from homepage.dependencies import get_kv_store
from homepage.records import CONTACTS_KEY, MESSAGES_KEY, RecordCollection, newest_first


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Export homepage records")
    parser.add_argument(
        "record",
        choices=[MESSAGES_KEY, CONTACTS_KEY],
        help="Which record to export",
    )
    parser.add_argument(
        "--newest-first",
        action="store_true",
        help="Sort by timestamp, newest first (default: stored order)",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="JSON indentation",
    )
    args = parser.parse_args(argv)

    items = RecordCollection(get_kv_store(), args.record).load()
    if args.newest_first:
        items = newest_first(items)
    print(json.dumps(items, ensure_ascii=False, indent=args.indent))
    return 0 if items else 1


if __name__ == "__main__":
    sys.exit(main())
