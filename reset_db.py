#!/usr/bin/env python3
"""
Wipe the Social Media API SQLite database.

Drops the ``account`` and ``message`` tables and recreates the schema
from the application's migrations, leaving an empty database with
fresh id counters.  Useful before a demo or an end-to-end test run.

Usage:
    python reset_db.py --db ./social_media.db
    python reset_db.py --db ./social_media.db --yes

Without ``--yes`` you are asked to confirm before anything is deleted.
"""

import argparse
import os
import sqlite3
import sys

from social_media_api.app.core.db import reset_db


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Reset the Social Media API database (SQLite).")
    ap.add_argument("--db", required=True, help="Path to SQLite DB file (e.g., ./social_media.db)")
    ap.add_argument("--yes", action="store_true", help="Do not ask for confirmation.")
    args = ap.parse_args(argv)

    if not os.path.exists(args.db):
        print(f"[!] DB not found: {args.db}", file=sys.stderr)
        return 1

    if not args.yes:
        answer = input(f"Delete all accounts and messages in {args.db}? [y/N] ")
        if answer.strip().lower() not in {"y", "yes"}:
            print("[-] Aborted.")
            return 2

    conn = sqlite3.connect(args.db)
    try:
        reset_db(conn)
        print(f"[+] Database reset: {args.db}")
    finally:
        conn.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
