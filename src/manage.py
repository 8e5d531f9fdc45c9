"""Backoffice database management CLI.

Creates and drops the relational schema for the backoffice domain using
the setup_db/drop_db utilities.

Usage:
    PROTEAN_ENV=production python src/manage.py setup-db   # Create all tables
    PROTEAN_ENV=production python src/manage.py drop-db    # Drop all tables
"""

import argparse
import sys


def setup_database():
    """Create the database schema for the backoffice domain."""
    from backoffice.domain import backoffice
    from backoffice.utils.db import setup_db

    print("Initializing backoffice domain...")
    backoffice.init()
    print("Creating backoffice database schema...")
    setup_db(backoffice)
    print("Done.")


def drop_database():
    """Drop the database schema for the backoffice domain."""
    from backoffice.domain import backoffice
    from backoffice.utils.db import drop_db

    print("Initializing backoffice domain...")
    backoffice.init()
    print("Dropping backoffice database schema...")
    drop_db(backoffice)
    print("Done.")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Backoffice database management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    args = parser.parse_args(argv)

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
