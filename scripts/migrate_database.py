import sys
import os
import argparse

sys.path.append(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
)  # relative imports

from church_records import create_schema_app, db
from church_records.exceptions import ChurchRecordsError
from church_records.migrations import SchemaManager


def main(argv=None):
    parser = argparse.ArgumentParser(description="Manage the church fund records schema")
    subparsers = parser.add_subparsers(dest="command", required=True)

    upgrade_parser = subparsers.add_parser("upgrade", help="Apply pending migrations")
    upgrade_parser.add_argument("--to", type=int, default=None,
                                help="Target version (default: latest)")

    downgrade_parser = subparsers.add_parser("downgrade", help="Revert migrations")
    downgrade_parser.add_argument("--to", type=int, default=0,
                                  help="Target version (default: 0, empty store)")

    subparsers.add_parser("status", help="Show current and pending versions")

    args = parser.parse_args(argv)

    app = create_schema_app()
    with app.app_context():
        manager = SchemaManager(db.engine)
        try:
            if args.command == "upgrade":
                version = manager.upgrade(args.to)
                print(f"Schema upgraded to version {version}")
            elif args.command == "downgrade":
                version = manager.downgrade(args.to)
                print(f"Schema downgraded to version {version}")
            else:
                status = manager.status()
                print(f"Current version: {status['current_version']}")
                print(f"Head version: {status['head_version']}")
                print(f"Pending: {status['pending'] or 'none'}")
        except ChurchRecordsError as e:
            print(f"Migration failed: {e}")
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
