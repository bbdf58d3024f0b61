"""Fulfilment management CLI.

Usage:
    python src/manage.py locations                    # List known locations
    python src/manage.py import-warehouses plan.json  # Check a placement plan

A placement plan is a JSON list of warehouses:
    [{"business_unit_code": "MWH.001", "location": "ZWOLLE-001", "capacity": 30, "stock": 10}, ...]

Entries are created in order through the warehouse lifecycle against an
empty in-memory store, so later entries see earlier ones. Each rejection is
reported with its reason.
"""

import argparse
import json
import sys
from pathlib import Path


def list_locations():
    """Print the location catalogue."""
    from fulfilment.location.static_adapter import StaticLocationDirectory

    directory = StaticLocationDirectory()
    print(f"{'LOCATION':<16}{'MAX WAREHOUSES':>16}{'MAX CAPACITY':>14}")
    for identifier in directory.identifiers():
        location = directory.resolve(identifier)
        print(f"{location.identification:<16}{location.max_number_of_warehouses:>16}{location.max_capacity:>14}")


def check_plan(entries):
    """Create each entry in order against an empty store.

    Must run inside an active fulfilment domain context.
    Returns (accepted, rejected), where rejected holds (code, reason) pairs.
    """
    from protean.exceptions import ValidationError

    from fulfilment.location.static_adapter import StaticLocationDirectory
    from fulfilment.warehouse.errors import WarehouseValidationError
    from fulfilment.warehouse.lifecycle import WarehouseLifecycle
    from fulfilment.warehouse.memory import InMemoryWarehouseStore
    from fulfilment.warehouse.warehouse import Warehouse

    lifecycle = WarehouseLifecycle(InMemoryWarehouseStore(), StaticLocationDirectory())
    accepted, rejected = [], []
    for entry in entries:
        code = entry.get("business_unit_code")
        try:
            candidate = Warehouse(
                business_unit_code=code,
                location=entry.get("location"),
                capacity=entry.get("capacity"),
                stock=entry.get("stock"),
            )
            lifecycle.create(candidate)
        except WarehouseValidationError as exc:
            reason = exc.message
        except ValidationError as exc:
            # Malformed entry: report each field error.
            reason = "; ".join(f"{field}: {', '.join(map(str, msgs))}" for field, msgs in exc.messages.items())
        else:
            reason = None

        if reason is not None:
            print(f"  REJECTED {code}: {reason}")
            rejected.append((code, reason))
        else:
            print(f"  accepted {code} at {candidate.location}")
            accepted.append(code)
    return accepted, rejected


def import_warehouses(path):
    """Check the placement plan in `path`. Returns (accepted, rejected)."""
    from fulfilment.domain import fulfilment

    entries = json.loads(Path(path).read_text(encoding="utf-8"))

    fulfilment.init()
    with fulfilment.domain_context():
        accepted, rejected = check_plan(entries)

    print(f"Done. {len(accepted)} accepted, {len(rejected)} rejected.")
    return accepted, rejected


def main():
    parser = argparse.ArgumentParser(description="Fulfilment management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("locations", help="List known locations and their limits")

    import_parser = subparsers.add_parser("import-warehouses", help="Check a warehouse placement plan")
    import_parser.add_argument("file", help="JSON file with a list of warehouses")

    args = parser.parse_args()

    if args.command == "locations":
        list_locations()
    elif args.command == "import-warehouses":
        _, rejected = import_warehouses(args.file)
        if rejected:
            sys.exit(1)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
