"""
Weekly Fitness Tracker - Main Module
====================================

Prints a weekly fitness summary for each requested user from 7-day
step and calorie records.

Key Design Decisions:
1. Records are validated once at construction and never mutated
2. Statistics (averages, best day, on-track) are pure functions of a record
3. Reports are rendered to text by the core; only this module prints them
4. An unknown user name produces a notice, not an error

This module serves as the CLI entry point and orchestrates the workflow by
importing functions and classes from specialized modules.
"""

import argparse

# Import from modules
from weekly_tracker.config import DEFAULT_OUTPUT_PATH, DEFAULT_REPORT_NAMES
from weekly_tracker.data_loader import build_sample_records, load_users
from weekly_tracker.models import InvalidInputError
from weekly_tracker.registry import TrackerRegistry
from weekly_tracker.reporter import (
    print_report,
    generate_json_output,
    save_json_output
)


# =============================================================================
# CLI INTERFACE
# =============================================================================

def create_parser():
    """Create and return the argument parser for CLI."""
    parser = argparse.ArgumentParser(
        prog='Weekly Fitness Tracker',
        description='Prints weekly step and calorie summaries for registered users.',
        epilog='Example: python main.py --data data/users.json --user Alice --output summary.json',
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument(
        '--data',
        type=str,
        default=None,
        help='Path to user data JSON file, e.g. data/users.json (default: built-in sample users)'
    )

    parser.add_argument(
        '--user',
        action='append',
        dest='users',
        metavar='NAME',
        help='User to report on, case-insensitive; repeatable '
             f'(default: {", ".join(DEFAULT_REPORT_NAMES)})'
    )

    parser.add_argument(
        '--list-users',
        action='store_true',
        help='List registered users before the reports (default: False)'
    )

    parser.add_argument(
        '--output',
        type=str,
        nargs='?',
        const=DEFAULT_OUTPUT_PATH,
        default=None,
        help=f'Also save a JSON summary of the reported users (default path: {DEFAULT_OUTPUT_PATH})'
    )

    return parser


def build_registry(data_path=None) -> TrackerRegistry:
    """Load records from a file, or the built-in samples, into a registry."""
    records = load_users(data_path) if data_path else build_sample_records()

    registry = TrackerRegistry()
    for record in records:
        registry.add_user(record)
    return registry


def main(argv=None):
    """Main entry point for the application."""
    parser = create_parser()
    args = parser.parse_args(argv)

    print("\nWeekly Fitness Tracker")
    print("=" * 70)

    try:
        registry = build_registry(args.data)
        print(f"  Registered {len(registry)} user(s)")

        if args.list_users:
            print("\nRegistered users:")
            for name in registry.names():
                print(f"  - {name}")

        names = args.users or list(DEFAULT_REPORT_NAMES)
        for name in names:
            print_report(registry.generate_user_report(name))

        if args.output:
            found = [registry.get_user_by_name(name) for name in names]
            json_output = generate_json_output([r for r in found if r is not None])
            print()
            save_json_output(json_output, args.output)

    except InvalidInputError as e:
        print(f"\nError: {e}", flush=True)
        return 1
    except FileNotFoundError as e:
        print(f"\nFile Error: {e}", flush=True)
        print("   Check that the input file exists and the path is correct.\n", flush=True)
        return 1
    except (KeyError, TypeError) as e:
        print(f"\nData Structure Error: {e}", flush=True)
        print("   The JSON file structure is invalid.", flush=True)
        print("   User data must contain a 'users' list.\n", flush=True)
        return 1
    except ValueError as e:
        print(f"\nData Validation Error: {e}", flush=True)
        print("   Check your input data for invalid values or incorrect formats.\n", flush=True)
        return 1
    except OSError as e:
        print(f"\nFile Error: {e}", flush=True)
        return 1

    return 0


if __name__ == '__main__':
    raise SystemExit(main())
