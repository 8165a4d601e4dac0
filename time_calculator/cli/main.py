"""Main CLI entry point for time_calculator."""

import argparse
import logging
import sys

from time_calculator import __version__
from time_calculator.cli.commands import calc, history, theme
from time_calculator.models import ColorScheme, ColorTag

COLOR_CHOICES = [tag.value for tag in ColorTag]


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="time-calculator",
        description="Add, subtract, multiply and divide HH:MM:SS durations",
        epilog="Use 'time-calculator <command> --help' for command-specific help",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--verbose", action="store_true", help="Show debug logging")
    parser.add_argument("--history-db", help="Path to the history database")
    parser.add_argument("--preferences", help="Path to the preferences file")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # time-calculator calc 01:30:00 + 00:45:00
    calc_parser = subparsers.add_parser(
        "calc",
        help="Evaluate a duration expression",
        description=(
            "Evaluate durations chained with + - × ÷ (or * x /). "
            "Durations are HH:MM:SS, MM:SS or up to six digits (HHMMSS)."
        ),
    )
    calc_parser.add_argument("tokens", nargs="+", help="Durations and operators")
    calc_parser.add_argument("--label", help="Label for the history entry")
    calc_parser.add_argument("--color", choices=COLOR_CHOICES, help="Color tag for the entry")
    calc_parser.add_argument(
        "--no-save",
        action="store_true",
        help="Do not store the calculation in history",
    )

    # time-calculator history ...
    history_parser = subparsers.add_parser(
        "history",
        help="Browse and manage calculation history",
        description="List, inspect, edit, delete and replay stored calculations",
    )
    history_sub = history_parser.add_subparsers(dest="history_command")

    list_parser = history_sub.add_parser("list", help="List recent calculations")
    list_parser.add_argument("--limit", type=int, help="Maximum entries to show")
    list_parser.add_argument("--date", help="Only entries created on YYYY-MM-DD")

    show_parser = history_sub.add_parser("show", help="Show one calculation")
    show_parser.add_argument("entry_id", help="Entry ID (or unique prefix)")

    edit_parser = history_sub.add_parser("edit", help="Change label or color")
    edit_parser.add_argument("entry_id", help="Entry ID (or unique prefix)")
    edit_parser.add_argument("--label", help="New label")
    edit_parser.add_argument("--color", choices=COLOR_CHOICES, help="New color tag")

    delete_parser = history_sub.add_parser("delete", help="Delete one calculation")
    delete_parser.add_argument("entry_id", help="Entry ID (or unique prefix)")

    history_sub.add_parser("clear", help="Delete all calculations")

    replay_parser = history_sub.add_parser(
        "replay",
        help="Restore a calculation and evaluate it again",
    )
    replay_parser.add_argument("entry_id", help="Entry ID (or unique prefix)")
    replay_parser.add_argument(
        "--save",
        action="store_true",
        help="Store the replayed evaluation as a new entry",
    )

    # time-calculator theme ...
    theme_parser = subparsers.add_parser(
        "theme",
        help="Show or change the color scheme",
        description="Show or change the accent color scheme used by the desktop app",
    )
    theme_sub = theme_parser.add_subparsers(dest="theme_command")
    theme_sub.add_parser("show", help="Show the selected scheme")
    theme_sub.add_parser("list", help="List available schemes")
    set_parser = theme_sub.add_parser("set", help="Select a scheme")
    set_parser.add_argument(
        "name",
        choices=[scheme.display_name.lower() for scheme in ColorScheme],
        type=str.lower,
        help="Scheme name",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point with subcommands."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Dispatch to appropriate command
    if args.command == "calc":
        return calc.calc_command(args)
    elif args.command == "history" and args.history_command:
        return history.history_command(args)
    elif args.command == "theme" and args.theme_command:
        return theme.theme_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
