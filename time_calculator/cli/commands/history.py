"""CLI commands for browsing and managing calculation history."""

from datetime import date

from time_calculator.cli.commands.common import config_from_args, open_history
from time_calculator.exceptions import (
    HistoryEntryNotFoundError,
    RestoreFailure,
    TimeCalculatorException,
)
from time_calculator.orchestration import KEY_EVALUATE, CalculationSession
from time_calculator.presenters import ConsolePresenter
from time_calculator.services import HistoryService


def _require_id(service: HistoryService, prefix: str) -> str:
    """Expand an ID prefix or raise if it matches zero or several entries."""
    entry_id = service.resolve_id(prefix)
    if entry_id is None:
        raise HistoryEntryNotFoundError(f"No single history entry matches {prefix!r}")
    return entry_id


def history_command(args) -> int:
    """Execute the history subcommands.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    config = config_from_args(args)
    presenter = ConsolePresenter()

    try:
        service = open_history(config)

        if args.history_command == "list":
            if args.date:
                try:
                    day = date.fromisoformat(args.date)
                except ValueError:
                    presenter.show_error(f"Invalid date {args.date!r}, expected YYYY-MM-DD")
                    return 1
                entries = service.get_entries_on(day)
                total = service.get_total_seconds(day)
            else:
                entries = service.get_history(args.limit or config.history_limit)
                total = service.get_total_seconds()
            presenter.show_history(entries, total)
            return 0

        entry_id = None
        if args.history_command != "clear":
            entry_id = _require_id(service, args.entry_id)

        if args.history_command == "show":
            entry = service.get_entry(entry_id)
            if entry is None:
                raise HistoryEntryNotFoundError(f"History entry {entry_id} not found")
            presenter.show_history_entry(entry)
            return 0

        if args.history_command == "edit":
            if args.label is None and args.color is None:
                presenter.show_warning("Nothing to change; pass --label and/or --color")
                return 1
            updated = service.update_entry(entry_id, label=args.label, color_tag=args.color)
            if updated is None:
                raise HistoryEntryNotFoundError(f"History entry {entry_id} not found")
            presenter.show_success(f"Updated {entry_id[:8]}")
            presenter.show_history_entry(updated)
            return 0

        if args.history_command == "delete":
            if not service.delete_entry(entry_id):
                raise HistoryEntryNotFoundError(f"History entry {entry_id} not found")
            presenter.show_success(f"Deleted {entry_id[:8]}")
            return 0

        if args.history_command == "clear":
            removed = service.clear_history()
            presenter.show_success(f"Removed {removed} entries")
            return 0

        if args.history_command == "replay":
            return _replay(service, entry_id, args.save, config, presenter)

    except RestoreFailure as e:
        presenter.show_error(f"Could not restore calculation: {e}")
        return 1
    except TimeCalculatorException as e:
        presenter.show_error(str(e))
        return 1

    presenter.show_error(f"Unknown history command: {args.history_command}")
    return 1


def _replay(service: HistoryService, entry_id: str, save: bool, config, presenter) -> int:
    """Restore a stored ledger, evaluate it and report the result."""
    payload = service.get_steps_payload(entry_id)
    if payload is None:
        raise HistoryEntryNotFoundError(f"History entry {entry_id} not found")

    session = CalculationSession(config, history_sink=service if save else None)
    session.restore_encoded(payload)
    entry = session.handle_key(KEY_EVALUATE)
    presenter.show_calculation(session.current_display_string(), session.running_trace_string())

    stored = service.get_entry(entry_id)
    if stored is not None and entry is not None and stored.result_seconds != entry.result_seconds:
        presenter.show_warning(
            f"Stored result was {stored.display_string}, replay gives {entry.display_string}"
        )
    if save and entry is not None:
        presenter.show_success(f"Saved as {entry.id[:8]}")
    return 0
