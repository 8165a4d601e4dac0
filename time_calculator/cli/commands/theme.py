"""CLI commands for the color scheme preference."""

from time_calculator.cli.commands.common import config_from_args
from time_calculator.models import ColorScheme
from time_calculator.presenters import ConsolePresenter
from time_calculator.services import JsonPreferencesStore, ThemeService


def theme_command(args) -> int:
    """Execute the theme subcommands.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    config = config_from_args(args)
    presenter = ConsolePresenter()

    default = ColorScheme.from_name(config.default_theme) or ColorScheme.BLUE
    themes = ThemeService(JsonPreferencesStore(config.preferences_path), default=default)
    current = themes.current_scheme()

    if args.theme_command == "show":
        presenter.show_info(f"{current.display_name} ({current.accent})")
        return 0

    if args.theme_command == "list":
        for scheme in themes.available_schemes():
            marker = "*" if scheme is current else " "
            presenter.show_info(f"{marker} {scheme.display_name:8s} {scheme.accent}")
        return 0

    if args.theme_command == "set":
        scheme = ColorScheme.from_name(args.name)
        if scheme is None:
            presenter.show_error(f"Unknown theme: {args.name}")
            return 1
        try:
            themes.apply_scheme(scheme)
        except OSError as e:
            presenter.show_error(f"Could not save preference: {e}")
            return 1
        presenter.show_success(f"Theme set to {scheme.display_name}")
        return 0

    presenter.show_error(f"Unknown theme command: {args.theme_command}")
    return 1
