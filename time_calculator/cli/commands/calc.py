"""CLI command for evaluating a duration expression."""

import re

from time_calculator.cli.commands.common import config_from_args, open_history
from time_calculator.exceptions import TimeCalculatorException
from time_calculator.orchestration import KEY_EVALUATE, KEY_PERCENT, CalculationSession
from time_calculator.presenters import ConsolePresenter

OPERATOR_ALIASES = {
    "+": "+",
    "-": "-",
    "×": "×",
    "*": "×",
    "x": "×",
    "X": "×",
    "÷": "÷",
    "/": "÷",
}

DURATION_PATTERN = re.compile(r"^\d+(:\d{1,2}){0,2}$")
MAX_TYPED_DIGITS = 6


def duration_to_digits(token: str) -> str:
    """Convert a duration token to the digits a user would type.

    ``1:30:00`` becomes ``13000``; ``45:00`` becomes ``4500``; bare digits
    are taken as HHMMSS.

    Raises:
        ValueError: If the token is not a duration or needs more than six digits
    """
    if not DURATION_PATTERN.match(token):
        raise ValueError(f"Not a duration: {token!r}")

    parts = token.split(":")
    if len(parts) == 1:
        digits = parts[0]
    else:
        digits = parts[0] + "".join(part.zfill(2) for part in parts[1:])

    if len(digits.lstrip("0")) > MAX_TYPED_DIGITS:
        raise ValueError(f"Duration {token!r} has more than {MAX_TYPED_DIGITS} digits")
    return digits.lstrip("0") or "0"


def tokens_to_keys(tokens: list[str]) -> list[str]:
    """Translate command-line tokens into keypad symbols.

    Durations and operators must alternate; ``%`` may follow a duration and an
    implicit ``=`` is added at the end.

    Raises:
        ValueError: If the tokens do not form an expression
    """
    keys: list[str] = []
    expect_value = True
    for token in tokens:
        if token == KEY_EVALUATE:
            break
        if token == KEY_PERCENT:
            if expect_value:
                raise ValueError("'%' must follow a duration")
            keys.append(KEY_PERCENT)
            continue

        operator = OPERATOR_ALIASES.get(token)
        if operator is not None:
            if expect_value:
                raise ValueError(f"Expected a duration before {token!r}")
            keys.append(operator)
            expect_value = True
            continue

        if not expect_value:
            raise ValueError(f"Expected an operator before {token!r}")
        keys.extend(duration_to_digits(token))
        expect_value = False

    if expect_value:
        raise ValueError("Expression must end with a duration")
    keys.append(KEY_EVALUATE)
    return keys


def calc_command(args) -> int:
    """Execute the calc subcommand.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    config = config_from_args(args)
    presenter = ConsolePresenter()

    try:
        keys = tokens_to_keys(args.tokens)
    except ValueError as e:
        presenter.show_error(str(e))
        return 1

    session = CalculationSession(config)
    entries = session.handle_keys(keys)
    presenter.show_calculation(session.current_display_string(), session.running_trace_string())

    if args.no_save:
        return 0

    entry = entries[-1].with_details(
        modified_at=entries[-1].last_modified,
        label=args.label,
        color_tag=args.color,
    )
    try:
        open_history(config).record(entry)
    except TimeCalculatorException as e:
        presenter.show_error(f"Could not save to history: {e}")
        return 1

    presenter.show_success(f"Saved as {entry.id[:8]} ({entry.label})")
    return 0
