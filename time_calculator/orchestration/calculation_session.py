"""Key-driven calculation session: a pure transition function plus its owner."""

import logging
import uuid
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from datetime import datetime, timezone

from time_calculator.config import TimeCalculatorConfig
from time_calculator.exceptions import RestoreFailure
from time_calculator.interfaces import HistorySink
from time_calculator.models import CalculationStep, HistoryEntry, Operator, decode_steps
from time_calculator.services.evaluator import fold
from time_calculator.services.input_buffer import InputBuffer
from time_calculator.services.step_ledger import StepLedger

logger = logging.getLogger(__name__)

# Non-operator keys
KEY_CLEAR = "C"
KEY_BACKSPACE = "⌫"
KEY_PERCENT = "%"
KEY_EVALUATE = "="

DIGIT_KEYS = frozenset("0123456789")
OPERATOR_KEYS = frozenset(op.symbol for op in Operator)
KEY_SYMBOLS = DIGIT_KEYS | OPERATOR_KEYS | {KEY_CLEAR, KEY_BACKSPACE, KEY_PERCENT, KEY_EVALUATE}


@dataclass(frozen=True)
class CalculatorState:
    """Everything the calculator knows: the typed value and the ledger.

    ``finalized`` is set only after restoring a ledger whose last step has no
    operator: the buffer then shows a value that is already committed, and the
    next ``=`` re-folds the ledger instead of committing it a second time. A
    normal ``=`` always commits the buffer, so a second ``=`` commits the result
    again.
    """

    buffer: InputBuffer = InputBuffer()
    ledger: StepLedger = StepLedger()
    finalized: bool = False

    def display(self) -> str:
        return self.buffer.display()

    def trace(self) -> str:
        return self.ledger.trace()


@dataclass(frozen=True)
class Evaluation:
    """Effect of an evaluate key: the result and the ledger that produced it."""

    result_seconds: int
    steps: tuple[CalculationStep, ...]


def transition(state: CalculatorState, key: str) -> tuple[CalculatorState, Evaluation | None]:
    """Apply one key press to a calculator state.

    Args:
        state: Current state
        key: Key symbol from the keypad surface; unknown symbols are ignored

    Returns:
        Tuple of (new state, Evaluation effect or None). Only ``=`` produces an
        effect.
    """
    if key in DIGIT_KEYS:
        buffer = state.buffer.append_digit(key)
        if buffer == state.buffer:
            return state, None
        return CalculatorState(buffer, state.ledger), None

    operator = Operator.from_symbol(key)
    if operator is not None:
        ledger = state.ledger.commit_value(state.buffer.seconds, operator)
        return CalculatorState(state.buffer.clear(), ledger), None

    if key == KEY_CLEAR:
        return CalculatorState(), None

    if key == KEY_BACKSPACE:
        return CalculatorState(state.buffer.backspace(), state.ledger), None

    if key == KEY_PERCENT:
        return CalculatorState(state.buffer.percent(), state.ledger), None

    if key == KEY_EVALUATE:
        # The ledger is kept so further operators extend the evaluated chain
        ledger = state.ledger
        if not state.finalized:
            ledger = ledger.commit_value(state.buffer.seconds, None)
        result = fold(ledger)
        new_state = CalculatorState(InputBuffer.from_seconds(result), ledger)
        return new_state, Evaluation(result_seconds=result, steps=ledger.steps)

    logger.debug(f"Ignoring unknown key {key!r}")
    return state, None


def restored_state(steps: Iterable[CalculationStep]) -> CalculatorState:
    """Build the state shown after restoring a stored ledger.

    The buffer shows the value of the last step; the stored result is neither
    recomputed nor checked.
    """
    ledger = StepLedger(tuple(steps))
    last = ledger.last
    if last is None:
        return CalculatorState()
    return CalculatorState(
        InputBuffer.from_seconds(last.value),
        ledger,
        finalized=last.operator is None,
    )


def _new_entry_id() -> str:
    return uuid.uuid4().hex


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class CalculationSession:
    """Owns one calculator state and turns evaluations into history entries.

    The presentation layer forwards key symbols to ``handle_key`` and reads the
    display strings back; it never touches the state directly.
    """

    def __init__(
        self,
        config: TimeCalculatorConfig,
        history_sink: HistorySink | None = None,
        clock: Callable[[], datetime] = _utc_now,
        id_factory: Callable[[], str] = _new_entry_id,
    ):
        """Initialize the session.

        Args:
            config: Calculator configuration (default label format and color)
            history_sink: Receiver of history entries, or None to keep them unsaved
            clock: Source of creation timestamps
            id_factory: Source of entry identifiers
        """
        self.config = config
        self.history_sink = history_sink
        self._clock = clock
        self._id_factory = id_factory
        self._state = CalculatorState()

    @property
    def state(self) -> CalculatorState:
        return self._state

    @property
    def buffer_text(self) -> str:
        return self._state.buffer.text

    @property
    def steps(self) -> tuple[CalculationStep, ...]:
        return self._state.ledger.steps

    def current_display_string(self) -> str:
        """Current value as ``[-]HH:MM:SS``."""
        return self._state.display()

    def running_trace_string(self) -> str:
        """Running-expression readout."""
        return self._state.trace()

    def handle_key(self, key: str) -> HistoryEntry | None:
        """Process one key press.

        Args:
            key: Key symbol

        Returns:
            The history entry created by ``=``, otherwise None
        """
        self._state, effect = transition(self._state, key)
        if effect is None:
            return None

        entry = self._build_entry(effect)
        if self.history_sink is not None:
            self.history_sink.record(entry)
        return entry

    def handle_keys(self, keys: Iterable[str]) -> list[HistoryEntry]:
        """Process several key presses in order, collecting created entries."""
        entries = []
        for key in keys:
            entry = self.handle_key(key)
            if entry is not None:
                entries.append(entry)
        return entries

    def remove_step(self, index: int) -> None:
        """Remove a committed step from the ledger in progress."""
        ledger = self._state.ledger.remove_at(index)
        last = ledger.last
        finalized = self._state.finalized and last is not None and last.operator is None
        self._state = CalculatorState(self._state.buffer, ledger, finalized)

    def reset(self) -> None:
        self._state = CalculatorState()

    def restore(self, steps: Iterable[CalculationStep]) -> None:
        """Replace the ledger with stored steps so the user can keep editing.

        Args:
            steps: Stored ledger snapshot
        """
        self._state = restored_state(steps)

    def restore_entry(self, entry: HistoryEntry) -> None:
        self.restore(entry.steps)

    def restore_encoded(self, payload: str | bytes) -> None:
        """Restore from a raw stored steps payload.

        Args:
            payload: Steps JSON as stored with the history entry

        Raises:
            RestoreFailure: If the payload cannot be decoded; the session is
                left empty with buffer ``"0"``
        """
        try:
            steps = decode_steps(payload)
        except RestoreFailure as e:
            logger.warning(f"Could not restore calculation: {e}")
            self.reset()
            raise
        self.restore(steps)

    def _build_entry(self, effect: Evaluation) -> HistoryEntry:
        """Create the history entry for an evaluation.

        The default label is the creation time in local time; ``created_at``
        keeps the clock value as given (UTC by default).
        """
        now = self._clock()
        return HistoryEntry(
            id=self._id_factory(),
            result_seconds=effect.result_seconds,
            label=now.astimezone().strftime(self.config.label_timestamp_format),
            color_tag=self.config.default_color_tag,
            created_at=now,
            last_modified=now,
            steps=effect.steps,
        )
