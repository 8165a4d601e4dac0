"""Tests for calculation_session module."""

from datetime import datetime, timezone

import pytest

from time_calculator.exceptions import RestoreFailure
from time_calculator.models import CalculationStep, Operator, encode_steps
from time_calculator.orchestration.calculation_session import (
    CalculationSession,
    CalculatorState,
    restored_state,
    transition,
)
from time_calculator.services import InputBuffer, StepLedger


def press(session, keys):
    """Press each symbol in order; multi-character symbols are not used here."""
    return session.handle_keys(list(keys))


class TestTransition:
    """Tests for the pure transition function."""

    def test_digit_updates_buffer_only(self):
        state, effect = transition(CalculatorState(), "5")
        assert state.buffer.text == "5"
        assert state.ledger.is_empty
        assert effect is None

    def test_operator_commits_buffer(self):
        """Should commit the buffer with the pressed operator and reset it."""
        state = CalculatorState(InputBuffer("20000"), StepLedger())
        state, effect = transition(state, "×")
        assert state.ledger.steps == (CalculationStep(7200, Operator.MULTIPLY),)
        assert state.buffer.text == "0"
        assert effect is None

    def test_clear_resets_everything(self):
        state = CalculatorState(InputBuffer("5"), StepLedger().commit_value(60, Operator.ADD))
        state, _ = transition(state, "C")
        assert state == CalculatorState()

    def test_backspace_never_touches_ledger(self):
        ledger = StepLedger().commit_value(60, Operator.ADD)
        state, _ = transition(CalculatorState(InputBuffer("0"), ledger), "⌫")
        assert state.ledger == ledger
        assert state.buffer.text == "0"

    def test_percent(self):
        state, _ = transition(CalculatorState(InputBuffer("100000")), "%")
        assert state.buffer.text == "000600"

    def test_evaluate_returns_effect(self):
        state = CalculatorState(InputBuffer("10000"), StepLedger().commit_value(7200, Operator.ADD))
        state, effect = transition(state, "=")
        assert effect is not None
        assert effect.result_seconds == 10800
        assert effect.steps == (CalculationStep(7200, Operator.ADD), CalculationStep(3600, None))
        assert state.buffer.text == "030000"

    @pytest.mark.parametrize("key", ["", "a", "*", "/", "x", "==", "12", "Enter"])
    def test_unknown_keys_are_ignored(self, key):
        """Should return the same state and no effect for symbols outside the keypad."""
        state = CalculatorState(InputBuffer("12"), StepLedger().commit_value(60, Operator.ADD))
        new_state, effect = transition(state, key)
        assert new_state is state
        assert effect is None

    def test_state_is_not_mutated(self):
        state = CalculatorState()
        transition(state, "7")
        assert state.buffer.text == "0"


class TestSessionKeys:
    """Tests for CalculationSession.handle_key."""

    def test_display_while_typing(self, session):
        press(session, "13000")
        assert session.current_display_string() == "01:30:00"
        assert session.running_trace_string() == ""

    def test_two_hours_plus_one_hour(self, session):
        press(session, "20000+10000=")
        assert session.buffer_text == "030000"
        assert session.current_display_string() == "03:00:00"
        assert session.running_trace_string() == "02:00:00 + 01:00:00"

    def test_two_hours_times_two_hours(self, session):
        entries = press(session, "20000×20000=")
        assert entries[0].result_seconds == 14400

    def test_divide_by_zero_keeps_total(self, session):
        entries = press(session, "10000÷0=")
        assert entries[0].result_seconds == 3600

    def test_subtraction_to_negative(self, session):
        press(session, "100-200=")
        assert session.buffer_text == "-000100"
        assert session.current_display_string() == "-00:01:00"

    def test_backspace_only_affects_buffer(self, session):
        press(session, "5+12⌫")
        assert session.buffer_text == "1"
        assert len(session.steps) == 1

    def test_clear_discards_ledger(self, session):
        press(session, "5+6C")
        assert session.steps == ()
        assert session.buffer_text == "0"


class TestEvaluate:
    """Tests for the evaluate key."""

    def test_exactly_one_entry_per_evaluate(self, session, recording_sink):
        """Should emit one history entry for '=' and none for any other key."""
        press(session, "20000+10000%⌫C5×3")
        assert recording_sink.entries == []

        press(session, "=")
        assert len(recording_sink.entries) == 1

        press(session, "+1=")
        assert len(recording_sink.entries) == 2

    def test_entry_fields(self, session, recording_sink):
        entry = session.handle_keys(list("20000+10000="))[0]
        assert recording_sink.entries == [entry]
        assert entry.id == "entry-0001"
        assert entry.result_seconds == 10800
        assert entry.color_tag == "blue"
        assert entry.created_at == datetime(2025, 1, 2, 9, 30, tzinfo=timezone.utc)
        assert entry.label == entry.created_at.astimezone().strftime("%Y-%m-%d %H:%M:%S")
        assert entry.created_at == entry.last_modified
        assert entry.steps == session.steps

    def test_evaluate_keeps_ledger(self, session):
        """Should keep the committed steps plus the finalize step after '='."""
        press(session, "20000+10000")
        assert len(session.steps) == 1
        press(session, "=")
        assert len(session.steps) == 2
        assert session.steps[-1].operator is None

    def test_operator_after_evaluate_extends_chain(self, session):
        """An operator after '=' should continue the chain instead of starting over."""
        press(session, "20000+10000=")
        press(session, "+")
        assert len(session.steps) == 3
        assert session.steps[-1] == CalculationStep(10800, Operator.ADD)

    def test_repeated_evaluate_commits_result_again(self, session, recording_sink):
        """A second '=' commits the shown result as a new step."""
        press(session, "20000+10000=")
        assert len(session.steps) == 2

        press(session, "=")
        assert len(session.steps) == 3
        assert session.steps[-1] == CalculationStep(10800, None)
        assert [e.result_seconds for e in recording_sink.entries] == [10800, 21600]

    def test_evaluate_without_sink(self, test_config):
        session = CalculationSession(test_config)
        entry = session.handle_key("=")
        assert entry is not None
        assert entry.result_seconds == 0


class TestRestore:
    """Tests for restoring stored ledgers."""

    def test_restore_loads_last_value(self, session):
        steps = (CalculationStep(7200, Operator.ADD), CalculationStep(3600, None))
        session.restore(steps)
        assert session.steps == steps
        assert session.buffer_text == "010000"
        assert session.running_trace_string() == "02:00:00 + 01:00:00"

    def test_restore_empty_ledger(self, session):
        press(session, "5+")
        session.restore(())
        assert session.steps == ()
        assert session.buffer_text == "0"

    def test_restore_then_evaluate_reproduces_result(self, session):
        """Restoring an entry and pressing '=' should give the stored result."""
        original = press(session, "20000×13000-4500=")[0]
        session.reset()

        session.restore_entry(original)
        replayed = session.handle_key("=")
        assert replayed.result_seconds == original.result_seconds
        assert replayed.steps == original.steps

    def test_restore_does_not_validate_result(self, session, make_entry):
        entry = make_entry(result_seconds=1)
        session.restore_entry(entry)
        assert session.handle_key("=").result_seconds == 10800

    def test_operator_after_restore_extends_stored_chain(self, session, make_entry):
        """The restored last value is committed again by the next operator."""
        session.restore_entry(make_entry())
        entry = press(session, "+10000=")[0]
        assert [s.value for s in entry.steps] == [7200, 3600, 3600, 3600]
        assert entry.steps[-1] == CalculationStep(3600, None)
        assert entry.result_seconds == 18000

    def test_restore_encoded(self, session):
        steps = (CalculationStep(60, Operator.SUBTRACT), CalculationStep(30, None))
        session.restore_encoded(encode_steps(steps))
        assert session.steps == steps
        assert session.buffer_text == "000030"

    def test_restore_encoded_failure_resets_session(self, session):
        """Should raise RestoreFailure and leave an empty session behind."""
        press(session, "5+6")
        with pytest.raises(RestoreFailure):
            session.restore_encoded("{not json")
        assert session.steps == ()
        assert session.buffer_text == "0"

    def test_restored_state_for_unfinished_ledger(self):
        state = restored_state([CalculationStep(60, Operator.ADD)])
        assert not state.finalized
        assert state.buffer.text == "000100"


class TestRemoveStep:
    """Tests for CalculationSession.remove_step."""

    def test_remove_step(self, session):
        press(session, "1+2+3")
        session.remove_step(0)
        assert [s.value for s in session.steps] == [2]

    def test_remove_invalid_step_is_ignored(self, session):
        press(session, "1+")
        session.remove_step(3)
        assert len(session.steps) == 1

    def test_edited_evaluated_ledger_commits_shown_value(self, session):
        """After '=' the shown result is committed again even when steps were removed."""
        press(session, "100+200+300=")
        session.remove_step(1)
        entry = session.handle_key("=")
        assert entry.result_seconds == 60 + 180 + 360
        assert len(session.steps) == 3

    def test_edited_restored_ledger_refolds(self, session):
        session.restore(
            (
                CalculationStep(60, Operator.ADD),
                CalculationStep(120, Operator.ADD),
                CalculationStep(180, None),
            )
        )
        session.remove_step(1)
        entry = session.handle_key("=")
        assert entry.result_seconds == 240
        assert len(session.steps) == 2


class TestEvaluatedResult:
    """Tests for keys pressed while a result is shown."""

    def test_ignored_digit_leaves_state_unchanged(self, session):
        press(session, "20000+10000=")
        state = session.state
        press(session, "5")  # buffer already holds six digits
        assert session.state is state

    def test_restored_result_refolds_only_once(self, session, make_entry):
        session.restore_entry(make_entry())
        assert session.handle_key("=").result_seconds == 10800
        assert session.handle_key("=").result_seconds == 21600
        assert len(session.steps) == 3

    def test_backspace_starts_new_value(self, session):
        press(session, "20000+10000=⌫=")
        assert session.steps[-1] == CalculationStep(1800, None)
        assert len(session.steps) == 3
