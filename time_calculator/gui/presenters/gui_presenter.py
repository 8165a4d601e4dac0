"""GUI presenter implementation using Qt signals."""

from PyQt6.QtCore import QObject, pyqtSignal

from time_calculator.models import HistoryEntry


class GUIPresenter(QObject):
    """Presenter that forwards output to the window through Qt signals.

    Implements PresenterProtocol through structural subtyping (duck typing),
    which avoids metaclass conflicts between QObject and Protocol.
    """

    info_signal = pyqtSignal(str)
    success_signal = pyqtSignal(str)
    warning_signal = pyqtSignal(str)
    error_signal = pyqtSignal(str)
    calculation_signal = pyqtSignal(str, str)  # display, trace
    history_entry_signal = pyqtSignal(object)  # HistoryEntry
    history_signal = pyqtSignal(list, int)  # list[HistoryEntry], total seconds

    def __init__(self, parent=None):
        """Initialize the GUI presenter.

        Args:
            parent: Optional parent QObject
        """
        super().__init__(parent)

    def show_info(self, message: str) -> None:
        self.info_signal.emit(message)

    def show_success(self, message: str) -> None:
        self.success_signal.emit(message)

    def show_warning(self, message: str) -> None:
        self.warning_signal.emit(message)

    def show_error(self, message: str) -> None:
        self.error_signal.emit(message)

    def show_calculation(self, display: str, trace: str) -> None:
        """Push the current value and running expression to the display."""
        self.calculation_signal.emit(display, trace)

    def show_history_entry(self, entry: HistoryEntry) -> None:
        self.history_entry_signal.emit(entry)

    def show_history(self, entries: list[HistoryEntry], total_seconds: int) -> None:
        self.history_signal.emit(entries, total_seconds)
