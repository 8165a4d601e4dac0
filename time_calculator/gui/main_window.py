"""Main window for the Time Calculator desktop app."""

import logging

from PyQt6.QtGui import QAction, QActionGroup
from PyQt6.QtWidgets import (
    QApplication,
    QMainWindow,
    QMessageBox,
    QSplitter,
    QVBoxLayout,
    QWidget,
)

from time_calculator import __version__
from time_calculator.config import TimeCalculatorConfig
from time_calculator.exceptions import RestoreFailure, TimeCalculatorException
from time_calculator.gui.constants import (
    KEYBOARD_KEYS,
    WINDOW_DEFAULT_HEIGHT,
    WINDOW_DEFAULT_WIDTH,
    WINDOW_MIN_HEIGHT,
    WINDOW_MIN_WIDTH,
)
from time_calculator.gui.presenters import GUIPresenter
from time_calculator.gui.resources.styles import get_stylesheet
from time_calculator.gui.widgets.dialogs.edit_entry_dialog import EditEntryDialog
from time_calculator.gui.widgets.dialogs.edit_steps_dialog import EditStepsDialog
from time_calculator.gui.widgets.display_widget import DisplayWidget
from time_calculator.gui.widgets.history_panel import HistoryPanel
from time_calculator.gui.widgets.keypad_widget import KeypadWidget
from time_calculator.models import ColorScheme
from time_calculator.orchestration import CalculationSession
from time_calculator.services import HistoryService, ThemeService

logger = logging.getLogger(__name__)

STATUS_TIMEOUT_MS = 4000


class MainWindow(QMainWindow):
    """Calculator window: display and keypad on the left, history on the right.

    The window only translates input into key symbols and renders whatever the
    session reports; all arithmetic happens in the session.
    """

    def __init__(
        self,
        config: TimeCalculatorConfig,
        session: CalculationSession,
        history_service: HistoryService,
        theme_service: ThemeService,
    ):
        """Initialize the main window.

        Args:
            config: Calculator configuration
            session: Session receiving key presses
            history_service: Store of past calculations
            theme_service: Source and sink of the selected color scheme
        """
        super().__init__()

        self.config = config
        self.session = session
        self.history_service = history_service
        self.theme_service = theme_service
        self.scheme = theme_service.current_scheme()

        self.presenter = GUIPresenter(self)
        self._setup_ui()
        self._connect_presenter_signals()

        self._apply_scheme(self.scheme)
        self.refresh_display()
        self.refresh_history()

    def _setup_ui(self) -> None:
        """Set up the user interface."""
        self.setWindowTitle("Time Calculator")
        self.setMinimumSize(WINDOW_MIN_WIDTH, WINDOW_MIN_HEIGHT)
        self.resize(WINDOW_DEFAULT_WIDTH, WINDOW_DEFAULT_HEIGHT)

        calculator = QWidget()
        calculator_layout = QVBoxLayout()
        calculator_layout.setContentsMargins(0, 0, 0, 0)

        self.display = DisplayWidget()
        self.display.trace_clicked.connect(self._open_steps_editor)
        calculator_layout.addStretch()
        calculator_layout.addWidget(self.display)

        self.keypad = KeypadWidget()
        self.keypad.key_pressed.connect(self.press_key)
        calculator_layout.addWidget(self.keypad)
        calculator.setLayout(calculator_layout)

        self.history_panel = HistoryPanel()
        self.history_panel.restore_requested.connect(self.restore_entry)
        self.history_panel.edit_requested.connect(self._edit_entry)
        self.history_panel.delete_requested.connect(self._delete_entry)
        self.history_panel.clear_requested.connect(self._clear_history)

        splitter = QSplitter()
        splitter.addWidget(calculator)
        splitter.addWidget(self.history_panel)
        splitter.setStretchFactor(0, 3)
        splitter.setStretchFactor(1, 2)
        self.setCentralWidget(splitter)

        self._setup_menu_bar()

    def _setup_menu_bar(self) -> None:
        """Set up the menu bar with theme selection."""
        menu_bar = self.menuBar()

        theme_menu = menu_bar.addMenu("&Theme")
        self.theme_actions: dict[ColorScheme, QAction] = {}
        group = QActionGroup(self)
        group.setExclusive(True)
        for scheme in self.theme_service.available_schemes():
            action = QAction(scheme.display_name, self, checkable=True)
            action.setChecked(scheme is self.scheme)
            action.triggered.connect(lambda _checked=False, s=scheme: self.select_scheme(s))
            group.addAction(action)
            theme_menu.addAction(action)
            self.theme_actions[scheme] = action

        help_menu = menu_bar.addMenu("&Help")
        about_action = QAction("&About", self)
        about_action.triggered.connect(self._show_about)
        help_menu.addAction(about_action)

    def _connect_presenter_signals(self) -> None:
        self.presenter.info_signal.connect(self._show_status)
        self.presenter.success_signal.connect(self._show_status)
        self.presenter.warning_signal.connect(self._show_status)
        self.presenter.error_signal.connect(self._show_error)
        self.presenter.calculation_signal.connect(self.display.set_values)

    # ------------------------------------------------------------------ input

    def keyPressEvent(self, event):
        """Translate physical keys into keypad symbols."""
        text = event.text()
        if len(text) == 1 and text.isdigit():
            self.press_key(text)
            return
        symbol = KEYBOARD_KEYS.get(event.key())
        if symbol is not None:
            self.press_key(symbol)
            return
        super().keyPressEvent(event)

    def press_key(self, key: str) -> None:
        """Forward a key symbol to the session and re-render."""
        try:
            entry = self.session.handle_key(key)
        except TimeCalculatorException as e:
            self.presenter.show_error(f"Could not save calculation: {e}")
            entry = None

        self.refresh_display()
        if entry is not None:
            self.refresh_history()
            self.presenter.show_success(f"Saved {entry.display_string}")

    # ---------------------------------------------------------------- render

    def refresh_display(self) -> None:
        self.presenter.show_calculation(
            self.session.current_display_string(),
            self.session.running_trace_string(),
        )

    def refresh_history(self) -> None:
        try:
            entries = self.history_service.get_history(self.config.history_limit)
            total = self.history_service.get_total_seconds()
        except TimeCalculatorException as e:
            self.presenter.show_error(f"Could not load history: {e}")
            return
        self.history_panel.set_entries(entries, self.scheme, total)

    def select_scheme(self, scheme: ColorScheme) -> None:
        """Select, persist and apply a color scheme."""
        self.scheme = self.theme_service.apply_scheme(scheme)
        self._apply_scheme(scheme)
        self.refresh_history()

    def _apply_scheme(self, scheme: ColorScheme) -> None:
        app = QApplication.instance()
        if app is not None:
            app.setStyleSheet(get_stylesheet(scheme))
        action = self.theme_actions.get(scheme)
        if action is not None:
            action.setChecked(True)

    # --------------------------------------------------------------- history

    def restore_entry(self, entry_id: str) -> None:
        """Load a stored calculation into the session for further editing."""
        try:
            payload = self.history_service.get_steps_payload(entry_id)
            if payload is None:
                self.presenter.show_warning("That calculation no longer exists")
                self.refresh_history()
                return
            self.session.restore_encoded(payload)
        except RestoreFailure as e:
            self.presenter.show_error(f"Could not restore calculation: {e}")
        except TimeCalculatorException as e:
            self.presenter.show_error(str(e))
        self.refresh_display()

    def _edit_entry(self, entry_id: str) -> None:
        try:
            entry = self.history_service.get_entry(entry_id)
            if entry is None:
                self.refresh_history()
                return
            dialog = EditEntryDialog(entry, self)
            if dialog.exec():
                label, color_tag = dialog.get_values()
                self.history_service.update_entry(entry_id, label=label, color_tag=color_tag)
        except TimeCalculatorException as e:
            self.presenter.show_error(f"Could not update calculation: {e}")
        self.refresh_history()

    def _delete_entry(self, entry_id: str) -> None:
        try:
            if self.history_service.delete_entry(entry_id):
                self.presenter.show_info("Calculation deleted")
        except TimeCalculatorException as e:
            self.presenter.show_error(f"Could not delete calculation: {e}")
        self.refresh_history()

    def _clear_history(self) -> None:
        reply = QMessageBox.question(
            self,
            "Clear History",
            "Delete every stored calculation?",
        )
        if reply != QMessageBox.StandardButton.Yes:
            return
        try:
            removed = self.history_service.clear_history()
            self.presenter.show_info(f"Removed {removed} calculations")
        except TimeCalculatorException as e:
            self.presenter.show_error(f"Could not clear history: {e}")
        self.refresh_history()

    def _open_steps_editor(self) -> None:
        dialog = EditStepsDialog(self.session, self)
        dialog.exec()
        self.refresh_display()

    # ---------------------------------------------------------------- status

    def _show_status(self, message: str) -> None:
        self.statusBar().showMessage(message, STATUS_TIMEOUT_MS)

    def _show_error(self, message: str) -> None:
        logger.warning(message)
        self.statusBar().showMessage(message, STATUS_TIMEOUT_MS)

    def _show_about(self) -> None:
        QMessageBox.about(
            self,
            "About Time Calculator",
            f"Time Calculator {__version__}\n\nAdd, subtract, multiply and divide HH:MM:SS durations.",
        )
