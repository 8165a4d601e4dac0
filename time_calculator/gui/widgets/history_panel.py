"""Side panel listing stored calculations."""

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QColor, QIcon, QPixmap
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from time_calculator.gui.resources.styles import SPACING
from time_calculator.models import ColorScheme, HistoryEntry, resolve_entry_color
from time_calculator.utils import format_duration, format_hours_minutes

SWATCH_SIZE = 14


class HistoryPanel(QWidget):
    """List of history entries with restore, edit, delete and clear actions.

    The panel only emits entry IDs; the window talks to the history store.
    """

    restore_requested = pyqtSignal(str)
    edit_requested = pyqtSignal(str)
    delete_requested = pyqtSignal(str)
    clear_requested = pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)

        layout = QVBoxLayout()
        layout.setContentsMargins(SPACING.sm, SPACING.md, SPACING.md, SPACING.md)
        layout.setSpacing(SPACING.xs)

        title = QLabel("History")
        title.setAccessibleName("History")
        layout.addWidget(title)

        self.list_widget = QListWidget()
        self.list_widget.setAccessibleName("Calculation history")
        self.list_widget.itemActivated.connect(self._on_item_activated)
        self.list_widget.currentItemChanged.connect(lambda *_: self._update_buttons())
        layout.addWidget(self.list_widget, 1)

        self.total_label = QLabel()
        self.total_label.setObjectName("totalLabel")
        self.total_label.setAccessibleName("History total")
        self._show_total(0)
        layout.addWidget(self.total_label)

        buttons = QHBoxLayout()
        self.restore_button = QPushButton("Restore")
        self.restore_button.clicked.connect(lambda: self._emit_for_selected(self.restore_requested))
        self.edit_button = QPushButton("Edit")
        self.edit_button.clicked.connect(lambda: self._emit_for_selected(self.edit_requested))
        self.delete_button = QPushButton("Delete")
        self.delete_button.clicked.connect(lambda: self._emit_for_selected(self.delete_requested))
        self.clear_button = QPushButton("Clear")
        self.clear_button.clicked.connect(self.clear_requested.emit)
        for button in (self.restore_button, self.edit_button, self.delete_button, self.clear_button):
            button.setObjectName("functionKey")
            buttons.addWidget(button)
        layout.addLayout(buttons)

        self.setLayout(layout)
        self._update_buttons()

    def set_entries(
        self,
        entries: list[HistoryEntry],
        scheme: ColorScheme,
        total_seconds: int = 0,
    ) -> None:
        """Replace the listed entries and the total shown under them.

        Args:
            entries: Entries to show, newest first
            scheme: Active scheme, used to resolve entry colors
            total_seconds: Sum of every stored result
        """
        self._show_total(total_seconds)
        self.list_widget.clear()
        for entry in entries:
            item = QListWidgetItem(f"{entry.display_string}   {entry.label}")
            item.setData(Qt.ItemDataRole.UserRole, entry.id)
            item.setToolTip(entry.expression)
            item.setIcon(self._swatch(resolve_entry_color(entry.color_tag, scheme)))
            self.list_widget.addItem(item)
        self._update_buttons()

    def _show_total(self, seconds: int) -> None:
        self.total_label.setText(f"Total: {format_duration(seconds)} ({format_hours_minutes(seconds)})")

    def selected_entry_id(self) -> str | None:
        item = self.list_widget.currentItem()
        if item is None:
            return None
        return item.data(Qt.ItemDataRole.UserRole)

    def _on_item_activated(self, item: QListWidgetItem) -> None:
        self.restore_requested.emit(item.data(Qt.ItemDataRole.UserRole))

    def _emit_for_selected(self, signal) -> None:
        entry_id = self.selected_entry_id()
        if entry_id is not None:
            signal.emit(entry_id)

    def _update_buttons(self) -> None:
        has_selection = self.list_widget.currentItem() is not None
        self.restore_button.setEnabled(has_selection)
        self.edit_button.setEnabled(has_selection)
        self.delete_button.setEnabled(has_selection)
        self.clear_button.setEnabled(self.list_widget.count() > 0)

    @staticmethod
    def _swatch(color: str) -> QIcon:
        pixmap = QPixmap(SWATCH_SIZE, SWATCH_SIZE)
        pixmap.fill(QColor(color))
        return QIcon(pixmap)
