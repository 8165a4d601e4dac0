"""Dialog for renaming and recoloring a history entry."""

from PyQt6.QtWidgets import (
    QComboBox,
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QLabel,
    QLineEdit,
    QVBoxLayout,
)

from time_calculator.models import ColorTag, HistoryEntry


class EditEntryDialog(QDialog):
    """Edit the label and color tag of a stored calculation.

    The result and steps are shown read-only; they never change here.
    """

    def __init__(self, entry: HistoryEntry, parent=None):
        """Initialize the dialog.

        Args:
            entry: Entry being edited
            parent: Optional parent widget
        """
        super().__init__(parent)
        self.setWindowTitle("Edit Calculation")
        self._entry = entry

        layout = QVBoxLayout()
        form = QFormLayout()

        self.label_edit = QLineEdit(entry.label)
        self.label_edit.setPlaceholderText("Calculation name")
        form.addRow("Name", self.label_edit)

        self.color_combo = QComboBox()
        for tag in ColorTag:
            self.color_combo.addItem(tag.value.capitalize(), tag.value)
        index = self.color_combo.findData(entry.color_tag)
        self.color_combo.setCurrentIndex(index if index >= 0 else 0)
        form.addRow("Color", self.color_combo)

        form.addRow("Result", QLabel(entry.display_string))
        expression = QLabel(entry.expression)
        expression.setWordWrap(True)
        form.addRow("Steps", expression)

        layout.addLayout(form)

        buttons = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Save | QDialogButtonBox.StandardButton.Cancel
        )
        buttons.accepted.connect(self.accept)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)

        self.setLayout(layout)

    def get_values(self) -> tuple[str, str]:
        """Get the edited (label, color tag)."""
        return self.label_edit.text().strip(), self.color_combo.currentData()
