"""Dialog for removing steps from the calculation in progress."""

from PyQt6.QtWidgets import (
    QDialog,
    QDialogButtonBox,
    QHBoxLayout,
    QListWidget,
    QPushButton,
    QVBoxLayout,
)

from time_calculator.orchestration import CalculationSession
from time_calculator.services import StepLedger


class EditStepsDialog(QDialog):
    """List the committed steps and let the user remove them one at a time."""

    def __init__(self, session: CalculationSession, parent=None):
        """Initialize the dialog.

        Args:
            session: Session whose ledger is edited
            parent: Optional parent widget
        """
        super().__init__(parent)
        self.setWindowTitle("Edit Steps")
        self._session = session

        layout = QVBoxLayout()

        self.step_list = QListWidget()
        self.step_list.setAccessibleName("Calculation steps")
        layout.addWidget(self.step_list)

        row = QHBoxLayout()
        self.remove_button = QPushButton("Remove Step")
        self.remove_button.clicked.connect(self._remove_selected)
        row.addWidget(self.remove_button)
        row.addStretch()
        layout.addLayout(row)

        buttons = QDialogButtonBox(QDialogButtonBox.StandardButton.Close)
        buttons.rejected.connect(self.accept)
        layout.addWidget(buttons)

        self.setLayout(layout)
        self._refresh()

    def _refresh(self) -> None:
        self.step_list.clear()
        self.step_list.addItems(StepLedger(self._session.steps).trace_parts())
        self.remove_button.setEnabled(self.step_list.count() > 0)

    def _remove_selected(self) -> None:
        row = self.step_list.currentRow()
        if row < 0:
            return
        self._session.remove_step(row)
        self._refresh()
