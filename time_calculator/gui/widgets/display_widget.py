"""Readout of the current value and the running expression."""

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import QLabel, QVBoxLayout, QWidget

from time_calculator.gui.resources.styles import SPACING


class ClickableLabel(QLabel):
    """Label that emits ``clicked`` on a left mouse press."""

    clicked = pyqtSignal()

    def mousePressEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton:
            self.clicked.emit()
        super().mousePressEvent(event)


class DisplayWidget(QWidget):
    """Two right-aligned lines: the running trace above the current value.

    Clicking the trace emits ``trace_clicked`` so the window can open the step
    editor.
    """

    trace_clicked = pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)

        layout = QVBoxLayout()
        layout.setContentsMargins(SPACING.md, SPACING.md, SPACING.md, SPACING.xs)
        layout.setSpacing(SPACING.xxs)

        self.trace_label = ClickableLabel("")
        self.trace_label.setObjectName("traceLabel")
        self.trace_label.setAlignment(Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter)
        self.trace_label.setWordWrap(True)
        self.trace_label.setToolTip("Click to edit the steps")
        self.trace_label.setAccessibleName("Running calculation")
        self.trace_label.clicked.connect(self.trace_clicked.emit)
        layout.addWidget(self.trace_label)

        self.display_label = QLabel("00:00:00")
        self.display_label.setObjectName("displayLabel")
        self.display_label.setAlignment(
            Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter
        )
        self.display_label.setAccessibleName("Current value")
        layout.addWidget(self.display_label)

        self.setLayout(layout)

    def set_values(self, display: str, trace: str) -> None:
        """Show a new value and running expression.

        Args:
            display: Current value as HH:MM:SS
            trace: Running-expression readout
        """
        self.display_label.setText(display)
        self.trace_label.setText(trace)
