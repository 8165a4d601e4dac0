"""Calculator keypad."""

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import QGridLayout, QPushButton, QWidget

from time_calculator.gui.constants import KEYPAD_ROWS, WIDE_KEYS
from time_calculator.gui.resources.styles import SPACING
from time_calculator.models import Operator

ACCESSIBLE_NAMES = {
    "C": "Clear",
    "⌫": "Backspace",
    "%": "Percent",
    "=": "Equals",
    "+": "Add",
    "-": "Subtract",
    "×": "Multiply",
    "÷": "Divide",
}


class KeypadWidget(QWidget):
    """Grid of keypad buttons; emits the symbol of each pressed key."""

    key_pressed = pyqtSignal(str)

    def __init__(self, parent=None):
        super().__init__(parent)
        self.buttons: dict[str, QPushButton] = {}

        grid = QGridLayout()
        grid.setSpacing(SPACING.sm)
        grid.setContentsMargins(SPACING.md, SPACING.xs, SPACING.md, SPACING.md)

        for row, keys in enumerate(KEYPAD_ROWS):
            column = 0
            for key in keys:
                span = 2 if key in WIDE_KEYS else 1
                button = self._create_button(key)
                grid.addWidget(button, row, column, 1, span)
                column += span

        self.setLayout(grid)

    def _create_button(self, key: str) -> QPushButton:
        button = QPushButton(key)
        if key.isdigit():
            button.setObjectName("numberKey")
        elif Operator.from_symbol(key) is not None or key == "=":
            button.setObjectName("operatorKey")
        else:
            button.setObjectName("functionKey")
        button.setAccessibleName(ACCESSIBLE_NAMES.get(key, key))
        button.clicked.connect(lambda _checked=False, k=key: self.key_pressed.emit(k))
        self.buttons[key] = button
        return button
