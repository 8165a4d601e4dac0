"""Constants for the desktop front end."""

from PyQt6.QtCore import Qt

WINDOW_MIN_WIDTH = 360
WINDOW_MIN_HEIGHT = 560
WINDOW_DEFAULT_WIDTH = 720
WINDOW_DEFAULT_HEIGHT = 640

# Keypad layout, top to bottom
KEYPAD_ROWS = [
    ["C", "⌫", "%", "÷"],
    ["7", "8", "9", "×"],
    ["4", "5", "6", "-"],
    ["1", "2", "3", "+"],
    ["0", "="],
]

# Keys that span two columns
WIDE_KEYS = {"0"}

# Physical keyboard keys mapped to keypad symbols
KEYBOARD_KEYS = {
    Qt.Key.Key_Plus: "+",
    Qt.Key.Key_Minus: "-",
    Qt.Key.Key_Asterisk: "×",
    Qt.Key.Key_X: "×",
    Qt.Key.Key_Slash: "÷",
    Qt.Key.Key_Percent: "%",
    Qt.Key.Key_Equal: "=",
    Qt.Key.Key_Return: "=",
    Qt.Key.Key_Enter: "=",
    Qt.Key.Key_Backspace: "⌫",
    Qt.Key.Key_Escape: "C",
    Qt.Key.Key_Delete: "C",
}
