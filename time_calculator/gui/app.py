"""Main GUI application entry point."""

import sys

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QApplication, QMessageBox

from time_calculator.exceptions import StorageError
from time_calculator.gui.main_window import MainWindow
from time_calculator.gui.utils.config_manager import GUIConfigManager
from time_calculator.gui.utils.settings_store import ORGANIZATION_NAME, QSettingsPreferencesStore
from time_calculator.models import ColorScheme
from time_calculator.orchestration import CalculationSession
from time_calculator.services import HistoryService, ThemeService


def main():
    """Launch the Time Calculator GUI application."""
    QApplication.setHighDpiScaleFactorRoundingPolicy(
        Qt.HighDpiScaleFactorRoundingPolicy.PassThrough
    )

    app = QApplication(sys.argv)
    app.setApplicationName("Time Calculator")
    app.setOrganizationName(ORGANIZATION_NAME)

    config = GUIConfigManager.load_config()

    history_service = HistoryService(config.history_db_path)
    try:
        history_service.initialize()
    except StorageError as e:
        QMessageBox.critical(None, "Time Calculator", f"Cannot open history database:\n{e}")
        sys.exit(1)

    default_scheme = ColorScheme.from_name(config.default_theme) or ColorScheme.BLUE
    theme_service = ThemeService(QSettingsPreferencesStore(), default=default_scheme)
    session = CalculationSession(config, history_sink=history_service)

    window = MainWindow(config, session, history_service, theme_service)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
