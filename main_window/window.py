# main_window/window.py
# The MainWindow class, which hosts the selection view and persists settings.

from PyQt6.QtCore import QByteArray
from PyQt6.QtWidgets import QMainWindow

from components.selection_view import SelectionView
from services.settings_service import settings_service
from utils import constants


class MainWindow(QMainWindow):
    """
    The main application window. The selected screen lives only as long as
    the window; the Button Shapes switch and the geometry are saved on close.
    """

    def __init__(self, initial_screen=constants.Screen.IDLE, button_shapes_enabled=None):
        super().__init__()
        self.setWindowTitle("Tinker Buttons")
        self.resize(480, 720)

        if button_shapes_enabled is None:
            button_shapes_enabled = settings_service.get_value(constants.SETTING_SHOW_BUTTON_SHAPES, False)

        self.selection_view = SelectionView(
            initial_screen=initial_screen,
            button_shapes_enabled=bool(button_shapes_enabled),
        )
        self.setCentralWidget(self.selection_view)
        self.selection_view.button_shapes_changed.connect(self._on_button_shapes_changed)

        self.restore_window_state()

    def _on_button_shapes_changed(self, enabled):
        settings_service.set_value(constants.SETTING_SHOW_BUTTON_SHAPES, bool(enabled))

    def save_window_state(self):
        settings_service.set_value(
            constants.SETTING_WINDOW_GEOMETRY, self.saveGeometry().toHex().data().decode()
        )
        settings_service.save()

    def restore_window_state(self):
        geometry_hex = settings_service.get_value(constants.SETTING_WINDOW_GEOMETRY)
        if geometry_hex:
            self.restoreGeometry(QByteArray.fromHex(geometry_hex.encode()))

    def closeEvent(self, event):
        self.save_window_state()
        event.accept()
