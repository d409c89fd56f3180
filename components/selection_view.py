# components/selection_view.py
# Top-level view: a screen selector above the currently selected demo view.

import logging

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import QCheckBox, QHBoxLayout, QVBoxLayout, QWidget

from components.buttons_view import ButtonsView
from components.matrix_view import MatrixView
from components.picker_view import PickerView
from components.screen_selector_widget import ScreenSelectorWidget
from services.screen_selector import EMPTY_CONTENT, ScreenSelector
from utils.constants import InvalidScreenError, Screen

logger = logging.getLogger(__name__)

# Builds the widget for a non-empty screen; receives the Button Shapes flag
VIEW_FACTORIES = {
    Screen.BUTTONS: lambda button_shapes: ButtonsView(button_shapes_enabled=button_shapes),
    Screen.PICKER: lambda button_shapes: PickerView(),
    Screen.MATRIX: lambda button_shapes: MatrixView(),
}


class SelectionView(QWidget):
    """
    Hosts the screen selector and the view of the current screen.

    After every selection the view asks the selector to render the current
    screen and swaps the hosted widget when the content differs.
    """
    screen_changed = pyqtSignal(object)
    button_shapes_changed = pyqtSignal(bool)

    def __init__(self, initial_screen=Screen.IDLE, button_shapes_enabled=False, parent=None):
        super().__init__(parent)
        self.setObjectName("SelectionView")
        self.selector = ScreenSelector(initial_screen)
        self._button_shapes_enabled = bool(button_shapes_enabled)
        self._content = EMPTY_CONTENT
        self._view = None
        self.setup_ui()
        self._refresh()

    def setup_ui(self):
        layout = QVBoxLayout(self)

        top_row = QHBoxLayout()
        self.selector_widget = ScreenSelectorWidget(self)
        self.selector_widget.set_current_screen(self.selector.current_screen())
        self.selector_widget.label_selected.connect(self._on_label_selected)
        top_row.addWidget(self.selector_widget)
        top_row.addStretch()

        self.shapes_checkbox = QCheckBox("Button Shapes", self)
        self.shapes_checkbox.setChecked(self._button_shapes_enabled)
        self.shapes_checkbox.toggled.connect(self.set_button_shapes_enabled)
        top_row.addWidget(self.shapes_checkbox)
        layout.addLayout(top_row)

        self.content_layout = QVBoxLayout()
        self.content_layout.setContentsMargins(0, 0, 0, 0)
        layout.addLayout(self.content_layout, 1)

    # --- Selection ----------------------------------------------------------
    def _on_label_selected(self, label):
        try:
            self.selector.select_label(label)
        except InvalidScreenError:
            logger.warning("Ignoring selection of unknown screen label %r", label)
            return
        self._refresh()

    def select_screen(self, screen: Screen):
        """Selects ``screen`` as if the user had picked it in the combo box."""
        self.selector.select(screen)
        self.selector_widget.set_current_screen(screen)
        self._refresh()

    def current_screen(self) -> Screen:
        return self.selector.current_screen()

    def content(self):
        return self._content

    def current_view(self):
        """The hosted demo widget, or None while idle."""
        return self._view

    def _refresh(self):
        content = self.selector.render(self.selector.current_screen())
        if content == self._content and (self._view is not None or content.is_empty):
            return
        self._content = content

        if self._view is not None:
            self.content_layout.removeWidget(self._view)
            self._view.deleteLater()
            self._view = None

        if not content.is_empty:
            self._view = VIEW_FACTORIES[content.screen](self._button_shapes_enabled)
            self.content_layout.addWidget(self._view)

        logger.info("Showing screen %r", content.title or "idle")
        self.screen_changed.emit(self.selector.current_screen())

    # --- Button Shapes ------------------------------------------------------
    def button_shapes_enabled(self):
        return self._button_shapes_enabled

    def set_button_shapes_enabled(self, enabled):
        enabled = bool(enabled)
        if enabled == self._button_shapes_enabled:
            return
        self._button_shapes_enabled = enabled
        if self.shapes_checkbox.isChecked() != enabled:
            self.shapes_checkbox.setChecked(enabled)
        if hasattr(self._view, "set_button_shapes_enabled"):
            self._view.set_button_shapes_enabled(enabled)
        self.button_shapes_changed.emit(enabled)
