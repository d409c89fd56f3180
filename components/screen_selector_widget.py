# components/screen_selector_widget.py
from PyQt6.QtWidgets import QWidget, QVBoxLayout, QComboBox
from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QFont

from utils.constants import Screen, screen_label, screen_labels


class ScreenSelectorWidget(QWidget):
    """
    A combo box listing the demo screens by their display labels
    """
    label_selected = pyqtSignal(str)

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("ScreenSelectorWidget")
        self.setup_ui()

    def setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(2, 2, 2, 2)
        layout.setSpacing(2)

        self.screen_combo = QComboBox(self)
        self.screen_combo.setObjectName("ScreenSelectorCombo")
        font = QFont(self.screen_combo.font())
        font.setBold(True)
        self.screen_combo.setFont(font)

        self.screen_combo.addItems(screen_labels())

        # Connect signal
        self.screen_combo.currentTextChanged.connect(self.label_selected)

        layout.addWidget(self.screen_combo)

    def set_current_screen(self, screen: Screen):
        """Show ``screen`` in the combo box without re-emitting it"""
        index = self.screen_combo.findText(screen_label(screen))
        if index >= 0 and index != self.screen_combo.currentIndex():
            self.screen_combo.blockSignals(True)
            self.screen_combo.setCurrentIndex(index)
            self.screen_combo.blockSignals(False)

    def get_current_label(self):
        """Get the currently shown label"""
        return self.screen_combo.currentText()
