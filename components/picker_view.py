# components/picker_view.py
# A dropdown-style picker with a placeholder entry.

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QComboBox, QHBoxLayout, QLabel, QVBoxLayout, QWidget

from utils.icon_manager import ICON_CHEVRON_DOWN, IconManager

PICKER_ITEMS = ["First", "Second", "Third"]
LIST_LABEL = "List label here"
LIST_PLACEHOLDER = "Select serial number"
PICKER_WIDTH = 352
PICKER_HEIGHT = 50
LINK_COLOR = "#007aff"


class PickerView(QWidget):
    """
    A captioned combo box that starts on a placeholder and offers a fixed list.
    """
    item_selected = pyqtSignal(str)

    def __init__(self, items=None, parent=None):
        super().__init__(parent)
        self.setObjectName("PickerView")
        self.items = list(PICKER_ITEMS if items is None else items)
        self.setup_ui()

    def setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 16, 0, 16)
        layout.setSpacing(4)

        self.caption = QLabel(LIST_LABEL, self)
        layout.addWidget(self.caption)

        self.combo = QComboBox(self)
        self.combo.setObjectName("PickerCombo")
        self.combo.setFixedSize(PICKER_WIDTH, PICKER_HEIGHT)
        self.combo.setPlaceholderText(LIST_PLACEHOLDER)
        font = QFont(self.combo.font())
        font.setBold(True)
        self.combo.setFont(font)
        self.combo.addItems(self.items)
        self.combo.setCurrentIndex(-1)

        self.combo.setStyleSheet(
            "QComboBox#PickerCombo { border: 1px solid gray; border-radius: 7px; padding: 0 16px; }"
            "QComboBox#PickerCombo::drop-down { border: none; width: 30px; }"
            "QComboBox#PickerCombo::down-arrow { image: none; }"
        )

        # Our own chevron sits over the native arrow and lets clicks through
        self.chevron = QLabel(self.combo)
        self.chevron.setPixmap(IconManager.create_pixmap(ICON_CHEVRON_DOWN, 14, color=LINK_COLOR))
        self.chevron.setAttribute(Qt.WidgetAttribute.WA_TransparentForMouseEvents)
        chevron_layout = QHBoxLayout(self.combo)
        chevron_layout.setContentsMargins(0, 0, 16, 0)
        chevron_layout.addStretch()
        chevron_layout.addWidget(self.chevron)

        self.combo.currentIndexChanged.connect(self._on_index_changed)
        layout.addWidget(self.combo)
        layout.addStretch()

    def _on_index_changed(self, index):
        if index < 0:
            return
        self.item_selected.emit(self.combo.itemText(index))

    def selected_item(self):
        """The picked item, or an empty string while the placeholder shows."""
        if self.combo.currentIndex() < 0:
            return ""
        return self.combo.currentText()

    def select_item(self, item):
        """Picks ``item`` programmatically. Returns False if it is not offered."""
        index = self.combo.findText(item)
        if index < 0:
            return False
        self.combo.setCurrentIndex(index)
        return True
