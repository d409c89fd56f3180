# components/matrix_view.py
# Grid comparing every kind of button with Button Shapes off and on.

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QGridLayout, QLabel, QPushButton, QWidget

from tools.button import apply_button_shapes, create_plain_button, create_regular_button, demo_action
from tools.button_styles import get_styles

COLUMN_TITLES = ("Button Shapes Off", "Button Shapes On")
PLAIN_ROW_NAME = "Plain"


class MatrixView(QWidget):
    """
    One row per button kind, one column per Button Shapes setting.

    Cells are addressed by ``(row_name, shapes_enabled)``. The Button Shapes
    checkbox of the window does not affect this view: both settings are
    always on screen side by side.
    """

    def __init__(self, action=demo_action, parent=None):
        super().__init__(parent)
        self.setObjectName("MatrixView")
        self._action = action
        self.cells = {}
        self.setup_ui()

    def setup_ui(self):
        grid = QGridLayout(self)
        grid.setHorizontalSpacing(24)
        grid.setVerticalSpacing(12)

        for column, title in enumerate(COLUMN_TITLES, start=1):
            header = QLabel(title, self)
            font = header.font()
            font.setBold(True)
            header.setFont(font)
            grid.addWidget(header, 0, column, Qt.AlignmentFlag.AlignHCenter)

        rows = [(PLAIN_ROW_NAME, None)] + [(style["name"], style) for style in get_styles()]
        for row, (name, style) in enumerate(rows, start=1):
            grid.addWidget(QLabel(name, self), row, 0)
            for column, enabled in enumerate((False, True), start=1):
                button = self._create_button(style)
                apply_button_shapes(button, enabled)
                self.cells[(name, enabled)] = button
                grid.addWidget(button, row, column, Qt.AlignmentFlag.AlignHCenter)

        grid.setRowStretch(len(rows) + 1, 1)

    def _create_button(self, style) -> QPushButton:
        if style is None:
            return create_plain_button("Button", self._action, parent=self)
        props = style["properties"]
        return create_regular_button(
            "Button",
            self._action,
            parent=self,
            bg_color=props["background_color"],
            text_color=props["text_color"],
            corner_radius=props["border_radius"],
        )

    def row_names(self):
        names = []
        for name, _enabled in self.cells:
            if name not in names:
                names.append(name)
        return names
