# components/buttons_view.py
# Gallery of button variants and how each one reacts to Button Shapes.

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QFrame, QHBoxLayout, QLabel, QScrollArea, QVBoxLayout, QWidget
)

from components.tappable import CircleWidget, TappableFrame, ZoneFrame
from tools.button import apply_button_shapes, create_plain_button, create_regular_button, demo_action, text_link
from tools.button.styles import CORNER_RADIUS, SYMBOL_BUTTON_FG_COLOR
from utils.icon_manager import ICON_ELLIPSIS, IconManager

CANCEL_KEY = "Cancel"
SYMBOL_SIZE = 170
ZONE_PADDING = 50
SYMBOL_ACCESSIBLE_NAME = "alternative text label"


def _caption(text):
    label = QLabel(text)
    font = label.font()
    font.setBold(True)
    label.setFont(font)
    label.setAlignment(Qt.AlignmentFlag.AlignHCenter)
    return label


def _inline_row(*widgets):
    """Lays widgets out side by side with no spacing, centred, like running text."""
    row = QHBoxLayout()
    row.setContentsMargins(0, 0, 0, 0)
    row.setSpacing(0)
    row.addStretch()
    for widget in widgets:
        row.addWidget(widget, 0, Qt.AlignmentFlag.AlignVCenter)
    row.addStretch()
    return row


class ButtonsView(QScrollArea):
    """
    Vertical scroll of captioned sections, one per kind of button.

    Only the unstyled button and the text link change when Button Shapes is
    toggled; the others already look tappable.
    """

    def __init__(self, button_shapes_enabled=False, action=demo_action, parent=None):
        super().__init__(parent)
        self.setObjectName("ButtonsView")
        self.setWidgetResizable(True)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAsNeeded)
        self._action = action
        self._button_shapes_enabled = bool(button_shapes_enabled)

        content = QWidget()
        layout = QVBoxLayout(content)
        layout.setSpacing(24)
        layout.addLayout(self._build_regular_button())
        layout.addLayout(self._build_traditional_shape_buttons())
        layout.addLayout(self._build_tappable_content())
        layout.addLayout(self._build_symbol_button())
        layout.addLayout(self._build_text_link())
        layout.addStretch()
        self.setWidget(content)

    # --- Sections ---------------------------------------------------------
    def _section(self):
        section = QVBoxLayout()
        section.setSpacing(4)
        return section

    def _build_regular_button(self):
        section = self._section()
        section.addWidget(_caption("Regular Button"))
        self.cancel_button = create_plain_button(
            CANCEL_KEY, self._action, button_shapes_enabled=self._button_shapes_enabled
        )
        section.addLayout(_inline_row(QLabel("This is a "), self.cancel_button, QLabel(" Button")))
        return section

    def _build_traditional_shape_buttons(self):
        section = self._section()
        section.addWidget(_caption("Traditional Shape .buttonStyle"))
        self.shaped_buttons = [
            create_regular_button("Button", self._action),
            create_regular_button("Other Button", self._action),
        ]
        section.addLayout(_inline_row(QLabel("This is a "), self.shaped_buttons[0], QLabel(" Button")))
        section.addLayout(_inline_row(QLabel("This is an "), self.shaped_buttons[1], QLabel(" Button")))
        return section

    def _build_tappable_content(self):
        section = self._section()
        section.addWidget(_caption("Regular Button"))

        self.tappable_frame = TappableFrame()
        self.tappable_frame.setObjectName("TappableContent")
        self.tappable_frame.setStyleSheet(
            f"QFrame#TappableContent {{ border: 1px solid palette(text); border-radius: {CORNER_RADIUS}px; }}"
        )
        inner = QVBoxLayout(self.tappable_frame)
        inner.setSpacing(0)
        inner.addWidget(QLabel("Any tapable content"), 0, Qt.AlignmentFlag.AlignHCenter)

        circles = QHBoxLayout()
        for color, diameter in (("cyan", 24), ("green", 18), ("brown", 12)):
            circles.addWidget(CircleWidget(color, diameter), 0, Qt.AlignmentFlag.AlignVCenter)
        inner.addLayout(circles)

        more = QLabel("More tappable content")
        font = more.font()
        font.setItalic(True)
        more.setFont(font)
        inner.addWidget(more, 0, Qt.AlignmentFlag.AlignHCenter)

        self.tappable_frame.clicked.connect(self._action)
        section.addWidget(self.tappable_frame, 0, Qt.AlignmentFlag.AlignHCenter)
        return section

    def _build_symbol_button(self):
        section = self._section()
        section.addWidget(_caption("Symbol Button"))

        symbol = QLabel()
        symbol.setFixedSize(SYMBOL_SIZE, SYMBOL_SIZE)
        symbol.setPixmap(IconManager.create_pixmap(ICON_ELLIPSIS, SYMBOL_SIZE, color=SYMBOL_BUTTON_FG_COLOR))
        symbol.setFrameShape(QFrame.Shape.Box)
        symbol.setAlignment(Qt.AlignmentFlag.AlignCenter)

        # The pink zone, symbol included, reacts to taps; the green zone around it does not
        self.pink_zone = ZoneFrame("pink", tappable=True)
        self.pink_zone.setAccessibleName(SYMBOL_ACCESSIBLE_NAME)
        pink_layout = QHBoxLayout(self.pink_zone)
        pink_layout.setContentsMargins(0, 0, ZONE_PADDING, 0)
        pink_layout.addWidget(symbol)
        self.pink_zone.clicked.connect(self._action)

        self.green_zone = ZoneFrame("green", tappable=False)
        green_layout = QHBoxLayout(self.green_zone)
        green_layout.setContentsMargins(0, 0, ZONE_PADDING, 0)
        green_layout.addWidget(self.pink_zone)

        section.addWidget(self.green_zone, 0, Qt.AlignmentFlag.AlignHCenter)
        return section

    def _build_text_link(self):
        section = self._section()
        section.addWidget(_caption("Text Link"))
        self.text_link = text_link("a text link", self._button_shapes_enabled, self._action)
        row = _inline_row(QLabel("This is "), self.text_link, QLabel(" Button"))
        row.setContentsMargins(11, 11, 11, 11)
        section.addLayout(row)
        return section

    # --- Button Shapes ------------------------------------------------------
    def button_shapes_enabled(self):
        return self._button_shapes_enabled

    def set_button_shapes_enabled(self, enabled):
        """Re-styles the shape-sensitive elements in place."""
        enabled = bool(enabled)
        if enabled == self._button_shapes_enabled:
            return
        self._button_shapes_enabled = enabled
        apply_button_shapes(self.cancel_button, enabled)
        self.text_link.set_underlined(enabled)
