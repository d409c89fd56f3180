"""Colors, configuration and factories for the demo buttons.

Two kinds of buttons exist:

- *regular* buttons carry their own shape (a filled rounded rectangle) and
  therefore look the same whether Button Shapes is on or off;
- *plain* buttons have no shape of their own and, like links, only show
  their label. With Button Shapes on they get a grey rounded surround.

Text links are handled separately: they are underlined while Button
Shapes is on.
"""

from __future__ import annotations

import logging
import random
from typing import Callable, Optional

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QPushButton, QWidget

from components.tappable import TextLink
from .style_builder import build_button_qss

logger = logging.getLogger(__name__)

# Colors and configurations
CORNER_RADIUS = 7
REGULAR_BUTTON_LABEL_COLOR = "#ffffff"
REGULAR_BUTTON_BG_COLOR = "#007aff"
REGULAR_BUTTON_HOVER_BG_COLOR = "#1a8cff"
REGULAR_BUTTON_PRESSED_BG_COLOR = "#0060cc"
REGULAR_BUTTON_PADDING = 16
SYMBOL_BUTTON_FG_COLOR = "#ff9500"
TEXT_LINK_COLOR = "#ff2d55"
PLAIN_BUTTON_TEXT_COLOR = "#007aff"
BUTTON_SHAPES_BG_COLOR = "rgba(120, 120, 128, 51)"
PLAIN_BUTTON_PADDING = (4, 8)

# Dynamic property that records which kind a button is
BUTTON_KIND_PROPERTY = "buttonKind"
KIND_REGULAR = "regular"
KIND_PLAIN = "plain"


def demo_action() -> int:
    """Stand-in action wired to every tappable element. Returns the logged number."""
    number = random.randint(0, 1000)
    logger.info("Button tapped (random:%d)", number)
    return number


def create_regular_button(
    label: str,
    action: Callable[[], object] = demo_action,
    parent: Optional[QWidget] = None,
    bg_color: str = REGULAR_BUTTON_BG_COLOR,
    text_color: str = REGULAR_BUTTON_LABEL_COLOR,
    corner_radius: int = CORNER_RADIUS,
) -> QPushButton:
    """Factory method for a regular button: a rounded, filled rectangle."""
    button = QPushButton(label, parent)
    button.setObjectName("RegularButton")
    button.setProperty(BUTTON_KIND_PROPERTY, KIND_REGULAR)
    button.setCursor(Qt.CursorShape.PointingHandCursor)
    base = {
        "background_color": bg_color,
        "text_color": text_color,
        "border_radius": corner_radius,
        "border_width": 0,
        "padding": REGULAR_BUTTON_PADDING,
    }
    hover = pressed = None
    if bg_color == REGULAR_BUTTON_BG_COLOR:
        hover = {"background_color": REGULAR_BUTTON_HOVER_BG_COLOR}
        pressed = {"background_color": REGULAR_BUTTON_PRESSED_BG_COLOR}
    button.setStyleSheet(build_button_qss(base, hover_props=hover, pressed_props=pressed))
    button.clicked.connect(lambda _checked=False: action())
    return button


def create_plain_button(
    label: str,
    action: Callable[[], object] = demo_action,
    parent: Optional[QWidget] = None,
    button_shapes_enabled: bool = False,
) -> QPushButton:
    """Factory method for a button with no shape of its own."""
    button = QPushButton(label, parent)
    button.setObjectName("PlainButton")
    button.setProperty(BUTTON_KIND_PROPERTY, KIND_PLAIN)
    button.setCursor(Qt.CursorShape.PointingHandCursor)
    apply_button_shapes(button, button_shapes_enabled)
    button.clicked.connect(lambda _checked=False: action())
    return button


def plain_button_qss(button_shapes_enabled: bool) -> str:
    props = {
        "text_color": PLAIN_BUTTON_TEXT_COLOR,
        "padding": PLAIN_BUTTON_PADDING,
        "border_width": 0,
    }
    if button_shapes_enabled:
        props["background_color"] = BUTTON_SHAPES_BG_COLOR
        props["border_radius"] = CORNER_RADIUS
    else:
        props["background_color"] = "transparent"
    return build_button_qss(props)


def apply_button_shapes(button: QPushButton, enabled: bool) -> bool:
    """
    Give ``button`` the Button Shapes treatment, or take it away.

    Regular buttons already have a shape and are left untouched.
    Returns True if the button's appearance was updated.
    """
    if button.property(BUTTON_KIND_PROPERTY) == KIND_REGULAR:
        return False
    button.setFlat(not enabled)
    button.setStyleSheet(plain_button_qss(enabled))
    return True


def text_link(
    label: str,
    button_shapes_enabled: bool,
    action: Callable[[], object] = demo_action,
    parent: Optional[QWidget] = None,
) -> TextLink:
    """Factory method for a text link, underlined only with Button Shapes on."""
    link = TextLink(label, parent, color=TEXT_LINK_COLOR)
    link.set_underlined(button_shapes_enabled)
    link.clicked.connect(action)
    return link
