"""
Central constants and enums used across the application.

- `Screen` enumerates the demo screens offered by the selector.
- `SCREEN_LABELS` is the static table of display labels shown in the selector.
- Helpers convert between screens and their labels for untyped input.
"""

from enum import Enum
from typing import Dict, List, Optional, Union

# --- Settings keys ---
SETTING_SHOW_BUTTON_SHAPES = 'show_button_shapes'
SETTING_WINDOW_GEOMETRY = 'main_window/geometry'

DEFAULT_SETTINGS_FILE = 'app_settings.json'


class InvalidScreenError(ValueError):
    """Raised when a label or identifier does not name a known screen."""


class Screen(str, Enum):
    """Enumeration of the demo screens.

    Subclasses ``str`` so values behave like strings for Qt item data,
    while the set of variants stays closed. Declaration order is the
    order shown in the selector.
    """
    IDLE = 'idle'
    BUTTONS = 'buttons'
    PICKER = 'picker'
    MATRIX = 'matrix'


SCREEN_LABELS: Dict[Screen, str] = {
    Screen.IDLE: 'Select',
    Screen.BUTTONS: 'Buttons',
    Screen.PICKER: 'Picker',
    Screen.MATRIX: 'Matrix',
}

_SCREENS_BY_LABEL: Dict[str, Screen] = {label: screen for screen, label in SCREEN_LABELS.items()}

# Helper alias type used in signatures
ScreenLike = Union[Screen, str]


def screen_label(screen: Screen) -> str:
    """Return the display label for ``screen``."""
    return SCREEN_LABELS[screen]


def screen_labels() -> List[str]:
    """Return all display labels in declaration order."""
    return [SCREEN_LABELS[screen] for screen in Screen]


def screen_from_label(label: str) -> Screen:
    """Resolve a display label (e.g. ``"Buttons"``) to its screen.

    Raises:
        InvalidScreenError: if ``label`` is not one of the selector labels.
    """
    try:
        return _SCREENS_BY_LABEL[label]
    except (KeyError, TypeError):
        raise InvalidScreenError(
            f"Unknown screen {label!r}; expected one of: {', '.join(screen_labels())}"
        ) from None


def screen_from_str(value: Optional[ScreenLike]) -> Optional[Screen]:
    """Parse a screen from its identifier or return the enum unchanged.

    Returns ``None`` if the input is falsy or doesn't match any screen.
    """
    if not value:
        return None
    if isinstance(value, Screen):
        return value
    try:
        return Screen(str(value))
    except ValueError:
        return None
