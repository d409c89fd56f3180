# services/screen_selector.py
# Holds the selected demo screen and maps screens to their content.

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Optional

from utils.constants import Screen, screen_from_label, screen_label

logger = logging.getLogger(__name__)
# Avoid emitting logs unless the app configures handlers.
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


@dataclass(frozen=True, slots=True)
class ContentDescriptor:
    """Placeholder describing what a screen displays.

    ``screen`` is ``None`` only for the empty content shown while idle.
    """
    screen: Optional[Screen] = None
    title: str = ""

    @property
    def is_empty(self) -> bool:
        return self.screen is None


EMPTY_CONTENT = ContentDescriptor()


class ScreenSelector:
    """
    Tracks which demo screen is current.

    The selector does not notify anyone when the screen changes; callers
    re-render with ``render(current_screen())`` after calling ``select``.
    """

    def __init__(self, initial: Screen = Screen.IDLE):
        self._screen = initial

    def current_screen(self) -> Screen:
        """Returns the presently selected screen."""
        return self._screen

    def select(self, screen: Screen):
        """Makes ``screen`` the current screen. Selecting it again is a no-op."""
        if screen is self._screen:
            return
        logger.debug("Screen changed: %s -> %s", self._screen.value, screen.value)
        self._screen = screen

    def select_label(self, label: str) -> Screen:
        """
        Selects the screen whose display label is ``label``.

        Raises InvalidScreenError for unknown labels, leaving the current
        screen untouched.
        """
        screen = screen_from_label(label)
        self.select(screen)
        return screen

    @staticmethod
    def render(screen: Screen) -> ContentDescriptor:
        """Maps a screen to its content. Idle has no content."""
        if screen is Screen.IDLE:
            return EMPTY_CONTENT
        return ContentDescriptor(screen=screen, title=screen_label(screen))
