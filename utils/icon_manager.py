import logging
from typing import Dict, Optional, Tuple

from PyQt6.QtGui import QIcon, QPixmap
import qtawesome as qta

logger = logging.getLogger(__name__)

# Symbol names used by the demo views
ICON_ELLIPSIS = "fa5s.ellipsis-h"
ICON_CHEVRON_DOWN = "fa5s.chevron-down"

_ICON_CACHE: Dict[Tuple[str, Optional[str]], QIcon] = {}
"""Cache for generated :class:`QIcon` objects keyed by ``(name, color)``."""

_PIXMAP_CACHE: Dict[Tuple[str, int, Optional[str]], QPixmap] = {}
"""Cache for generated :class:`QPixmap` objects keyed by ``(name, size, color)``."""


class IconManager:
    """Creates qtawesome symbols as Qt icons and pixmaps.

    Results are cached; call :meth:`clear_cache` to release them.
    """

    @staticmethod
    def create_icon(icon_name: str, color: Optional[str] = None) -> QIcon:
        """Create a scalable ``QIcon`` from a qtawesome icon name.

        Args:
            icon_name (str): The qtawesome icon name (e.g., 'fa5s.ellipsis-h').
            color (str, optional): Icon color. Defaults to qtawesome's own.

        Returns:
            QIcon: An empty icon if the name cannot be resolved.
        """
        key = (icon_name, color)
        if key in _ICON_CACHE:
            return _ICON_CACHE[key]

        options = {"color": color} if color is not None else {}
        try:
            result = QIcon(qta.icon(icon_name, **options))
        except Exception as e:  # qtawesome raises plain Exception for unknown names
            logger.warning("Error creating icon %s: %s", icon_name, e)
            result = QIcon()

        _ICON_CACHE[key] = result
        return result

    @staticmethod
    def create_pixmap(icon_name: str, size: int, color: Optional[str] = None) -> QPixmap:
        """Render a qtawesome icon into a square ``QPixmap`` of ``size`` pixels."""
        key = (icon_name, size, color)
        if key in _PIXMAP_CACHE:
            return _PIXMAP_CACHE[key]

        icon = IconManager.create_icon(icon_name, color=color)
        result = icon.pixmap(size, size) if not icon.isNull() else QPixmap()

        _PIXMAP_CACHE[key] = result
        return result

    @staticmethod
    def clear_cache():
        """Clear cached icons and pixmaps."""
        _ICON_CACHE.clear()
        _PIXMAP_CACHE.clear()
