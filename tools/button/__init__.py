"""Button tool package.

This package consolidates all button-related code:
- `style_builder.py` turns style properties into QSS
- `styles.py` with demo colors and button/link factories

Re-export the factories lazily so importing the package does not pull in Qt.
"""


def __getattr__(name):
    if name in {
        "create_regular_button",
        "create_plain_button",
        "apply_button_shapes",
        "text_link",
        "demo_action",
    }:
        from . import styles

        return getattr(styles, name)
    raise AttributeError(name)


__all__ = [
    "create_regular_button",
    "create_plain_button",
    "apply_button_shapes",
    "text_link",
    "demo_action",
]
