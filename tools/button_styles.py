# tools/button_styles.py
# Catalog of filled button styles compared in the matrix screen.

from tools.button.styles import CORNER_RADIUS, REGULAR_BUTTON_BG_COLOR, REGULAR_BUTTON_LABEL_COLOR


def get_styles():
    """
    Returns the list of filled button styles.
    Each style has a unique ID, a display name, and a set of properties.
    """
    return [
        {
            "id": "regular",
            "name": "Regular",
            "properties": {
                "background_color": REGULAR_BUTTON_BG_COLOR,
                "text_color": REGULAR_BUTTON_LABEL_COLOR,
                "border_radius": CORNER_RADIUS,
            }
        },
        {
            "id": "success_square",
            "name": "Success Square",
            "properties": {
                "background_color": "#34c759",
                "text_color": "#ffffff",
                "border_radius": 0,
            }
        },
        {
            "id": "warning_capsule",
            "name": "Warning Capsule",
            "properties": {
                "background_color": "#ff9500",
                "text_color": "#000000",
                "border_radius": 22,  # Half the matrix row height
            }
        },
        {
            "id": "danger_rounded",
            "name": "Danger Rounded",
            "properties": {
                "background_color": "#ff3b30",
                "text_color": "#ffffff",
                "border_radius": 12,
            }
        }
    ]

