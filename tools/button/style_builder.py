"""Utilities for building QPushButton style sheets.

Every styled button in the demo gets its QSS from here so that the gallery,
the matrix and the button-shapes treatment agree on the output.

Supported properties
--------------------
- ``background_color``
- ``text_color``
- ``border_radius`` (int)
- ``border_width`` / ``border_style`` / ``border_color``
- ``padding`` (int, or a ``(vertical, horizontal)`` tuple)

The function :func:`build_button_qss` returns a single string containing the
base rules and optional ``:hover`` / ``:pressed`` rules.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional


def _padding_rule(padding: Any) -> str:
    if isinstance(padding, (tuple, list)):
        vertical, horizontal = padding
        return f"padding: {int(vertical)}px {int(horizontal)}px;"
    return f"padding: {int(padding)}px;"


def _rules(props: Dict[str, Any]) -> List[str]:
    rules: List[str] = []

    if props.get("background_color"):
        rules.append(f"background-color: {props['background_color']};")
    if props.get("text_color"):
        rules.append(f"color: {props['text_color']};")

    if props.get("padding") is not None:
        rules.append(_padding_rule(props["padding"]))

    if props.get("border_radius") is not None:
        rules.append(f"border-radius: {int(props['border_radius'])}px;")

    bw = props.get("border_width")
    if bw is not None or props.get("border_color") or props.get("border_style"):
        bw = int(bw or 0)
        bs = props.get("border_style", "solid")
        bc = props.get("border_color", "#000000")
        rules.append(f"border: {bw}px {bs} {bc};")

    return rules


def _block(selector: str, rules: List[str]) -> str:
    return selector + "{\n    " + "\n    ".join(rules) + "\n}"


def build_button_qss(
    base_props: Dict[str, Any],
    hover_props: Optional[Dict[str, Any]] = None,
    pressed_props: Optional[Dict[str, Any]] = None,
    selector: str = "QPushButton",
) -> str:
    """Return a style sheet for the provided properties.

    Parameters
    ----------
    base_props:
        Properties for the default state.
    hover_props, pressed_props:
        Optional properties for the ``:hover`` and ``:pressed`` states.
        Missing keys fall back to the values from ``base_props``.
    selector:
        The QSS selector the rules apply to.
    """

    qss = _block(selector, _rules(base_props))
    for pseudo, overrides in (("hover", hover_props), ("pressed", pressed_props)):
        if overrides:
            merged = dict(base_props)
            merged.update(overrides)
            qss += "\n" + _block(f"{selector}:{pseudo}", _rules(merged))
    return qss
