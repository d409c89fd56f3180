from unittest import mock

from PyQt6.QtCore import QPoint, Qt
from PyQt6.QtTest import QSignalSpy, QTest

from components.buttons_view import SYMBOL_ACCESSIBLE_NAME, ButtonsView
from components.matrix_view import PLAIN_ROW_NAME, MatrixView
from components.picker_view import LIST_PLACEHOLDER, PICKER_ITEMS, PickerView
from tools.button import styles
from tools.button_styles import get_styles


def test_buttons_view_toggles_shape_sensitive_elements(qapp):
    view = ButtonsView(button_shapes_enabled=False, action=mock.Mock())
    shaped_sheets = [b.styleSheet() for b in view.shaped_buttons]
    assert not view.text_link.is_underlined()
    assert styles.BUTTON_SHAPES_BG_COLOR not in view.cancel_button.styleSheet()

    view.set_button_shapes_enabled(True)
    assert view.button_shapes_enabled()
    assert view.text_link.is_underlined()
    assert styles.BUTTON_SHAPES_BG_COLOR in view.cancel_button.styleSheet()
    assert [b.styleSheet() for b in view.shaped_buttons] == shaped_sheets


def test_buttons_view_actions(qapp):
    action = mock.Mock()
    view = ButtonsView(action=action)
    view.cancel_button.click()
    view.shaped_buttons[1].click()
    view.tappable_frame.resize(200, 100)
    QTest.mouseClick(view.tappable_frame, Qt.MouseButton.LeftButton)
    assert action.call_count == 3


def test_symbol_button_zones(qapp):
    action = mock.Mock()
    view = ButtonsView(action=action)
    assert view.pink_zone.accessibleName() == SYMBOL_ACCESSIBLE_NAME
    assert view.pink_zone.tappable
    assert not view.green_zone.tappable

    QTest.mouseClick(view.pink_zone, Qt.MouseButton.LeftButton)
    assert action.call_count == 1

    spy = QSignalSpy(view.green_zone.clicked)
    QTest.mouseClick(view.green_zone, Qt.MouseButton.LeftButton)
    assert len(spy) == 0


def test_picker_starts_on_placeholder(qapp):
    view = PickerView()
    assert view.selected_item() == ""
    assert view.combo.placeholderText() == LIST_PLACEHOLDER
    assert [view.combo.itemText(i) for i in range(view.combo.count())] == PICKER_ITEMS


def test_picker_selection(qapp):
    view = PickerView()
    spy = QSignalSpy(view.item_selected)
    assert view.select_item("Second")
    assert view.selected_item() == "Second"
    assert len(spy) == 1
    assert spy[0][0] == "Second"
    assert not view.select_item("Fourth")
    assert view.selected_item() == "Second"


def test_matrix_rows_and_columns(qapp):
    view = MatrixView(action=mock.Mock())
    assert view.row_names() == [PLAIN_ROW_NAME] + [s["name"] for s in get_styles()]
    assert len(view.cells) == 2 * len(view.row_names())


def test_matrix_only_plain_row_changes(qapp):
    view = MatrixView(action=mock.Mock())
    for name in view.row_names():
        off = view.cells[(name, False)].styleSheet()
        on = view.cells[(name, True)].styleSheet()
        if name == PLAIN_ROW_NAME:
            assert off != on
        else:
            assert off == on


def test_symbol_release_outside_pink_zone_does_nothing(qapp):
    action = mock.Mock()
    view = ButtonsView(action=action)
    view.pink_zone.resize(220, 170)
    QTest.mousePress(view.pink_zone, Qt.MouseButton.LeftButton)
    QTest.mouseRelease(view.pink_zone, Qt.MouseButton.LeftButton, Qt.KeyboardModifier.NoModifier, QPoint(-50, -50))
    assert action.call_count == 0
