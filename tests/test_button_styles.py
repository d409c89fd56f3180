import logging
from unittest import mock

from PyQt6.QtCore import Qt
from PyQt6.QtTest import QSignalSpy, QTest

from tools.button import styles
from tools.button import apply_button_shapes, create_plain_button, create_regular_button, text_link


def test_demo_action_logs(caplog):
    with caplog.at_level(logging.INFO, logger=styles.__name__):
        number = styles.demo_action()
    assert 0 <= number <= 1000
    assert f"Button tapped (random:{number})" in caplog.text


def test_regular_button_ignores_button_shapes(qapp):
    action = mock.Mock()
    button = create_regular_button("Button", action)
    sheet = button.styleSheet()
    assert styles.REGULAR_BUTTON_BG_COLOR in sheet
    assert "QPushButton:hover{" in sheet
    assert styles.REGULAR_BUTTON_HOVER_BG_COLOR in sheet
    assert apply_button_shapes(button, True) is False
    assert button.styleSheet() == sheet
    button.click()
    action.assert_called_once_with()


def test_plain_button_gets_shape(qapp):
    button = create_plain_button("Cancel", mock.Mock())
    assert button.isFlat()
    assert styles.BUTTON_SHAPES_BG_COLOR not in button.styleSheet()

    assert apply_button_shapes(button, True) is True
    assert not button.isFlat()
    assert styles.BUTTON_SHAPES_BG_COLOR in button.styleSheet()
    assert f"border-radius: {styles.CORNER_RADIUS}px;" in button.styleSheet()

    apply_button_shapes(button, False)
    assert styles.BUTTON_SHAPES_BG_COLOR not in button.styleSheet()


def test_text_link_underline(qapp):
    assert text_link("a text link", True, mock.Mock()).is_underlined()
    assert not text_link("a text link", False, mock.Mock()).is_underlined()


def test_text_link_click(qapp):
    action = mock.Mock()
    link = text_link("a text link", False, action)
    link.resize(100, 20)
    spy = QSignalSpy(link.clicked)
    QTest.mouseClick(link, Qt.MouseButton.LeftButton)
    assert len(spy) == 1
    action.assert_called_once_with()
