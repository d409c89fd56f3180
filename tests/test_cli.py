import pytest

from main import build_parser
from utils.constants import Screen


def test_defaults():
    args = build_parser().parse_args([])
    assert args.screen is Screen.IDLE
    assert not args.button_shapes
    assert args.settings is None
    assert args.log_level == "INFO"
    assert build_parser().get_default("log_level") == "INFO"


@pytest.mark.parametrize("value, expected", [
    ("Buttons", Screen.BUTTONS),
    ("picker", Screen.PICKER),
    ("Select", Screen.IDLE),
    ("MATRIX", Screen.MATRIX),
])
def test_screen_option(value, expected):
    assert build_parser().parse_args(["--screen", value]).screen is expected


def test_unknown_screen_exits(capsys):
    with pytest.raises(SystemExit) as excinfo:
        build_parser().parse_args(["--screen", "Nope"])
    assert excinfo.value.code == 2
    assert "Unknown screen" in capsys.readouterr().err


def test_flags():
    args = build_parser().parse_args(["--button-shapes", "--settings", "x.json", "--log-level", "DEBUG"])
    assert args.button_shapes
    assert args.settings == "x.json"
    assert args.log_level == "DEBUG"
