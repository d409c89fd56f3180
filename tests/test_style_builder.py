from tools.button.style_builder import build_button_qss


def test_base_rules():
    qss = build_button_qss({
        "background_color": "#007aff",
        "text_color": "#ffffff",
        "border_radius": 7,
        "padding": 16,
    })
    assert qss.startswith("QPushButton{")
    assert "background-color: #007aff;" in qss
    assert "color: #ffffff;" in qss
    assert "border-radius: 7px;" in qss
    assert "padding: 16px;" in qss
    assert ":hover" not in qss


def test_padding_pair_and_border():
    qss = build_button_qss({"padding": (4, 8), "border_width": 0})
    assert "padding: 4px 8px;" in qss
    assert "border: 0px solid #000000;" in qss


def test_state_rules_inherit_base():
    qss = build_button_qss(
        {"background_color": "#007aff", "text_color": "#ffffff"},
        pressed_props={"background_color": "#0060cc"},
    )
    pressed = qss.split("QPushButton:pressed{", 1)[1]
    assert "background-color: #0060cc;" in pressed
    assert "color: #ffffff;" in pressed


def test_custom_selector():
    qss = build_button_qss({"text_color": "red"}, hover_props={"text_color": "blue"}, selector="QPushButton#X")
    assert qss.startswith("QPushButton#X{")
    assert "QPushButton#X:hover{" in qss
