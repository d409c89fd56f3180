import json
import logging

from services.settings_service import SettingsService


def test_missing_file_gives_empty_settings(tmp_path):
    service = SettingsService(str(tmp_path / "none.json"))
    assert service.settings == {}
    assert service.get_value("show_button_shapes", False) is False


def test_save_and_reload(tmp_path):
    path = tmp_path / "settings.json"
    service = SettingsService(str(path))
    service.set_value("show_button_shapes", True)
    service.save()

    assert json.loads(path.read_text()) == {"show_button_shapes": True}
    assert SettingsService(str(path)).get_value("show_button_shapes") is True


def test_corrupt_file_is_logged(tmp_path, caplog):
    path = tmp_path / "settings.json"
    path.write_text("{not json")
    with caplog.at_level(logging.WARNING):
        service = SettingsService(str(path))
    assert service.settings == {}
    assert "Could not load settings" in caplog.text


def test_non_object_is_ignored(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("[1, 2]")
    assert SettingsService(str(path)).settings == {}


def test_use_file_reloads(tmp_path):
    path = tmp_path / "other.json"
    path.write_text('{"main_window/geometry": "abcd"}')
    service = SettingsService(str(tmp_path / "first.json"))
    service.use_file(str(path))
    assert service.get_value("main_window/geometry") == "abcd"
