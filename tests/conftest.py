import os
import sys
import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication

from services.settings_service import settings_service


@pytest.fixture(scope="session", autouse=True)
def qapp():
    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv)
    return app


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path):
    """Point the shared settings service at a throwaway file for each test."""
    previous = settings_service.file_path
    settings_service.use_file(str(tmp_path / "app_settings.json"))
    yield settings_service
    settings_service.use_file(previous)
