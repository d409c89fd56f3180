# services/settings_service.py
# A simple service for persisting application settings.

import json
import logging
import os

from utils.constants import DEFAULT_SETTINGS_FILE

logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


class SettingsService:
    """
    Manages loading and saving application settings from a JSON file.
    This covers the Button Shapes switch and the main window geometry.
    The selected demo screen is deliberately not stored here.
    """
    def __init__(self, file_name=DEFAULT_SETTINGS_FILE):
        """
        Initializes the service and loads existing settings from the file.
        """
        self.file_path = file_name
        self.settings = self._load()

    def _load(self):
        """
        Loads the settings from the JSON file.
        Returns an empty dictionary if the file doesn't exist or is invalid.
        """
        try:
            if os.path.exists(self.file_path):
                with open(self.file_path, 'r') as f:
                    data = json.load(f)
                if isinstance(data, dict):
                    return data
                logger.warning("Ignoring settings in %s: expected a JSON object", self.file_path)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Could not load settings from %s: %s", self.file_path, e)
        return {}

    def use_file(self, file_name):
        """Switches to another settings file and reloads from it."""
        self.file_path = file_name
        self.settings = self._load()

    def save(self):
        """Saves the current settings dictionary to the JSON file."""
        try:
            with open(self.file_path, 'w') as f:
                json.dump(self.settings, f, indent=4)
        except OSError as e:
            logger.warning("Could not save settings to %s: %s", self.file_path, e)

    def get_value(self, key, default=None):
        """
        Retrieves a value from the settings for a given key.

        Args:
            key (str): The key for the setting.
            default: The value to return if the key is not found.

        Returns:
            The setting value or the default.
        """
        return self.settings.get(key, default)

    def set_value(self, key, value):
        """
        Sets a value in the settings for a given key.
        """
        self.settings[key] = value

# Create a singleton instance to be used throughout the application
settings_service = SettingsService()
