import json
import os
from typing import Dict, Any
from ..utils.file_manager import FileManager


class Settings:
    DEFAULT_SETTINGS = {
        "search_word": "spider man",
        "search_base_url": "https://www.google.com/search?tbm=isch&q=",
        "marker_class": "yWs4tf",
        "request_timeout": 10.0,
        "max_workers": 8,
        "completion_timeout": None
    }

    SETTINGS_FILE = "settings.json"

    def __init__(self, settings_file: str = None):
        self.settings_file = settings_file or self.SETTINGS_FILE
        self.settings = self._load_settings()

    def _load_settings(self) -> Dict[str, Any]:
        """Load defaults, overridden by the settings file when it is readable"""
        settings = self.DEFAULT_SETTINGS.copy()
        if os.path.exists(self.settings_file):
            try:
                overrides = FileManager.load_json(self.settings_file)
            except (OSError, json.JSONDecodeError):
                return settings
            if isinstance(overrides, dict):
                settings.update(overrides)
        return settings

    def get(self, key: str, default: Any = None) -> Any:
        """Get setting value"""
        return self.settings.get(key, default)

    def display_settings(self) -> None:
        """Display current settings"""
        print("\n⚙️  Current Settings:")
        print(f"   🔎 Search Word: {self.get('search_word')}")
        print(f"   🌐 Search URL: {self.get('search_base_url')}")
        print(f"   🏷️  Marker Class: {self.get('marker_class')}")
        print(f"   ⏱️  Request Timeout: {self.get('request_timeout')}s")
        print(f"   🧵 Download Workers: {self.get('max_workers')}")
