"""
Configuration settings for taskify
"""
import copy
import json
import os
from typing import Dict, Any


class Settings:
    DEFAULT_SETTINGS = {
        'database': {
            'path': 'taskify.db',
        },
        'logger': {
            'enabled': True,
            'write_logs': True,
            'print_logs': False,  # The terminal belongs to the TUI
            'log_path': 'taskify.log',
            'level': 'INFO',
        },
        'ui': {
            'page_size': 12,
            'tick_rate': 0.25,  # seconds
        },
    }

    def __init__(self, config_file: str = 'config.json'):
        self.config_file = config_file
        self.settings = self._load_settings()

    def _load_settings(self) -> Dict[str, Any]:
        """Load settings from config file or create with defaults"""
        if os.path.exists(self.config_file):
            with open(self.config_file, 'r') as f:
                loaded = json.load(f)
            return self._merge_defaults(loaded)
        else:
            defaults = copy.deepcopy(self.DEFAULT_SETTINGS)
            self._save_settings(defaults)
            return defaults

    def _merge_defaults(self, loaded: Dict[str, Any]) -> Dict[str, Any]:
        """Fill sections and keys missing from the file with defaults"""
        merged = copy.deepcopy(self.DEFAULT_SETTINGS)
        for section, values in loaded.items():
            if isinstance(values, dict) and isinstance(merged.get(section), dict):
                merged[section].update(values)
            else:
                merged[section] = values
        return merged

    def _save_settings(self, settings: Dict[str, Any]):
        """Save settings to config file"""
        with open(self.config_file, 'w') as f:
            json.dump(settings, indent=2, fp=f)

    def get(self, section: str, key: str, default=None):
        """Get a setting value"""
        return self.settings.get(section, {}).get(key, default)

    def set(self, section: str, key: str, value: Any):
        """Set a setting value and save"""
        self.settings.setdefault(section, {})[key] = value
        self._save_settings(self.settings)

    @property
    def database_path(self) -> str:
        """Path of the SQLite database"""
        return self.get('database', 'path', 'taskify.db')

    @property
    def logging_enabled(self) -> bool:
        return bool(self.get('logger', 'enabled', True))

    @property
    def write_logs(self) -> bool:
        return bool(self.get('logger', 'write_logs', True))

    @property
    def print_logs(self) -> bool:
        return bool(self.get('logger', 'print_logs', False))

    @property
    def log_path(self) -> str:
        return self.get('logger', 'log_path', 'taskify.log')

    @property
    def log_level(self) -> str:
        return str(self.get('logger', 'level', 'INFO')).upper()

    @property
    def page_size(self) -> int:
        """Number of records per page in list screens"""
        return int(self.get('ui', 'page_size', 12))

    @page_size.setter
    def page_size(self, size: int):
        """Set the number of records per page"""
        if size >= 1:
            self.set('ui', 'page_size', size)
        else:
            raise ValueError("Page size must be at least 1")

    @property
    def tick_rate(self) -> float:
        """Seconds between TUI ticks"""
        return float(self.get('ui', 'tick_rate', 0.25))
