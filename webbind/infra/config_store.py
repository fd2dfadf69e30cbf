import json
import os

from webbind.constants import DEFAULT_WINDOW_HEIGHT, DEFAULT_WINDOW_TITLE, DEFAULT_WINDOW_WIDTH
from webbind.paths import CONFIG_DIR, CONFIG_FILE


class Config:
    """Persistent configuration manager."""

    def __init__(self):
        self.load_error = None
        self.data = {
            "library_path": "",
            "debug": False,
            "window_title": DEFAULT_WINDOW_TITLE,
            "window_width": DEFAULT_WINDOW_WIDTH,
            "window_height": DEFAULT_WINDOW_HEIGHT,
            "log_level": "WARNING",
        }
        self.load()

    def load(self):
        self.load_error = None
        if os.path.exists(CONFIG_FILE):
            try:
                with open(CONFIG_FILE, "r", encoding="utf-8") as f:
                    saved = json.load(f)
                if not isinstance(saved, dict):
                    raise ValueError("Config payload must be a JSON object.")
                self.data.update(saved)
            except (OSError, json.JSONDecodeError, TypeError, ValueError) as exc:
                self.load_error = str(exc)

    def save(self):
        os.makedirs(CONFIG_DIR, exist_ok=True)
        with open(CONFIG_FILE, "w", encoding="utf-8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key, default=None):
        return self.data.get(key, default)

    def set(self, key, value):
        self.data[key] = value
        self.save()

    def library_path(self):
        """Configured native library path, or ``None`` when unset or not a string."""
        value = self.data.get("library_path")
        if not isinstance(value, str):
            return None
        return value.strip() or None

    def window_size(self):
        try:
            width = int(self.data.get("window_width"))
            height = int(self.data.get("window_height"))
        except (TypeError, ValueError):
            return DEFAULT_WINDOW_WIDTH, DEFAULT_WINDOW_HEIGHT
        if width <= 0 or height <= 0:
            return DEFAULT_WINDOW_WIDTH, DEFAULT_WINDOW_HEIGHT
        return width, height

    def log_level(self):
        value = self.data.get("log_level")
        if not isinstance(value, str) or not value.strip():
            return "WARNING"
        return value.strip().upper()
