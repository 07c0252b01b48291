"""
Загрузчик/сохранитель конфигурации в формате JSON.
Если файл не найден – создаётся файл с настройками по‑умолчанию.
"""

import copy
import json
from pathlib import Path
from gravlens.utils.logger import logger

DEFAULT_CONFIG = {
    "window": {"width": 1000, "height": 600, "title": "gravlens"},
    "render": {
        "width": 500,
        "height": 300,
        "rows_per_tick": 5,
        "max_steps": 2000,
        "screen_distance": 10.0,
        "screen_width": 32.0,
    },
    "simulation": {"rs": 4.0, "camera_distance": 150.0},
    "background": None,
    "show_fps": True,
}


class Config:
    """
    Конфигурация приложения.

    Секции‑словари (``window``, ``render``, ``simulation``) дополняются
    значениями по‑умолчанию, так что частичный файл тоже корректен.
    """

    def __init__(self, path: str = "config.json"):
        self.path = Path(path)
        self._load()

    def _load(self):
        if self.path.is_file():
            try:
                with self.path.open("r", encoding="utf-8") as f:
                    self.data = _merge(DEFAULT_CONFIG, json.load(f))
                logger.info(f"[Config] Loaded configuration from {self.path}.")
            except (OSError, ValueError) as exc:
                logger.error(f"[Config] Failed to read config: {exc}")
                self.data = copy.deepcopy(DEFAULT_CONFIG)
        else:
            logger.info("[Config] No config file – creating default.")
            self.data = copy.deepcopy(DEFAULT_CONFIG)
            self.save()

    def save(self):
        try:
            with self.path.open("w", encoding="utf-8") as f:
                json.dump(self.data, f, indent=4)
            logger.info("[Config] Configuration saved.")
        except OSError as exc:
            logger.error(f"[Config] Unable to save config: {exc}")

    def __getitem__(self, key):
        return self.data.get(key, DEFAULT_CONFIG.get(key))

    def get(self, key, default=None):
        return self.data.get(key, default)


def _merge(defaults: dict, loaded: dict) -> dict:
    merged = copy.deepcopy(defaults)
    for key, value in loaded.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key].update(value)
        else:
            merged[key] = value
    return merged
