"""
Простой загрузчик/сохранитель конфигурации в формате JSON.
Если файл не найден – используются настройки по‑умолчанию (файл пишет только save()).
"""

import copy
import json
import os
from pathlib import Path
from gmath3d.utils.logger import logger

DEFAULT_CONFIG = {
    "math": {"epsilon": 1e-5},
    "multithread": {"max_workers": None, "min_batch": 64},
}

CONFIG_ENV = "GMATH3D_CONFIG"


class Config:
    """Singleton‑подобный объект конфигурации."""
    _instance = None

    def __new__(cls, path: str = None):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance.path = Path(path or os.environ.get(CONFIG_ENV, "gmath3d.json"))
            cls._instance._load()
        return cls._instance

    @classmethod
    def reset(cls):
        """Сбросить кэшированный экземпляр (нужно тестам)."""
        cls._instance = None

    def _load(self):
        self.data = copy.deepcopy(DEFAULT_CONFIG)
        if not self.path.is_file():
            logger.debug(f"[Config] No config file at {self.path} – using defaults.")
            return
        try:
            with self.path.open("r", encoding="utf-8") as f:
                loaded = json.load(f)
        except (OSError, ValueError) as exc:
            logger.error(f"[Config] Failed to read config: {exc}")
            return
        if not isinstance(loaded, dict):
            logger.warning("[Config] Config root is not an object – using defaults.")
            return
        for section, values in loaded.items():
            if section not in DEFAULT_CONFIG:
                logger.warning(f"[Config] Unknown section '{section}' ignored.")
                continue
            if not isinstance(values, dict):
                logger.warning(f"[Config] Section '{section}' is not an object – ignored.")
                continue
            self.data[section].update(values)
        logger.info("[Config] Loaded configuration.")

    def save(self):
        try:
            with self.path.open("w", encoding="utf-8") as f:
                json.dump(self.data, f, indent=4)
            logger.info("[Config] Configuration saved.")
        except OSError as exc:
            logger.error(f"[Config] Unable to save config: {exc}")

    def __getitem__(self, key):
        if key not in DEFAULT_CONFIG:
            raise ValueError(f"Unknown config section: {key}")
        return self.data[key]

    def __setitem__(self, key, value):
        if key not in DEFAULT_CONFIG:
            raise ValueError(f"Unknown config section: {key}")
        self.data[key] = value

    def get(self, key, default=None):
        return self.data.get(key, default)


def epsilon() -> float:
    """Текущий допуск сравнения (math.epsilon)."""
    return float(Config()["math"]["epsilon"])
