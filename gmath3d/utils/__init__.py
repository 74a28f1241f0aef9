# gmath3d/utils/__init__.py
"""
Пакет утилит.

Экспортируем:
    * logger       – готовый объект logging.Logger (с level INFO)
    * check_finite – проверка, что результат не содержит inf/NaN
    * Config       – JSON‑конфигурация (допуски, пул потоков)
    * Profiler     – замер времени блока кода
"""

from .logger import logger, check_finite
from .config import Config
from .profiler import Profiler

__all__ = ["logger", "check_finite", "Config", "Profiler"]
