# -*- coding: utf-8 -*-
"""
conftest.py – изолированная конфигурация и тестовые матрицы.
"""

import numpy as np
import pytest

from gmath3d.math import Mat2, Mat3, Mat4
from gmath3d.utils.config import CONFIG_ENV, Config


# ----------------------------------------------------------------------
# Каждый тест получает свой конфиг‑файл во временной папке
# ----------------------------------------------------------------------
@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    path = tmp_path / "gmath3d.json"
    monkeypatch.setenv(CONFIG_ENV, str(path))
    Config.reset()
    yield path
    Config.reset()


@pytest.fixture
def rng():
    return np.random.default_rng(20240519)


@pytest.fixture
def well_conditioned(rng):
    """Случайная матрица с доминирующей диагональю (гарантированно невырожденная)."""
    def make(cls):
        k = cls.SIZE
        return cls(rng.uniform(-1.0, 1.0, (k, k)) + 4.0 * np.identity(k))
    return make


@pytest.fixture
def mat2_sample() -> Mat2:
    return Mat2([3, 4,
                 1, 2])


@pytest.fixture
def mat3_sample() -> Mat3:
    return Mat3([1, 3, 2,
                 5, 1, 2,
                 4, 2, 1])


@pytest.fixture
def mat4_sample() -> Mat4:
    return Mat4([3, 1, 2, 5,
                 4, 4, 3, 6,
                 1, 3, 1, 7,
                 -2, 2, 1, 2])
