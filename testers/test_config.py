# -*- coding: utf-8 -*-
import json
import logging

import pytest

from gmath3d.math import Vec3
from gmath3d.utils import Config, Profiler
from gmath3d.utils.config import DEFAULT_CONFIG, epsilon


def test_defaults_without_file(isolated_config):
    cfg = Config()
    assert cfg["math"]["epsilon"] == DEFAULT_CONFIG["math"]["epsilon"]
    assert epsilon() == pytest.approx(1e-5)
    assert not isolated_config.exists()


def test_config_is_a_singleton():
    assert Config() is Config()


def test_loaded_epsilon_drives_isclose(isolated_config):
    isolated_config.write_text(json.dumps({"math": {"epsilon": 0.5}}), encoding="utf-8")
    Config.reset()
    assert epsilon() == 0.5
    assert Vec3(1, 1, 1).isclose(Vec3(1.4, 1, 1))
    assert not Vec3(1, 1, 1).isclose(Vec3(1.4, 1, 1), eps=1e-5)
    # незаданные ключи секции берутся из значений по умолчанию
    assert Config()["multithread"]["min_batch"] == 64


def test_unknown_section():
    with pytest.raises(ValueError):
        Config()["window"]
    with pytest.raises(ValueError):
        Config()["window"] = {}


def test_save_round_trip(isolated_config):
    cfg = Config()
    cfg["math"] = {"epsilon": 1e-3}
    cfg.save()
    Config.reset()
    assert json.loads(isolated_config.read_text(encoding="utf-8"))["math"]["epsilon"] == 1e-3
    assert epsilon() == 1e-3


def test_broken_file_falls_back_to_defaults(isolated_config, caplog):
    isolated_config.write_text("{not json", encoding="utf-8")
    Config.reset()
    with caplog.at_level(logging.ERROR, logger="GMath3D"):
        cfg = Config()
    assert cfg["math"] == DEFAULT_CONFIG["math"]
    assert "Failed to read config" in caplog.text


def test_profiler_logs_elapsed(caplog):
    with caplog.at_level(logging.DEBUG, logger="GMath3D"):
        with Profiler("block") as prof:
            sum(range(1000))
    assert prof.elapsed_ms >= 0.0
    assert "[Profiler] block" in caplog.text


@pytest.mark.parametrize("content", ['{"math": 5}', '[1, 2, 3]', '{"math": [0.1], "multithread": "x"}'])
def test_wrong_shape_falls_back_to_defaults(isolated_config, caplog, content):
    isolated_config.write_text(content, encoding="utf-8")
    Config.reset()
    with caplog.at_level(logging.WARNING, logger="GMath3D"):
        cfg = Config()
        assert Vec3(1, 1, 1).isclose(Vec3(1, 1, 1))
    assert cfg["math"] == DEFAULT_CONFIG["math"]
    assert cfg["multithread"] == DEFAULT_CONFIG["multithread"]
    assert "[Config]" in caplog.text
