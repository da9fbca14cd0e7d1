"""Tests for tripmap.visualizer2d.config."""

import json
from pathlib import Path

import pytest

from tripmap.model.models import ConfigError
from tripmap.visualizer2d.config import RunConfig, load_json


class TestRunConfig:
    def test_defaults(self):
        cfg = RunConfig()
        assert cfg.file == ""
        assert cfg.mode == "plot"
        assert cfg.limit == 0
        assert (cfg.width, cfg.height) == (600, 400)
        assert cfg.overlay_map is True
        assert cfg.out_dir == "images"

    def test_from_dict(self):
        cfg = RunConfig.from_dict({"file": "a.csv", "mode": "line", "limit": 5})
        assert (cfg.file, cfg.mode, cfg.limit) == ("a.csv", "line", 5)

    @pytest.mark.parametrize(
        "data",
        [
            {"mode": "heatmap"},
            {"limit": -1},
            {"width": 0},
            {"zoom": 30},
            {"log_level": "LOUD"},
            {"colour": "red"},
        ],
    )
    def test_invalid(self, data):
        with pytest.raises(ConfigError):
            RunConfig.from_dict(data)

    def test_immutable(self):
        cfg = RunConfig()
        with pytest.raises(AttributeError):
            cfg.mode = "line"


class TestLoadJson:
    def test_none_is_empty(self):
        assert load_json(None) == {}

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_json(str(tmp_path / "missing.json"))

    def test_reads_object(self, tmp_path: Path):
        p = tmp_path / "cfg.json"
        p.write_text(json.dumps({"mode": "line"}), encoding="utf-8")
        assert load_json(str(p)) == {"mode": "line"}

    @pytest.mark.parametrize("text", ["{not json", "[1, 2]"])
    def test_bad_content(self, tmp_path: Path, text):
        p = tmp_path / "cfg.json"
        p.write_text(text, encoding="utf-8")
        with pytest.raises(ConfigError):
            load_json(str(p))
