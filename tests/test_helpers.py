"""Tests for file helpers and the seedlist tool."""

import random
import tomllib

import pytest

from fleck_cover.py_helper import seedlist_random
from fleck_cover.py_helper import file_utils
from fleck_cover.py_helper.file_utils import finalize_output, rename_file, svg_to_png


class TestRenameFile:
    def test_keeps_suffix(self, tmp_path):
        source = tmp_path / "tmp.svg"
        source.write_text("<svg/>", encoding="utf-8")
        target = rename_file(source, "fleck_42")
        assert target == tmp_path / "fleck_42.svg"
        assert target.read_text(encoding="utf-8") == "<svg/>"
        assert not source.exists()

    def test_explicit_suffix(self, tmp_path):
        source = tmp_path / "tmp.svg"
        source.write_text("x", encoding="utf-8")
        assert rename_file(source, "out.txt") == tmp_path / "out.txt"

    def test_overwrites_existing(self, tmp_path):
        (tmp_path / "fleck_1.svg").write_text("old", encoding="utf-8")
        source = tmp_path / "tmp.svg"
        source.write_text("new", encoding="utf-8")
        target = rename_file(source, "fleck_1")
        assert target.read_text(encoding="utf-8") == "new"

    def test_errors(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            rename_file(tmp_path / "missing.svg", "x")
        source = tmp_path / "tmp.svg"
        source.write_text("x", encoding="utf-8")
        with pytest.raises(ValueError):
            rename_file(source, "")

    def test_svg_to_png_missing_source(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            svg_to_png(tmp_path / "missing.svg")


class TestFinalizeOutput:
    def test_keeps_svg(self, tmp_path):
        tmp_svg = tmp_path / "tmp.svg"
        tmp_svg.write_text("<svg/>", encoding="utf-8")
        assert finalize_output(tmp_svg, 42, png=False) == tmp_path / "fleck_42.svg"
        assert not tmp_svg.exists()

    def test_converts_to_png(self, tmp_path, monkeypatch):
        def fake_svg_to_png(source):
            target = source.with_suffix(".png")
            target.write_bytes(b"png")
            return target

        monkeypatch.setattr(file_utils, "svg_to_png", fake_svg_to_png)
        tmp_svg = tmp_path / "tmp.svg"
        tmp_svg.write_text("<svg/>", encoding="utf-8")
        assert finalize_output(tmp_svg, 7) == tmp_path / "fleck_7.png"
        assert sorted(p.name for p in tmp_path.iterdir()) == ["fleck_7.png"]

    def test_missing_render(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            finalize_output(tmp_path / "tmp.svg", 1)


class TestSeedlist:
    def test_make_seedlist(self):
        seeds = seedlist_random.make_seedlist(5, 10, 20, random.Random(0))
        assert len(seeds) == 5
        assert all(10 <= s <= 20 for s in seeds)
        assert seeds == seedlist_random.make_seedlist(5, 10, 20, random.Random(0))

    @pytest.mark.parametrize("count,lo,hi", [(0, 0, 10), (-2, 0, 10), (3, 10, 5)])
    def test_invalid(self, count, lo, hi):
        with pytest.raises(ValueError):
            seedlist_random.make_seedlist(count, lo, hi)

    def test_format_value(self):
        assert seedlist_random._format_value(True) == "true"
        assert seedlist_random._format_value(1.5) == "1.5"
        assert seedlist_random._format_value('a"b') == '"a\\"b"'
        assert seedlist_random._format_value([1, "x"]) == '[1, "x"]'
        with pytest.raises(TypeError):
            seedlist_random._format_value({"a": 1})

    def test_main_updates_config(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text(
            '[style]\n    density = 3\n    seedlist = [1]\n\n\n[colors]\n    palette = ["#000"]\n',
            encoding="utf-8",
        )
        seedlist_random.main(["4", "--min", "100", "--max", "200", "--config", str(path)])

        with path.open("rb") as f:
            config = tomllib.load(f)
        assert len(config["style"]["seedlist"]) == 4
        assert all(100 <= s <= 200 for s in config["style"]["seedlist"])
        assert config["style"]["density"] == 3
        assert config["colors"]["palette"] == ["#000"]
