"""Tests for the command-line interface."""

import csv
from pathlib import Path

import pytest

from sfcurves import config
from sfcurves.cli import main, progress_line


class TestProgressLine:

    def test_midway(self):
        assert progress_line(5, 10, 5.0) == "[5/10  50% 5s eta 5s]"

    def test_zero_total(self):
        assert progress_line(0, 0, 0.0) == "[0/0   0% 0s eta 0s]"


class TestOutputDir:

    def test_anchored_on_package(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert config.OUTPUT_DIR.is_absolute()
        assert config.OUTPUT_DIR == Path(config.__file__).parent / "output"


class TestCommands:

    def test_list(self, capsys):
        main(["list"])
        out = capsys.readouterr().out
        for curve_id in ("hilbert", "peano", "triangle", "flowsnake", "koch"):
            assert curve_id in out
        assert "order 0-7" in out

    def test_list_verbose(self, capsys):
        main(["list", "-v"])
        assert "L-system" in capsys.readouterr().out

    def test_points_to_stdout(self, capsys):
        main(["points", "hilbert", "--order", "1", "--size", "300"])
        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "index,x,y"
        assert lines[1] == "0,20.0000,20.0000"
        assert lines[3] == "2,150.0000,150.0000"
        assert len(lines) == 5

    def test_points_to_file(self, tmp_path, capsys):
        out = tmp_path / "peano.csv"
        main(["points", "peano", "--order", "2", "-o", str(out)])
        with open(out, newline="") as f:
            rows = list(csv.DictReader(f))
        assert len(rows) == 81
        assert "Exported 81 points" in capsys.readouterr().out

    def test_render(self, tmp_path, capsys):
        out = tmp_path / "koch.png"
        main(["render", "koch", "--order", "1", "--size", "120", "-o", str(out)])
        assert out.exists()
        assert str(out) in capsys.readouterr().out

    @pytest.mark.parametrize("speed", ["0", "-1"])
    def test_non_positive_speed_is_usage_error(self, speed, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["animate", "hilbert", "--speed", speed])
        assert exc.value.code == 2
        assert "must be at least 1" in capsys.readouterr().err

    def test_animate(self, tmp_path, capsys):
        out = tmp_path / "tri.gif"
        main(["animate", "triangle", "--order", "1", "--size", "100",
              "--speed", "4", "-o", str(out)])
        assert out.exists()
        assert "Completed!" in capsys.readouterr().out

    def test_order_out_of_range(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["points", "hilbert", "--order", "9"])
        assert exc.value.code == 2
        assert "order 9" in capsys.readouterr().err

    def test_degenerate_size(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["render", "hilbert", "--size", "0"])
        assert exc.value.code == 2
        assert "viewport" in capsys.readouterr().err

    def test_no_command(self):
        with pytest.raises(SystemExit) as exc:
            main([])
        assert exc.value.code == 1

    def test_unknown_curve_is_usage_error(self):
        with pytest.raises(SystemExit) as exc:
            main(["points", "dragon"])
        assert exc.value.code == 2
