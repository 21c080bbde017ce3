import json
import os
import subprocess
import sys

import pytest

from praye.cli import main

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

WASHINGTON_ARGS = ["--lat", "38.8976763", "--lng", "-77.036529", "--alt", "18", "--date", "2021-04-12"]


@pytest.fixture
def no_config(tmp_path):
    return ["--config", str(tmp_path / "config.json")]


def test_list_methods(capsys):
    assert main(["--list-methods"]) == 0
    out = capsys.readouterr().out
    assert "MWL: Muslim World League" in out
    assert len(out.strip().splitlines()) == 8


def test_times_as_json(capsys, no_config):
    assert main(WASHINGTON_ARGS + ["--method", "MWL"] + no_config) == 0
    times = json.loads(capsys.readouterr().out)
    assert times["fajr"] == pytest.approx(9.026755704840292, abs=1e-9)
    assert times["midnight"] == pytest.approx(29.152168579286247, abs=1e-9)


def test_ramadan_flag(capsys, no_config):
    assert main(WASHINGTON_ARGS + ["--method", "Makkah", "--ramadan"] + no_config) == 0
    times = json.loads(capsys.readouterr().out)
    assert times["isha"] == pytest.approx(times["maghrib"] - 2)


def test_location_from_config(capsys, tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"location": {"lat": 38.8976763, "lng": -77.036529, "alt": 18}}), encoding="utf-8")
    assert main(["--date", "2021-04-12", "--config", str(path)]) == 0
    times = json.loads(capsys.readouterr().out)
    assert times["sunrise"] == pytest.approx(10.581941026910075, abs=1e-9)


def test_missing_coordinates(capsys, no_config):
    assert main(["--date", "2021-04-12"] + no_config) == 1
    assert "Error: No coordinates" in capsys.readouterr().err


def test_unknown_method(capsys, no_config):
    assert main(WASHINGTON_ARGS + ["--method", "Nope"] + no_config) == 1
    assert "Error: Unknown method: Nope" in capsys.readouterr().err


def test_asr_is_case_insensitive(capsys, no_config):
    assert main(WASHINGTON_ARGS + ["--asr", "standard"] + no_config) == 0
    standard = json.loads(capsys.readouterr().out)
    assert main(WASHINGTON_ARGS + ["--asr", "hanafi"] + no_config) == 0
    hanafi = json.loads(capsys.readouterr().out)
    assert hanafi["asr"] > standard["asr"]
    assert standard["asr"] == pytest.approx(20.831494870257075, abs=1e-9)


def test_lat_without_lng(capsys, tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"location": {"lat": 10, "lng": 20}}), encoding="utf-8")
    assert main(["--lat", "38.9", "--date", "2021-04-12", "--config", str(path)]) == 1
    assert "Error: --lat and --lng go together" in capsys.readouterr().err


def test_script_runs():
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(p for p in (ROOT, env.get("PYTHONPATH")) if p)
    result = subprocess.run(
        [sys.executable, os.path.join(ROOT, "scripts", "run_praye.py"), "--list-methods"],
        cwd=ROOT,
        env=env,
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0, result.stderr
    assert "MWL: Muslim World League" in result.stdout
