import importlib.util
import json
import os

import pytest

SCRIPT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "..", "scripts", "convert.py"))


@pytest.fixture(scope="module")
def convert():
    spec = importlib.util.spec_from_file_location("convert_script", SCRIPT)
    mod = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(mod)
    return mod


def test_to_gridref(convert, capsys):
    assert convert.main(["to-gridref", "337297", "503695"]) == 0
    assert "text=NY 37297 03695" in capsys.readouterr().out


def test_from_gridref_json(convert, capsys):
    assert convert.main(["from-gridref", "NY", "37297", "03695", "--format", "json"]) == 0
    rows = json.loads(capsys.readouterr().out)
    assert rows == [{"input": "NY 37297 03695", "result": {"ea": 337297, "no": 503695}}]


def test_rejection_sets_exit_status(convert, capsys):
    assert convert.main(["from-gridref", "ZZ 12345 12345"]) == 1
    assert "ERROR Invalid grid reference." in capsys.readouterr().out


def test_batch_input(convert, tmp_path, capsys):
    src = tmp_path / "points.txt"
    src.write_text("# easting northing\n337297, 503695\n651409 313177\n700000 1\n")
    assert convert.main(["to-gridref", "--input", str(src), "--format", "json"]) == 1
    rows = json.loads(capsys.readouterr().out)
    assert [r.get("result", {}).get("text") for r in rows] == ["NY 37297 03695", "TG 51409 13177", None]
    assert rows[2]["error"] == "Coordinates out of range."


def test_non_numeric_value(convert, capsys):
    assert convert.main(["to-latlng", "abc", "1"]) == 1
    assert "ERROR" in capsys.readouterr().out
