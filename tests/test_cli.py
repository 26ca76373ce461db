import json

from fsminspect.app.main import main

TEXT = "FSM LENGTH : 2000 mm\n1 PW 1 B 100 50 10\n2 PW 2 B 1000 60 9*12\n"


def _write(tmp_path, payload):
    p = tmp_path / "doc.json"
    p.write_text(json.dumps(payload), encoding="utf-8")
    return str(p)


def test_all_ok_exits_zero(tmp_path, capsys):
    path = _write(tmp_path, {
        "text": TEXT,
        "actuals": [{"diameter": "10.3", "axis": "55.1"}, {"height": 9.2, "width": 12.1, "axis": 64.5}],
    })
    assert main([path]) == 0
    out = capsys.readouterr().out
    assert "OK: 2" in out
    assert "outstanding" not in out


def test_nok_exits_one(tmp_path, capsys):
    path = _write(tmp_path, {
        "text": TEXT,
        "actuals": [{"diameter": 10.3, "axis": 55.1}, {"height": 9.6, "width": 12.2}],
        "aux_checks": [{"label": "Visual", "actual": "Y"}],
    })
    assert main([path]) == 1
    out = capsys.readouterr().out
    assert "NOK: 1" in out
    assert "confirm before export" in out


def test_bad_input_exits_two(tmp_path):
    assert main([_write(tmp_path, {"nothing": 1})]) == 2
    assert main([_write(tmp_path, [1, 2])]) == 2
    assert main([str(tmp_path / "missing.json")]) == 2


def test_malformed_sections_exit_two(tmp_path):
    assert main([_write(tmp_path, {"text": TEXT, "actuals": [5]})]) == 2
    assert main([_write(tmp_path, {"text": TEXT, "aux_checks": "Y"})]) == 2
    assert main([_write(tmp_path, {"text": TEXT, "header_actuals": ["2000"]})]) == 2
    assert main([_write(tmp_path, {"text": 42})]) == 2
    assert main([_write(tmp_path, {"cells": ["row"]})]) == 2


def test_empty_actual_entries_are_skipped(tmp_path, capsys):
    path = _write(tmp_path, {"text": TEXT, "actuals": [None, {}], "aux_checks": [None]})
    assert main([path]) == 0
    assert "open: 2" in capsys.readouterr().out
