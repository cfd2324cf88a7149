"""
CLI tests (mock provider, no network).
"""

import json

from main import main


def test_table_output(capsys):
    code = main(["cpu", "Intel Core i5-14600K", "AMD Ryzen 7 7800X3D", "--provider", "mock"])
    out = capsys.readouterr().out
    assert code == 0
    assert "Specification" in out
    assert "Performance Winner: " in out
    assert " *" in out


def test_json_output(capsys):
    code = main(["gpu", "RTX 4060", "RX 7600", "--provider", "mock", "--json"])
    data = json.loads(capsys.readouterr().out)
    assert code == 0
    assert set(data) == {"gpu1", "gpu2", "summary"}


def test_validation_exit_code(capsys):
    code = main(["cpu", "ab", "AMD Ryzen 5 7600", "--provider", "mock"])
    err = capsys.readouterr().err
    assert code == 2
    assert "Processor 1" in err


def test_missing_key_exit_code(capsys, monkeypatch):
    monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
    code = main(["gpu", "RTX 4060", "RX 7600", "--provider", "claude"])
    assert code == 1
    assert "ANTHROPIC_API_KEY" in capsys.readouterr().err


def test_log_written(tmp_path, capsys):
    code = main(["cpu", "Core i3-14100", "Ryzen 5 7600", "--provider", "mock", "--log", "--log-dir", str(tmp_path)])
    assert code == 0
    assert len(list(tmp_path.glob("*.jsonl"))) == 1
