import pytest

from pyparscan import cli
from pyparscan.errors import InvalidSizeError


def test_parse_size():
    assert cli.parse_size("12") == 12
    assert cli.parse_size(" 3\n") == 3
    for bad in ("0", "-4", "abc", ""):
        with pytest.raises(InvalidSizeError):
            cli.parse_size(bad)


def test_preview():
    assert cli.preview([1, 2, 3]) == "[1, 2, 3]"
    assert cli.preview(list(range(25))) == "[" + ", ".join(str(i) for i in range(20)) + ", ...]"


def test_full_run(capsys):
    assert cli.main(["--size", "30", "--seed", "7"]) == 0
    out = capsys.readouterr().out
    assert "Maximum value:" in out
    assert "Last element (total sum):" in out
    assert "Maximum: PASSED" in out
    assert "Prefix sum: PASSED" in out
    assert "All methods: PASSED" in out


def test_trace_output(capsys):
    assert cli.main(["--size", "8", "--mode", "scan", "--seed", "1", "--trace"]) == 0
    out = capsys.readouterr().out
    assert "Upsweep level 0 (stride=2):" in out
    assert "Set root to 0:" in out
    assert "Downsweep level 0 (stride=2):" in out
    assert "Maximum value:" not in out


def test_prompted_size(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", lambda prompt="": "5")
    assert cli.main(["--mode", "max", "--workers", "2"]) == 0
    out = capsys.readouterr().out
    assert "Number of workers: 2" in out
    assert "Number of synchronization steps: 3" in out


@pytest.mark.parametrize("size", ["0", "-3", "ten"])
def test_invalid_size_exits_non_zero(size, capsys):
    assert cli.main(["--size", size]) == 1
    assert "Error:" in capsys.readouterr().err


def test_invalid_workers(capsys):
    assert cli.main(["--size", "4", "--workers", "0"]) == 1
    assert "worker count" in capsys.readouterr().err
