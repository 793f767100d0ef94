"""
Tests for the command-line entry point.
"""

import pytest

from lnxconfig.__main__ import main


def test_dump_prints_directives(write_lnx, example_source: str, capsys) -> None:
    path = write_lnx(example_source)

    assert main([str(path), "--no-color"]) == 0

    out = capsys.readouterr().out.splitlines()
    assert out[:4] == [
        "interface if0 10.0.0.2/24 127.0.0.1:5001",
        "neighbor 10.0.0.1 at 127.0.0.1:5000 via if0",
        "routing rip",
        "rip advertise-to 10.0.0.1",
    ]
    assert "tcp rto-max 5000000" in out


def test_validate(example_config_path, capsys) -> None:
    assert main(["--validate", "-q", str(example_config_path)]) == 0

    out = capsys.readouterr().out
    assert "Routing mode: rip" in out
    assert "Interfaces: 2" in out
    assert "Configuration is valid!" in out
    assert "warnings" not in out


def test_validate_prints_warnings(write_lnx, capsys) -> None:
    path = write_lnx("neighbor 10.0.0.1 at 127.0.0.1:5000 via if0\n")

    assert main(["--validate", str(path)]) == 0

    out = capsys.readouterr().out
    assert "Configuration warnings (1):" in out
    assert "unknown interface 'if0'" in out


def test_parse_error_exits_nonzero(write_lnx, capsys) -> None:
    path = write_lnx("routing rip\ninterface if0 bad\n")

    assert main([str(path)]) == 1

    err = capsys.readouterr().err
    assert "Parse error:" in err
    assert "line 2" in err


def test_missing_file_exits_nonzero(tmp_path, capsys) -> None:
    assert main([str(tmp_path / "nope.lnx")]) == 1
    assert "File not found" in capsys.readouterr().err


def test_version(capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])

    assert exc_info.value.code == 0
    assert "0.1.0" in capsys.readouterr().out
