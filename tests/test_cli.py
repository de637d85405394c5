import pytest

from portscanx.cli import build_parser, main, options_from_args
from portscanx.config import OutputFormat


def test_cli_help(capsys):
    with pytest.raises(SystemExit) as exit_info:
        main(["--help"])
    assert exit_info.value.code == 0
    assert "Usage" in capsys.readouterr().out


def test_cli_version(capsys):
    with pytest.raises(SystemExit) as exit_info:
        main(["--version"])
    assert exit_info.value.code == 0
    assert "0.1.0" in capsys.readouterr().out


def test_cli_run_localhost(monkeypatch, tmp_path, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["127.0.0.1", "--ports", "80", "--timeout", "100"]) == 0
    assert "127.0.0.1:80" in capsys.readouterr().out


def test_cli_run_invalid_ip(monkeypatch, tmp_path, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["999.999.999.999", "--ports", "80", "--timeout", "100"]) == 1
    assert (
        "No valid IP addresses or CIDR ranges found in the targets."
        in capsys.readouterr().err
    )


def test_missing_target_is_usage_error():
    with pytest.raises(SystemExit) as exit_info:
        main([])
    assert exit_info.value.code == 2


def test_negative_timeout_is_rejected():
    with pytest.raises(SystemExit) as exit_info:
        build_parser().parse_args(["127.0.0.1", "--timeout", "-5"])
    assert exit_info.value.code == 2


def test_options_defaults():
    options = options_from_args(build_parser().parse_args(["10.0.0.1"]))
    assert options.targets == ["10.0.0.1"]
    assert options.ports == list(range(1, 65536))
    assert options.timeout == 0.5
    assert options.output_format is OutputFormat.TERMINAL
    assert options.parallelism == 100
    assert options.verbose is False
    assert options.open_only is False


def test_options_from_all_flags():
    args = build_parser().parse_args(
        ["10.0.0.1", "-p", "20-22", "-t", "250", "-o", "json", "--only-open", "-v"]
    )
    options = options_from_args(args)
    assert options.ports == [20, 21, 22]
    assert options.timeout == 0.25
    assert options.output_format is OutputFormat.JSON
    assert options.open_only is True
    assert options.verbose is True


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("csv", OutputFormat.CSV),
        ("json", OutputFormat.JSON),
        ("terminal", OutputFormat.TERMINAL),
        ("xml", OutputFormat.TERMINAL),
    ],
)
def test_output_format_selection(name, expected):
    args = build_parser().parse_args(["10.0.0.1", "--output", name])
    assert options_from_args(args).output_format is expected


def test_csv_output_written(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    assert main(["127.0.0.1", "-p", "80", "-t", "100", "-o", "csv"]) == 0
    text = (tmp_path / "portscanx.csv").read_text(encoding="utf-8")
    assert text.startswith("IP,Port,Status,Service\n")