import pytest

from chango.cli import main, parse_args, parse_duration


def test_parse_duration_pins_defaults():
    assert parse_duration("20s") == 20.0
    assert parse_duration("3s") == 3.0
    assert parse_duration("0") == 0.0


@pytest.mark.parametrize(
    "left, right",
    [
        ("1m30s", "90s"),
        ("1500ms", "1.5s"),
        ("2h", "120m"),
        ("1000us", "1ms"),
        ("1000µs", "1ms"),
        ("1000ns", "1us"),
    ],
)
def test_parse_duration_equivalent_forms(left, right):
    assert parse_duration(left) == parse_duration(right)


def test_parse_duration_sign():
    assert parse_duration("-2s") == -parse_duration("2s")
    assert parse_duration("+2s") == parse_duration("2s")


@pytest.mark.parametrize("text", ["", "abc", "5", "1x", "s", "1s2", "-"])
def test_parse_duration_rejects(text):
    with pytest.raises(ValueError):
        parse_duration(text)


def test_parse_args_defaults():
    args = parse_args([])
    assert args.pattern == "observer"
    assert args.filename == "data.json"
    assert args.name == "etzba/etz"
    assert args.tag == "latest"
    assert args.workers == 20
    assert args.duration == 20.0
    assert args.interval == 3.0


def test_parse_args_accepts_flag_forms():
    args = parse_args(["-pattern=hello", "-workers", "5", "--duration", "1m30s"])
    assert args.pattern == "hello"
    assert args.workers == 5
    assert args.duration == parse_duration("90s")


def test_parse_args_rejects_bad_duration():
    with pytest.raises(SystemExit):
        parse_args(["-duration", "later"])


def test_main_runs_hello(capsys):
    assert main(["-pattern", "hello"]) == 0
    out = capsys.readouterr().out
    assert "start executing pattern hello" in out
    assert "value from channel hello" in out


def test_main_runs_pipeline(capsys):
    assert main(["-pattern", "pipeline"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[1].startswith("1. milk = ")
    assert lines[-1].startswith("15. avocado = ")


def test_main_reports_unknown_pattern(capsys):
    assert main(["-pattern", "nothing"]) == 2
    out = capsys.readouterr().out
    assert "Choose relevant pattern by using -pattern=<pattern_name>. Details in README.md" in out