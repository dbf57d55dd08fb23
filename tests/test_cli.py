import json
from pathlib import Path

from sublaunch.cli import main


def _run(config_file: Path, *argv: str) -> int:
    return main(["--config", str(config_file), *argv])


def test_classify(config_file, capsys):
    assert _run(config_file, "classify", "subtle wm") == 0
    assert capsys.readouterr().out == "search\thttps://www.google.com/search?q=subtle%20wm\n"
    _run(config_file, "classify", "urxvt @editor")
    assert capsys.readouterr().out == "command\turxvt @editor\n"
    _run(config_file, "classify", "http://example.com")
    assert capsys.readouterr().out == "url\thttp://example.com\n"
    _run(config_file, "classify", "")
    assert capsys.readouterr().out == "empty\n"


def test_complete(config_file, capsys):
    rc = _run(config_file, "complete", "firefo", "--exe", "fetchmail", "--exe", "firefox")
    assert rc == 0
    assert capsys.readouterr().out == "firefox\n"

    rc = _run(config_file, "complete", "firefo", "--index", "1", "--exe", "fetchmail", "--exe", "firefox")
    assert capsys.readouterr().out == "fetchmail\n"

    assert _run(config_file, "complete", "zzz", "--exe", "firefox") == 1


def test_complete_all(config_file, capsys):
    _run(config_file, "complete", "urxvt #w", "--all", "--tag", "work", "--tag", "web")
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["10\t#web", "15\t#work"]


def test_parse(config_file, capsys):
    assert _run(config_file, "parse", "urxvt #work") == 0
    assert json.loads(capsys.readouterr().out) == {
        "tags": ["work"],
        "views": [],
        "spawn": ["urxvt"],
        "synthetic_tag": False,
    }
    _run(config_file, "parse", "--raw", "urxvt @editor")
    assert json.loads(capsys.readouterr().out)["tags"] == []
    _run(config_file, "parse", "urxvt @editor")
    out = json.loads(capsys.readouterr().out)
    assert len(out["tags"]) == 1 and out["synthetic_tag"] is True
    assert _run(config_file, "parse", "subtle wm") == 1


def test_config_get_set_toggle(config_file, capsys):
    assert _run(config_file, "config", "set", "completion.cost_sub", "3") == 0
    capsys.readouterr()
    _run(config_file, "config", "get", "completion.cost_sub")
    assert capsys.readouterr().out == "3\n"
    _run(config_file, "config", "toggle", "pools.use_path")
    assert capsys.readouterr().out == "OK: pools.use_path = true\n"


def test_bad_config_exits_with_2(tmp_path: Path, capsys):
    bad = tmp_path / "config.yaml"
    bad.write_text("completion:\n  cost_ins: -3\n", encoding="utf-8")
    assert _run(bad, "classify", "urxvt") == 2
    assert "Config error" in capsys.readouterr().err
