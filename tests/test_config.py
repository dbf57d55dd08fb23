from pathlib import Path

import pytest

from sublaunch.config import ConfigError, executable_dirs, load_config, resolve_log_path, resolve_status_path


def test_defaults_without_file():
    cfg = load_config(None)
    assert cfg.completion.cost_sub == 1
    assert cfg.completion.cost_ins == 5
    assert cfg.completion.cost_del == 5
    assert cfg.launcher.idle_status == "Nothing selected"
    assert cfg.commands.adhoc_tag_style == "uuid"


def test_missing_file_gives_defaults(tmp_path: Path):
    assert load_config(tmp_path / "absent.yaml").completion.buffer_size == 20


def test_overrides_from_yaml(tmp_path: Path):
    p = tmp_path / "config.yaml"
    p.write_text(
        "completion:\n  cost_sub: 2\n  max_suggestions: 5\n"
        "executor:\n  browser: 'firefox -new-tab {url}'\n"
        "pools:\n  tags: [web, work]\n",
        encoding="utf-8",
    )
    cfg = load_config(p)
    assert cfg.completion.cost_sub == 2
    assert cfg.completion.cost_ins == 5
    assert cfg.completion.max_suggestions == 5
    assert cfg.executor.browser == "firefox -new-tab {url}"
    assert cfg.pools.tags == ["web", "work"]


@pytest.mark.parametrize(
    "body",
    [
        "completion:\n  cost_sub: -1\n",
        "completion:\n  buffer_size: 0\n",
        "launcher:\n  search_url: https://example.com/search\n",
        "commands:\n  adhoc_tag_style: random\n",
        "- just\n- a list\n",
        "completion: [unclosed\n",
    ],
)
def test_invalid_config_raises(tmp_path: Path, body: str):
    p = tmp_path / "config.yaml"
    p.write_text(body, encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(p)


def test_repo_template_is_valid():
    template = Path(__file__).resolve().parents[1] / "config.yaml"
    cfg = load_config(template)
    assert cfg.pools.executable_dirs == ["/usr/bin"]


def test_explicit_status_path(tmp_path: Path):
    p = tmp_path / "config.yaml"
    target = tmp_path / "state" / "status.json"
    p.write_text(f"ui:\n  status_path: '{target}'\n", encoding="utf-8")
    assert resolve_status_path(load_config(p)) == target


def test_log_path_and_level(tmp_path: Path):
    p = tmp_path / "config.yaml"
    target = tmp_path / "logs" / "launcher.log"
    p.write_text(f"ui:\n  log_level: debug\n  log_path: '{target}'\n", encoding="utf-8")
    cfg = load_config(p)
    assert cfg.ui.log_level == "DEBUG"
    assert resolve_log_path(cfg) == target

    p.write_text("ui:\n  log_path: off\n", encoding="utf-8")
    assert resolve_log_path(load_config(p)) is None


def test_unknown_log_level_is_rejected(tmp_path: Path):
    p = tmp_path / "config.yaml"
    p.write_text("ui:\n  log_level: chatty\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(p)


def test_executable_dirs_with_path(tmp_path: Path):
    p = tmp_path / "config.yaml"
    p.write_text("pools:\n  executable_dirs: [/opt/bin]\n  use_path: true\n", encoding="utf-8")
    cfg = load_config(p)
    assert executable_dirs(cfg, path_dirs=[Path("/usr/local/bin")]) == [Path("/opt/bin"), Path("/usr/local/bin")]
