from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from sublaunch.classifier import CommandIntent, Empty, SearchIntent, UrlIntent
from sublaunch.commands import split_command
from sublaunch.config import Config, ConfigError, load_config, resolve_log_path, resolve_status_path
from sublaunch.engine import Engine, pools_from_host
from sublaunch.executor import SystemHost
from sublaunch.logging_setup import setup_logging
from sublaunch.paths import ensure_default_config, find_config_path, get_paths, template_path
from sublaunch.pools import CandidatePools
from sublaunch.status import StatusWriter
from sublaunch.yaml_config import get_dotted, set_dotted, toggle_dotted


def _load(args: argparse.Namespace) -> Config:
    path = find_config_path(getattr(args, "config", None))
    return load_config(path)


def _offline_engine(args: argparse.Namespace, cfg: Config) -> Engine:
    """Engine for one-shot commands: pools from flags, or from the system host."""
    tags = args.tag or []
    views = args.view or []
    exes = args.exe or []
    if tags or views or exes:
        return Engine(CandidatePools.from_names(tags=tags, views=views, executables=exes), config=cfg)
    return Engine(pools_from_host(SystemHost.from_config(cfg)), config=cfg)


def _cmd_run(args: argparse.Namespace) -> int:
    from sublaunch.prompt_ui import read_and_run

    cfg = _load(args)
    setup_logging(level=cfg.ui.log_level, log_path=resolve_log_path(cfg))
    host = SystemHost.from_config(cfg)
    engine = Engine.from_host(host, config=cfg)
    status = StatusWriter(path=resolve_status_path(cfg))
    return read_and_run(engine, host, prompt=cfg.ui.prompt, status=status, loop=args.loop)


def _cmd_classify(args: argparse.Namespace) -> int:
    engine = Engine(config=_load(args))
    intent = engine.classify(args.text)
    if isinstance(intent, Empty):
        print("empty")
    elif isinstance(intent, UrlIntent):
        print(f"url\t{intent.target}")
    elif isinstance(intent, CommandIntent):
        print(f"command\t{intent.raw}")
    elif isinstance(intent, SearchIntent):
        print(f"search\t{intent.target}")
    return 0


def _cmd_complete(args: argparse.Namespace) -> int:
    engine = _offline_engine(args, _load(args))
    if args.all:
        for g in engine.guesses(args.text):
            print(f"{g.score}\t{g.suggestion}")
        return 0
    found = engine.on_completion_requested(args.text, args.index)
    if found is None:
        return 1
    print(found)
    return 0


def _cmd_parse(args: argparse.Namespace) -> int:
    if args.raw:
        desc = split_command(args.text)
    else:
        action = Engine(config=_load(args)).on_commit(args.text)
        desc = getattr(action, "command", None)
        if desc is None:
            print(f"Not a command: {args.text!r}", file=sys.stderr)
            return 1
    print(json.dumps(desc.as_dict(), ensure_ascii=False))
    return 0


def _cmd_init(args: argparse.Namespace) -> int:
    paths = get_paths()
    dest = paths.config_path if args.dest is None else Path(args.dest).expanduser().resolve()
    ensure_default_config(template=template_path(), dest_path=dest)
    print(f"Config: {dest}")
    print(f"State dir: {paths.state_dir}")
    return 0


def _config_target(args: argparse.Namespace) -> Path:
    cfg_path = find_config_path(args.config)
    ensure_default_config(template=template_path(), dest_path=cfg_path)
    return cfg_path


def _cmd_config_get(args: argparse.Namespace) -> int:
    print(get_dotted(_config_target(args), args.key, default=None))
    return 0


def _cmd_config_set(args: argparse.Namespace) -> int:
    set_dotted(_config_target(args), args.key, args.value)
    print(f"OK: {args.key} = {args.value}")
    return 0


def _cmd_config_toggle(args: argparse.Namespace) -> int:
    new = toggle_dotted(_config_target(args), args.key)
    print(f"OK: {args.key} = {str(new).lower()}")
    return 0


def _add_pool_flags(p: argparse.ArgumentParser) -> None:
    p.add_argument("--tag", action="append", help="Tag candidate (repeatable)")
    p.add_argument("--view", action="append", help="View candidate (repeatable)")
    p.add_argument("--exe", action="append", help="Executable candidate (repeatable)")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="sublaunch", description="Tag-aware launcher with fuzzy completion")
    p.add_argument("--config", default=None, help="Path to config.yaml (otherwise XDG/portable)")
    sub = p.add_subparsers(dest="cmd", required=False)

    p_run = sub.add_parser("run", help="Interactive launcher prompt")
    p_run.add_argument("--loop", action="store_true", help="Keep prompting after each command")
    p_run.set_defaults(func=_cmd_run)

    p_cls = sub.add_parser("classify", help="Print how a line would be handled")
    p_cls.add_argument("text")
    p_cls.set_defaults(func=_cmd_classify)

    p_cmp = sub.add_parser("complete", help="Complete the last token of a line")
    p_cmp.add_argument("text")
    p_cmp.add_argument("--index", default=0, type=int, help="Rank to return (0 = best)")
    p_cmp.add_argument("--all", action="store_true", help="Print every guess with its score")
    _add_pool_flags(p_cmp)
    p_cmp.set_defaults(func=_cmd_complete)

    p_parse = sub.add_parser("parse", help="Split a command into tags, views and programs")
    p_parse.add_argument("text")
    p_parse.add_argument("--raw", action="store_true", help="Skip the ad-hoc tag policy")
    p_parse.set_defaults(func=_cmd_parse)

    p_init = sub.add_parser("init", help="Create config.yaml in the XDG config dir")
    p_init.add_argument("--dest", default=None, help="Where to write config.yaml")
    p_init.set_defaults(func=_cmd_init)

    p_cfg = sub.add_parser("config", help="Edit config.yaml keys")
    cfg_sub = p_cfg.add_subparsers(dest="cfg_cmd", required=True)

    p_get = cfg_sub.add_parser("get", help="Read a key")
    p_get.add_argument("key", help="e.g. completion.cost_sub")
    p_get.set_defaults(func=_cmd_config_get)

    p_set = cfg_sub.add_parser("set", help="Set a key")
    p_set.add_argument("key", help="e.g. executor.browser")
    p_set.add_argument("value", help="e.g. true / 5 / 'firefox -new-tab {url}'")
    p_set.set_defaults(func=_cmd_config_set)

    p_tog = cfg_sub.add_parser("toggle", help="Flip a boolean key")
    p_tog.add_argument("key", help="e.g. pools.use_path")
    p_tog.set_defaults(func=_cmd_config_toggle)

    return p


def main(argv: list[str] | None = None) -> int:
    p = build_parser()
    args = p.parse_args(argv)
    setup_logging()

    if args.cmd is None:
        args.loop = False
        args.func = _cmd_run

    try:
        return int(args.func(args))
    except ConfigError as e:
        print(f"Config error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
