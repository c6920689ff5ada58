"""scxctl CLI."""
from __future__ import annotations

import argparse
import json
import sys

from .core.errors import InvalidRequest, ScxctlError
from .core.modes import Mode
from .loader.client import ScxLoader
from .telemetry.logging import configure, get_logger

log = get_logger("scxctl.cli")


def _connect() -> ScxLoader:
    return ScxLoader.connect()


def _split_args(value: str) -> list[str]:
    out = [a for a in value.split(",") if a]
    if not out:
        raise argparse.ArgumentTypeError("expected at least one argument")
    return out


def _parse_mode(value: str) -> Mode:
    try:
        return Mode.from_label(value)
    except InvalidRequest as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def _cmd_get(args: argparse.Namespace) -> int:
    with _connect() as loader:
        state = loader.get()
    if not state.running:
        print("no scx scheduler running")
    else:
        print(f"running {state.scheduler} in {state.mode} mode")
    return 0


def _cmd_list(args: argparse.Namespace) -> int:
    with _connect() as loader:
        scheds = loader.list_schedulers()
    print(f"supported schedulers: {json.dumps(scheds)}")
    return 0


def _not_running(verb: str) -> int:
    print(f"scxctl: {verb}, but the loader reports no scheduler running", file=sys.stderr)
    return 1


def _cmd_start(args: argparse.Namespace) -> int:
    mode = args.mode
    if mode is None and args.args is None:
        mode = Mode.AUTO
    with _connect() as loader:
        if args.args is not None:
            sched, sched_args = loader.start_scheduler(args.sched, args=args.args)
            if sched is None:
                return _not_running("start requested")
            print(f'started {sched} with arguments "{" ".join(sched_args)}"')
        else:
            sched, mode = loader.start_scheduler(args.sched, mode=mode)
            if sched is None:
                return _not_running("start requested")
            print(f"started {sched} in {mode} mode")
    return 0


def _cmd_switch(args: argparse.Namespace) -> int:
    with _connect() as loader:
        if args.args is not None:
            sched, sched_args = loader.switch_scheduler(args.sched, args=args.args)
            if sched is None:
                return _not_running("switch requested")
            print(f'switched to {sched} with arguments "{" ".join(sched_args)}"')
        else:
            sched, mode = loader.switch_scheduler(args.sched, mode=args.mode)
            if sched is None:
                return _not_running("switch requested")
            print(f"switched to {sched} in {mode} mode")
    return 0


def _cmd_stop(args: argparse.Namespace) -> int:
    with _connect() as loader:
        loader.stop()
    print("stopped")
    return 0


def _add_mode_or_args(sp: argparse.ArgumentParser, mode_help: str) -> None:
    g = sp.add_mutually_exclusive_group()
    g.add_argument(
        "-m",
        "--mode",
        type=_parse_mode,
        default=None,
        metavar="{" + ",".join(m.label for m in Mode) + "}",
        help=mode_help,
    )
    g.add_argument(
        "-a",
        "--args",
        type=_split_args,
        default=None,
        metavar="ARG[,ARG...]",
        help="Arguments to run scheduler with, comma separated (use --args=-x,... when the first one starts with -)",
    )


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="scxctl", description="Control the scx scheduler loader")
    p.add_argument("-v", "--verbose", action="store_true", help="Log remote calls at DEBUG level")
    sub = p.add_subparsers(dest="cmd", required=True)

    sp = sub.add_parser("get", help="Get the current scheduler and mode")
    sp.set_defaults(func=_cmd_get)

    sp = sub.add_parser("list", help="List all supported schedulers")
    sp.set_defaults(func=_cmd_list)

    sp = sub.add_parser("start", help="Start a scheduler in a mode or with arguments")
    sp.add_argument("-s", "--sched", required=True, help="Scheduler to start")
    _add_mode_or_args(sp, "Mode to start in (default: auto)")
    sp.set_defaults(func=_cmd_start)

    sp = sub.add_parser("switch", help="Switch schedulers or modes, optionally with arguments")
    sp.add_argument("-s", "--sched", default=None, help="Scheduler to switch to (default: current)")
    _add_mode_or_args(sp, "Mode to switch to (default: current)")
    sp.set_defaults(func=_cmd_switch)

    sp = sub.add_parser("stop", help="Stop the current scheduler")
    sp.set_defaults(func=_cmd_stop)

    return p


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        configure("DEBUG")
    try:
        return int(args.func(args))
    except ScxctlError as e:
        log.debug("%s failed", args.cmd, exc_info=True)
        print(f"scxctl: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
