"""CLI to run a single geometry query and print the result as JSON.

Usage:
  bgeo-query circle-intersect 0 0 5 8 0 5
  bgeo-query --eps 1e-6 line-circle 0 0 10 0 5 0 3
  bgeo-query divide 0 0 10 0 4
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Callable

from bgeo import circle, line
from bgeo.constants import EPS
from bgeo.cli.config_utils import config_to_argv, default_config_path
from bgeo.logging_config import setup_logging

logger = logging.getLogger(__name__)


def _eprint(*args: object) -> None:
    print(*args, file=sys.stderr)


def _jsonable(value: Any) -> Any:
    if value is None or isinstance(value, (bool, float, int)):
        return value
    if hasattr(value, "to_json"):
        return value.to_json()
    if isinstance(value, list):
        return [_jsonable(v) for v in value]
    raise TypeError(f"Cannot serialise {type(value).__name__}")


# name -> (positional coordinate names, runner(values, args))
_Runner = Callable[[list, argparse.Namespace], Any]
COMMANDS: dict[str, tuple[tuple[str, ...], _Runner, str]] = {
    "circle-closest": (
        ("cx", "cy", "r", "px", "py"),
        lambda v, a: circle.closest_point(*v),
        "Closest point on a circle to a point.",
    ),
    "circle-check": (
        ("ax", "ay", "ar", "bx", "by", "br"),
        lambda v, a: circle.check_intersection(*v, eps=a.eps, legacy_gate=a.legacy_gate),
        "Whether two circles intersect.",
    ),
    "circle-intersect": (
        ("ax", "ay", "ar", "bx", "by", "br"),
        lambda v, a: circle.intersect(*v, eps=a.eps, legacy_gate=a.legacy_gate),
        "Intersection points of two circles.",
    ),
    "line-closest": (
        ("ax", "ay", "bx", "by", "px", "py"),
        lambda v, a: line.closest_point(*v, eps=a.eps),
        "Closest point on a segment to a point.",
    ),
    "line-distance": (
        ("ax", "ay", "bx", "by", "px", "py"),
        lambda v, a: line.distance(*v, eps=a.eps),
        "Distance from a point to a segment.",
    ),
    "line-intersect": (
        ("ax", "ay", "bx", "by", "cx", "cy", "dx", "dy"),
        lambda v, a: line.intersect(*v, eps=a.eps),
        "Intersection point of two segments.",
    ),
    "line-circle": (
        ("x1", "y1", "x2", "y2", "cx", "cy", "r"),
        lambda v, a: line.intersect_circle(*v),
        "Points where a segment crosses a circle.",
    ),
    "line-circle-distance": (
        ("x1", "y1", "x2", "y2", "cx", "cy", "r"),
        lambda v, a: line.distance_to_circle(*v, eps=a.eps),
        "Distance from a segment to a circle's perimeter.",
    ),
}


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="bgeo-query", description="Run a 2D circle/segment geometry query.")
    ap.add_argument("--config", type=Path, default=None, help="JSON/YAML config (default: configs/query.json).")
    ap.add_argument("--no-config", action="store_true", help="Ignore any config file.")
    ap.add_argument("--eps", type=float, default=EPS, help="Fuzzy-zero tolerance (default: float32 eps).")
    ap.add_argument(
        "--legacy-gate",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="Use the legacy OR-combined circle-circle intersection test.",
    )
    ap.add_argument(
        "--verbose",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="Log degenerate cases at DEBUG level.",
    )
    sub = ap.add_subparsers(dest="op", required=True)

    for name, (coords, _, help_text) in COMMANDS.items():
        p = sub.add_parser(name, help=help_text)
        for coord in coords:
            p.add_argument(coord, type=float)

    p = sub.add_parser("divide", help="Split a segment into n equal parts.")
    for coord in ("ax", "ay", "bx", "by"):
        p.add_argument(coord, type=float)
    p.add_argument("n", type=int)
    return ap


def run(args: argparse.Namespace) -> Any:
    if args.op == "divide":
        return line.divide(args.ax, args.ay, args.bx, args.by, args.n)
    coords, runner, _ = COMMANDS[args.op]
    values = [getattr(args, c) for c in coords]
    return runner(values, args)


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)

    pre = argparse.ArgumentParser(add_help=False)
    pre.add_argument("--config", type=Path, default=None)
    pre.add_argument("--no-config", action="store_true")
    pre_args, _ = pre.parse_known_args(argv)
    if pre_args.no_config and pre_args.config is not None:
        raise SystemExit("Use either --config or --no-config, not both.")
    config_path = None if pre_args.no_config else (pre_args.config or default_config_path("query.json"))
    config_args = config_to_argv(config_path, section_keys=("query",)) if config_path is not None else []

    args = build_parser().parse_args(config_args + argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)
    logger.debug("query %s (config=%s)", args.op, config_path)

    try:
        result = run(args)
    except ValueError as exc:
        _eprint(f"error: {exc}")
        return 2

    print(json.dumps({"op": args.op, "result": _jsonable(result)}))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
