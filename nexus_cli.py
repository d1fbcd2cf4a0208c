"""Command-line access to root systems, projections and decay channels."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from nexus.basis import default_basis
from nexus.config import Config
from nexus.decay import resolve_decay
from nexus.groups import LIE_GROUPS
from nexus.projection import project
from nexus.roots import generate_roots


def cmd_groups(args) -> dict:
    return {"groups": [g.to_dict() for g in LIE_GROUPS]}


def cmd_roots(args) -> dict:
    roots = generate_roots(args.group)
    return {"group": args.group, "count": len(roots), "roots": [r.to_dict() for r in roots]}


def cmd_project(args) -> dict:
    roots = generate_roots(args.group)
    points = project(
        roots,
        args.angle,
        default_basis(args.group),
        progress=args.progress,
        wick_rotation=args.wick,
        universe_time=args.time,
    )
    return {"group": args.group, "nodes": [{"id": p.id, "x": p.x, "y": p.y} for p in points]}


def cmd_decay(args) -> dict:
    roots = generate_roots(args.group)
    if not 0 <= args.index < len(roots):
        raise SystemExit(f"index {args.index} out of range for {args.group} ({len(roots)} roots)")
    interaction = resolve_decay(roots[args.index], roots)
    if interaction is None:
        return {"found": False, "parent": roots[args.index].to_dict()}
    return {"found": True, **interaction.to_dict()}


def build_argparser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("groups", help="List supported groups")

    p = sub.add_parser("roots", help="Print the root system of a group")
    p.add_argument("group", help="G2, F4, E6, E7 or E8")

    p = sub.add_parser("project", help="Project a group onto its default Petrie plane")
    p.add_argument("group")
    p.add_argument("--angle", type=float, default=0.0, help="Planar rotation in radians")
    p.add_argument("--progress", type=float, default=1.0, help="Blend from reference (0) to Petrie (1)")
    p.add_argument("--wick", type=float, default=0.0, help="Wick drift strength")
    p.add_argument("--time", type=float, default=0.0, help="Universe time")

    p = sub.add_parser("decay", help="Find a decay pair for one root")
    p.add_argument("group")
    p.add_argument("index", type=int, help="Index of the parent root")

    p = sub.add_parser("serve", help="Run the HTTP server")
    p.add_argument("--host", default=Config.server.HOST)
    p.add_argument("--port", type=int, default=Config.server.PORT)
    return parser


COMMANDS = {
    "groups": cmd_groups,
    "roots": cmd_roots,
    "project": cmd_project,
    "decay": cmd_decay,
}


def main(argv=None) -> None:
    args = build_argparser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose or Config.core.DEBUG else logging.WARNING)

    if args.command == "serve":
        from nexus.server import run
        run(host=args.host, port=args.port)
        return

    json.dump(COMMANDS[args.command](args), sys.stdout, indent=2, ensure_ascii=False)
    sys.stdout.write("\n")


if __name__ == "__main__":
    main()
