"""Command-line interface: ``ethicon [IDENTIFIER] ...``."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from dataclasses import replace

from ethicon.construction import (
    generate_icon_from_style,
    load_style,
    normalise_address,
    random_address,
)
from ethicon.model import IconStyle

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="ethicon",
        description="Derive a reproducible geometric icon from a hex identifier.",
    )
    ap.add_argument(
        "identifier", nargs="?",
        help="Lowercase hex identifier (default: a random one)",
    )
    ap.add_argument(
        "--wallet", metavar="ADDRESS",
        help="Wallet address, with or without 0x prefix (40 hex characters)",
    )
    ap.add_argument(
        "--random", action="store_true",
        help="Use a random identifier (the default when none is given)",
    )
    ap.add_argument(
        "--length", type=int, default=32,
        help="Length of a random identifier (default: 32)",
    )
    ap.add_argument("--style", metavar="FILE", help="JSON style file to load")
    ap.add_argument("--canvas-size", type=int, help="Canvas side length (default: 256)")
    ap.add_argument("--shape-count", type=int, help="Maximum number of shapes (default: 3)")
    ap.add_argument("--svg", metavar="PATH", help="Write the icon as SVG to PATH")
    ap.add_argument("--png", metavar="DIR", help="Write ethicon-<identifier>.png into DIR")
    ap.add_argument("--json", action="store_true", help="Print the full icon as JSON")
    ap.add_argument(
        "--log-level", default="warning",
        choices=["debug", "info", "warning", "error"],
        help="Logging level (default: warning)",
    )
    return ap


def _resolve_identifier(args: argparse.Namespace) -> str:
    if args.wallet is not None:
        return normalise_address(args.wallet)
    if args.identifier is not None:
        return args.identifier
    identifier = random_address(args.length)
    logger.info("Generated random identifier %s", identifier)
    return identifier


def main(argv: Sequence[str] | None = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    sources = [
        args.identifier is not None, args.wallet is not None, args.random,
    ]
    if sum(sources) > 1:
        ap.error("give only one of IDENTIFIER, --wallet or --random")
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper()),
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
    )

    try:
        style = load_style(args.style) if args.style else IconStyle()
        overrides = {}
        if args.canvas_size is not None:
            overrides["canvas_size"] = args.canvas_size
        if args.shape_count is not None:
            overrides["shape_count"] = args.shape_count
        if overrides:
            style = replace(style, **overrides)

        identifier = _resolve_identifier(args)
        icon = generate_icon_from_style(identifier, style)

        if args.svg:
            icon.render_svg(args.svg, style=style)
            logger.info("Wrote %s", args.svg)
        if args.png:
            path = icon.export_png(args.png, style=style)
            logger.info("Wrote %s", path)
    except (ValueError, FileNotFoundError) as exc:
        logger.error("%s", exc)
        return 2

    if args.json:
        print(json.dumps(icon.to_dict(), indent=2))
    else:
        print(icon.identifier)
        print(" ".join("#" + c for c in icon.palette))
    return 0


if __name__ == "__main__":
    sys.exit(main())
