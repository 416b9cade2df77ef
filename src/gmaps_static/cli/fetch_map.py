from __future__ import annotations

import argparse
from concurrent.futures import TimeoutError as FutureTimeout
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

from gmaps_static.config import init_logging
from gmaps_static.errors import StaticMapError
from gmaps_static.options import STATIC_MAP_PARAMS


# repeatable parameters; each occurrence becomes its own query pair
_MULTI_PARAMS = ("markers", "path", "visible", "style")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="gmaps-static",
        description="Fetch a Google Static Maps image and save it to disk.",
    )
    parser.add_argument("center", help="Map center, 'lat,lng' or a street address.")
    parser.add_argument("--zoom", type=int, help="Zoom level 0-21 (default: 14).")
    parser.add_argument("--size", help="Image size WxH (default: 320x240).")
    parser.add_argument("--scale", type=int)
    parser.add_argument("--format")
    parser.add_argument("--maptype", choices=["roadmap", "satellite", "hybrid", "terrain"])
    parser.add_argument("--language")
    parser.add_argument("--region")
    for name in _MULTI_PARAMS:
        parser.add_argument(f"--{name}", action="append")
    parser.add_argument("--key", help="Google API key (falls back to GMAPS_STATIC_API_KEY).")
    parser.add_argument("--strict", action="store_true", help="Check required parameters before fetching.")
    parser.add_argument("--print-url", action="store_true", help="Print the request URL and exit.")
    parser.add_argument("--out", type=Path, default=Path("staticmap.png"))
    parser.add_argument("--timeout", type=float, help="Seconds to wait for the image.")
    parser.add_argument("--verbose", action="store_true")
    return parser.parse_args(argv)


def options_from_args(args: argparse.Namespace) -> Dict[str, Any]:
    options: Dict[str, Any] = {}
    for name in STATIC_MAP_PARAMS:
        value = getattr(args, name, None)
        if value is None:
            continue
        if name in _MULTI_PARAMS and len(value) == 1:
            value = value[0]
        options[name] = value
    return options


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    init_logging("DEBUG" if args.verbose else "")

    from gmaps_static.api import build_url, fetch_static_map
    from gmaps_static.logger import main_logger as logger

    options = options_from_args(args)
    if args.print_url:
        print(build_url(options))
        return 0

    try:
        handle = fetch_static_map(options, timeout=args.timeout, strict=args.strict)
    except (StaticMapError, FutureTimeout) as e:
        logger.error("static map failed: %s", str(e) or "timed out")
        return 1

    path = handle.save(args.out)
    logger.info("saved %s (%dx%d)", path, handle.width, handle.height)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
