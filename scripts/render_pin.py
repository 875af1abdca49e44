#!/usr/bin/env python3
"""
Render a repository pin card to disk.

    python scripts/render_pin.py octocat Hello-World --theme dracula
    -> out/octocat/Hello-World.svg

Uses GITHUB_TOKEN from ./secrets.json or the environment.
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

# Add project root to sys.path to allow imports from core/ and cards/
PROJECT_ROOT = Path(__file__).parent.parent.resolve()
sys.path.append(str(PROJECT_ROOT))

from cards.pin_card import render_pin_svg
from cards.themes import DEFAULT_THEME, THEMES, resolve_theme
from core.exceptions import PinError
from core.github_client import build_headers, fetch_repository
from core.models import CardOptions, RepositorySnapshot
from core.utils import load_secrets

SECRETS_PATH = PROJECT_ROOT / "secrets.json"
OUTPUT_DIR = PROJECT_ROOT / "out"

logger = logging.getLogger("render_pin")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render a GitHub repository pin card as SVG.")
    parser.add_argument("username")
    parser.add_argument("repo")
    parser.add_argument("--theme", default=DEFAULT_THEME, choices=sorted(THEMES))
    parser.add_argument("--hide-border", action="store_true")
    parser.add_argument("--hide-owner", action="store_true")
    parser.add_argument("--out", type=Path, help="output file (default: out/<user>/<repo>.svg)")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    args = parse_args(argv)

    headers = build_headers(load_secrets(SECRETS_PATH))
    try:
        payload = fetch_repository(args.username, args.repo, headers)
    except PinError as e:
        logger.error("[%s/%s] %s", args.username, args.repo, e)
        return 1

    options = CardOptions(hide_border=args.hide_border, show_owner=not args.hide_owner)
    snapshot = RepositorySnapshot.from_api(payload, args.username, args.repo, options.show_owner)

    out_file = args.out or OUTPUT_DIR / args.username / f"{args.repo}.svg"
    render_pin_svg(snapshot, resolve_theme(args.theme), options, out_file)
    logger.info("[%s/%s] Wrote %s", args.username, args.repo, out_file)
    return 0


if __name__ == "__main__":
    sys.exit(main())
