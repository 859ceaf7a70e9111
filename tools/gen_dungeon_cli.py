"""Command line interface to generate dungeon layouts for development."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from config.config_loader import load_generation_config
from modules.dungeon.errors import DungeonGenError
from modules.dungeon.gen import GenerationConfig, generate_dungeon
from modules.dungeon.spec import save_json
from utils.logger import LOG_LEVELS, get_generation_logger


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate a procedural dungeon layout.")
    seed_group = parser.add_mutually_exclusive_group()
    seed_group.add_argument("--seed", type=int, default=None)
    seed_group.add_argument(
        "--random-seed",
        action="store_true",
        help="Draw the seed from OS entropy. Output is not reproducible; the seed is logged.",
    )
    parser.add_argument(
        "--config",
        help="Optional YAML settings file with a 'dungeon' section. Defaults are used when omitted.",
    )
    parser.add_argument("--out", help="Path to the JSON output. When omitted nothing is written.")
    parser.add_argument("--ascii", action="store_true", help="Print the layout as ASCII art.")
    parser.add_argument("--log-level", default="BASIC", choices=sorted(LOG_LEVELS))
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    logger = get_generation_logger(args.log_level)

    try:
        config = load_generation_config(args.config) if args.config else GenerationConfig()
    except (DungeonGenError, OSError) as exc:
        parser.error(str(exc))

    try:
        spec = generate_dungeon(config, args.seed, nondeterministic=args.random_seed)
    except DungeonGenError:
        logger.exception("Dungeon generation failed")
        return 1

    if args.out:
        out_path = Path(args.out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        save_json(spec, out_path)
        logger.info("Wrote %s", out_path)

    if args.ascii:
        print(spec.grid.render_ascii())

    print(f"seed={spec.seed} stages={len(spec.stages)} cells={len(spec.grid)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
