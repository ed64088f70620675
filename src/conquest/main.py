"""Console entrypoint for Conquest."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from pydantic import ValidationError

from conquest.config import Settings, get_settings
from conquest.domain.errors import MissionError, RegistryInitError
from conquest.session.game_loop import GameSession

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play Conquest in the terminal")
    parser.add_argument("--seed", type=int, help="Seed the dice for a reproducible game")
    parser.add_argument("--player", help="Army color you command")
    parser.add_argument("--territories", type=int, help="Number of territories on the board")
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable ANSI colors in the map",
    )
    parser.add_argument("--log-level", help="Logging level (DEBUG, INFO, WARNING, ...)")
    return parser


def apply_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    """Layer command-line flags over the loaded settings.

    Flags go through the same validation as environment values.

    Raises:
        ValidationError: If a flag breaks a settings constraint
    """

    overrides: dict[str, object] = {}
    if args.seed is not None:
        overrides["seed"] = args.seed
    if args.player is not None:
        overrides["player_faction"] = args.player
    if args.territories is not None:
        overrides["territory_count"] = args.territories
    if args.no_color:
        overrides["use_color"] = False
    if args.log_level is not None:
        overrides["log_level"] = args.log_level
    if not overrides:
        return settings
    return Settings.model_validate({**settings.model_dump(), **overrides})


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = apply_overrides(get_settings(), args)
    except ValidationError as exc:
        logger.error("invalid settings: %s", exc)
        print(f"Error: invalid settings\n{exc}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        session = GameSession.from_settings(settings)
    except (RegistryInitError, MissionError) as exc:
        logger.error("could not start the game: %s", exc)
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return session.run()


if __name__ == "__main__":  # pragma: no cover - manual launch helper
    sys.exit(main())
