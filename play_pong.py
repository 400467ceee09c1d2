#!/usr/bin/env python3
"""
Main script to launch Classic Pong
"""

import argparse
import logging
import sys

from classic_pong.core.driver import FrameDriver
from classic_pong.utils.config import KEYBOARD_LAYOUTS
from classic_pong.utils.config import Difficulty
from classic_pong.utils.config import GameMode
from classic_pong.utils.config import MatchSettings
from classic_pong.utils.config import game_config
from classic_pong.utils.config import load_config_from_file

logger = logging.getLogger("classic_pong")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Classic Pong: first to five wins")
    parser.add_argument(
        "--difficulty",
        default=Difficulty.EASY.value,
        help="Computer opponent difficulty: easy, medium or hard (default: easy)",
    )
    parser.add_argument(
        "--mode",
        default=GameMode.SINGLE.value,
        help="single (against the computer) or multi (two players)",
    )
    parser.add_argument("--ai-side", default="right", choices=["left", "right"])
    parser.add_argument(
        "--layout", default=None, choices=list(KEYBOARD_LAYOUTS), help="Keyboard layout"
    )
    parser.add_argument("--config", default=None, help="Path to a JSON configuration file")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the computer opponent")
    parser.add_argument(
        "--headless",
        action="store_true",
        help="Run a match without window or keyboard and print the result",
    )
    parser.add_argument("--max-ticks", type=int, default=200_000, help="Headless tick limit")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    return parser.parse_args(argv)


def run_headless(settings: MatchSettings, seed: int | None, max_ticks: int) -> int:
    """Plays a match with no input and no window; returns a process exit code"""
    driver = FrameDriver(seed=seed)
    driver.start_match(settings)
    result = driver.run_headless(max_ticks=max_ticks)

    if result.error is not None:
        logger.error("Simulation halted after %d ticks", driver.tick_count)
        return 1
    left, right = driver.state.scores.to_tuple()
    if result.outcome.finished:
        print(f"{result.outcome.announcement} ({left} - {right}, {driver.tick_count} ticks)")
    else:
        print(f"No winner after {driver.tick_count} ticks ({left} - {right})")
    return 0


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.config:
        load_config_from_file(args.config)
    if args.layout:
        game_config.KEYBOARD_LAYOUT = args.layout

    settings = MatchSettings(difficulty=args.difficulty, mode=args.mode, ai_side=args.ai_side)

    if args.headless:
        return run_headless(settings, args.seed, args.max_ticks)

    from classic_pong.gui.game_app import main as gui_main

    print("=== CLASSIC PONG ===")
    print("CONTROLS:")
    print("  1 player: W/S (Z/S on AZERTY) or arrow keys")
    print("  2 players: left W/S, right arrow keys")
    print("  ESC: Main menu")
    print()
    gui_main(settings, seed=args.seed)
    return 0


if __name__ == "__main__":
    sys.exit(main())
