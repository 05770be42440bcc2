# gridpath/main.py
"""Command line entry point: solve one puzzle and print its answers."""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional, Sequence

from dotenv import load_dotenv

from .cli import USAGE, CLICommand, parse_command
from .config import CONFIG, Config, LoggingConfig, load_config
from .puzzles.registry import Answer, UnknownPuzzleError, available, get_puzzle

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


def configure_logging(cfg: LoggingConfig) -> None:
    """Apply the global and per-module log levels from ``cfg``."""

    numeric_level = getattr(logging, cfg.global_level.upper(), logging.INFO)
    logging.basicConfig(level=numeric_level, format=LOG_FORMAT, force=True)

    for module_name, level_str in cfg.module_levels.items():
        module_numeric_level = getattr(logging, level_str.upper(), None)
        if isinstance(module_numeric_level, int):
            logging.getLogger(module_name).setLevel(module_numeric_level)
        else:
            logger.warning("Invalid log level '%s' for module '%s' in config.", level_str, module_name)


def bootstrap(config_path: str | Path | None = None) -> Config:
    """Load ``.env`` and the YAML config, then apply environment overrides."""

    env_path = Path(".env")
    if env_path.exists():
        load_dotenv(env_path)

    override = config_path or os.getenv("GRIDPATH_CONFIG")
    cfg = load_config(Path(override)) if override else CONFIG

    inputs = os.getenv("GRIDPATH_INPUTS")
    if inputs:
        cfg = replace(cfg, paths=replace(cfg.paths, inputs=Path(inputs)))
    level = os.getenv("GRIDPATH_LOG_LEVEL")
    if level:
        cfg = replace(cfg, logging=replace(cfg.logging, global_level=level.upper()))
    return cfg


def run(year: int, day: int, input_path: Path) -> List[Answer]:
    """Read ``input_path`` and return the answers of every part."""

    puzzle = get_puzzle(year, day)
    text = input_path.read_text()
    logger.info("Loaded %s (%d bytes) for %d day %d: %s", input_path, len(text), year, day, puzzle.title)
    return puzzle.solve(text)


def execute(cmd: CLICommand, cfg: Config) -> int:
    if cmd.name == "help":
        print(USAGE)
        return EXIT_OK

    if cmd.name == "list":
        for year, day in available():
            print(f"{year} day {day:2d}: {get_puzzle(year, day).title}")
        return EXIT_OK

    try:
        year, day = int(cmd.args[0]), int(cmd.args[1])
    except ValueError:
        print(USAGE, file=sys.stderr)
        return EXIT_USAGE

    input_path = Path(cmd.args[2]) if len(cmd.args) > 2 else cfg.paths.input_file(year, day)

    try:
        answers = run(year, day, input_path)
    except UnknownPuzzleError as exc:
        logger.error("%s", exc)
        return EXIT_USAGE
    except OSError as exc:
        logger.error("Could not read input %s: %s", input_path, exc)
        return EXIT_FAILURE
    except ValueError as exc:
        logger.error("Malformed input in %s: %s", input_path, exc)
        return EXIT_FAILURE

    for number, answer in enumerate(answers, start=1):
        print(f"Part {number}: {answer}")
    return EXIT_OK


def main(argv: Optional[Sequence[str]] = None) -> int:
    cfg = bootstrap()
    configure_logging(cfg.logging)

    cmd = parse_command(sys.argv[1:] if argv is None else argv)
    if cmd is None:
        print(USAGE, file=sys.stderr)
        return EXIT_USAGE
    return execute(cmd, cfg)


if __name__ == "__main__":
    sys.exit(main())
