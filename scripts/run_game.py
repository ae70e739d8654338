from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
sys.path.insert(0, str(SRC))

from quest import config
from quest.cases.loader import load_case_world
from quest.domain.errors import CaseFileError
from quest.session import run_session
from quest.util.logs import LOG_LEVELS, configure_logging

logger = logging.getLogger("quest.run_game")


def main() -> int:
    parser = argparse.ArgumentParser(description="Explore the mansion and accuse a suspect.")
    parser.add_argument("--case", type=str, default=None, help="YAML case file to play.")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=config.DEFAULT_LOG_LEVEL,
    )
    args = parser.parse_args()

    try:
        configure_logging(args.log_level)
    except ValueError as exc:
        parser.error(str(exc))
    try:
        world = load_case_world(Path(args.case) if args.case else None)
        run_session(world)
    except CaseFileError as exc:
        parser.exit(2, f"{exc}\n")
    except MemoryError:
        logger.error("Out of memory; aborting.")
        print("Erro de alocacao de memoria.", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
