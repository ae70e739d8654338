from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
sys.path.insert(0, str(SRC))

from quest.cases.loader import load_case_world
from quest.domain.errors import CaseFileError
from quest.world.exporters import dump_map


def main() -> None:
    parser = argparse.ArgumentParser(description="Dump the room map and clue associations.")
    parser.add_argument("--case", type=str, default=None)
    parser.add_argument("--out", type=str, default=None)
    args = parser.parse_args()

    try:
        world = load_case_world(Path(args.case) if args.case else None)
    except CaseFileError as exc:
        parser.exit(2, f"{exc}\n")
    output = dump_map(world.room_map, world.index, title=world.case.title)

    if args.out:
        with open(args.out, "w", encoding="utf-8") as handle:
            handle.write(output)
        print(f"Wrote map dump to {args.out}")
        return

    print(output)


if __name__ == "__main__":
    main()
