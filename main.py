from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

# Make sure the 'src' directory is on sys.path so 'ouroboros' can be imported
REPO_ROOT = Path(__file__).resolve().parent
SRC_DIR = REPO_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from ouroboros import CyclicDeque, OwnedCyclicDeque, load_config


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Push values through a cyclic deque and show how it wraps.",
    )
    parser.add_argument("--config", type=Path, help="YAML file with a cyclic_deque block")
    parser.add_argument("--capacity", type=int, default=4, help="buffer slots (default: 4)")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    parser.add_argument("values", nargs="*", type=int, default=[41, 42])
    return parser.parse_args(argv)


def _print(name: str, items: Sequence) -> None:
    print(f"{name} contents:")
    for item in items:
        print(item)
    print()


def main(argv: Sequence[str] | None = None) -> None:
    """
    Demo entry point.

    Alternates ``push_back``/``push_front`` of the given values, dropping the
    oldest element from the opposite end whenever the deque is full, then
    prints both the physical buffer and the logical order.
    """
    args = _parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.config is not None:
        ring: CyclicDeque = OwnedCyclicDeque.from_config(load_config(args.config))
    else:
        ring = CyclicDeque([-1] * args.capacity)

    if ring.capacity() == 0:
        print("capacity is 0, nothing to do", file=sys.stderr)
        raise SystemExit(1)

    for i, value in enumerate(args.values):
        if i % 2 == 0:
            if ring.full():
                ring.pop_front()
            ring.push_back(value)
        else:
            if ring.full():
                ring.pop_back()
            ring.push_front(value)

    _print("buffer", list(ring.buffer))
    _print("ring", ring.to_list())


if __name__ == "__main__":
    main(sys.argv[1:])
