"""
Example on listing the Lehmer codes of a charset.
Prints one line per index, for each chosen direction.
"""

import argparse
import dataclasses
import logging
import sys
from typing import Optional, Sequence

import numpy as np

from lehmer import codec, combinatorics
from lehmer.charset import CharSet
from lehmer.core import Direction

DIRECTIONS = {
    "inc": (Direction.INCREASING,),
    "dec": (Direction.DECREASING,),
    "both": (Direction.INCREASING, Direction.DECREASING),
}


@dataclasses.dataclass(frozen=True)
class Args:
    """
    Example args.

    Args:
        charset: symbols to permute.
        start: first index.
        stop: last index (exclusive). Defaults to the number of permutations.
        direction: inc, dec or both.
        samples: if set, number of indices drawn at random from [start, stop).
        seed: seed for sampling.
    """

    charset: str
    start: int
    stop: Optional[int]
    direction: str
    samples: Optional[int]
    seed: Optional[int]


def parse_args() -> Args:
    """
    Parses std in arguments and returns an instanace of Args.
    """
    arg_parser = argparse.ArgumentParser(prog="Lehmer Code Table Example")
    arg_parser.add_argument("--charset", type=str, default="12345")
    arg_parser.add_argument("--start", type=int, default=0)
    arg_parser.add_argument("--stop", type=int, default=None)
    arg_parser.add_argument(
        "--direction", type=str, choices=sorted(DIRECTIONS), default="both"
    )
    arg_parser.add_argument("--samples", type=int, default=None)
    arg_parser.add_argument("--seed", type=int, default=None)
    args, _ = arg_parser.parse_known_args()
    return Args(**vars(args))


def indices(args: Args, size: int) -> Sequence[int]:
    """
    Indices to encode: a range, or a sorted random sample of it.
    """
    stop = args.stop if args.stop is not None else combinatorics.permutation_count(size)
    if args.samples is None:
        return range(args.start, stop)
    if args.start >= stop:
        raise ValueError(f"Cannot sample from an empty range: [{args.start}, {stop})")
    if stop > np.iinfo(np.int64).max:
        raise ValueError(
            f"Cannot sample indices beyond {np.iinfo(np.int64).max}. Got stop: {stop}"
        )
    rng = np.random.default_rng(args.seed)
    return sorted(rng.integers(args.start, stop, size=args.samples).tolist())


def main(args: Args) -> int:
    """
    Entry point.
    """
    try:
        charset = CharSet.from_str(args.charset)
        for index in indices(args, size=charset.size):
            for direction in DIRECTIONS[args.direction]:
                code = codec.from_decimal(index, charset=charset, direction=direction)
                logging.info("%d -> %s", index, code)
    except ValueError as err:
        logging.error(err)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main(args=parse_args()))
