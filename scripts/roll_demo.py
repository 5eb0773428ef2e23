"""
Roll one die many times with a seeded roller and save a bar chart of how often each face came up.
Usage: python scripts/roll_demo.py --die d20 --rolls 10000 --seed 7194422452970863838 --out-dir data
"""
import os
import argparse
import logging
from collections import Counter
from typing import Dict

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt

from tomb.core.config import RollerConfig
from tomb.core.dice import D4, D6, D8, D10, D12, D20, D100
from tomb.rollers import ROLLER_MAP, make_roller

DICE = {'d4': D4, 'd6': D6, 'd8': D8, 'd10': D10, 'd12': D12, 'd20': D20, 'd100': D100}

logger = logging.getLogger("roll_demo")


def tally_rolls(die, roller, rolls: int) -> Counter:
    """
    Roll `die` mutably `rolls` times and count the faces that came up.
    Returns:
        Counter: face value -> times seen. Faces never seen are absent.
    """
    counts = Counter()
    for _ in range(rolls):
        counts[roller.roll_mut(die).value] += 1
    return counts


def plot_tally(counts: Dict[int, int], faces: int, out_path: str, title: str):
    labels = list(range(1, faces + 1))
    heights = [counts.get(face, 0) for face in labels]
    width = max(6, int(faces * 0.3))
    plt.figure(figsize=(width, 4))
    plt.bar([str(face) for face in labels], heights, color='C0')
    plt.ylabel('Times rolled')
    plt.xlabel('Face')
    plt.title(title)
    plt.tight_layout()
    plt.savefig(out_path)
    plt.close()


def main():
    parser = argparse.ArgumentParser(description='Roll a die repeatedly and chart the faces that came up')
    parser.add_argument('--die', type=str, default='d6', choices=sorted(DICE.keys()), help='Die to roll')
    parser.add_argument('--rolls', type=int, default=10000, help='Number of rolls')
    parser.add_argument('--roller', type=str, default='rng', help='Roller key from ROLLER_MAP')
    parser.add_argument('--seed', type=int, default=None, help='Seed for reproducible rolls')
    parser.add_argument('--generator', type=str, default='wyrand', help='Seeded generator: wyrand or random')
    parser.add_argument('--out-dir', type=str, default='data', help='Directory to save the chart')
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO)
    if args.roller not in ROLLER_MAP:
        raise SystemExit(f"Unknown roller: {args.roller}. Supported: {list(ROLLER_MAP.keys())}")

    roller = make_roller(RollerConfig(roller=args.roller, rng_seed=args.seed, generator=args.generator))
    die = DICE[args.die]()
    logger.info("rolling %s %d times with %s", args.die, args.rolls, type(roller).__name__)
    counts = tally_rolls(die, roller, args.rolls)

    for face in range(1, die.faces() + 1):
        print(f"{face:>4}: {counts.get(face, 0)}")
    missing = [face for face in range(1, die.faces() + 1) if face not in counts]
    if missing:
        print(f"Faces never rolled: {missing}")

    os.makedirs(args.out_dir, exist_ok=True)
    chart_png = os.path.join(args.out_dir, f"{args.die}_tally.png")
    plot_tally(counts, die.faces(), chart_png, f"{args.die.upper()} x {args.rolls} ({args.roller})")
    print(f"Tally chart: {chart_png}")


if __name__ == '__main__':
    main()
