"""
Demo program: sort one array of random 64-bit integers with selected algorithms.

Usage:
    sortlib-demo -n 1000 -q -m -r
    sortlib-demo --all -n 20 --debug --seed 42

For every selected algorithm the unsorted data is copied, sorted, and checked
with verify_sort. The number of comparator calls (key extractions for radix) is
reported per algorithm. Exit status is 0 when every result verified, 1 on a
usage error or a failed verification.
"""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional, Sequence

from rich.console import Console
from rich.markup import escape

from sortlib.algorithms import ALGORITHMS, sort_in_place
from sortlib.contracts import CallCounter, natural_order, reverse_order
from sortlib.datasets import MWCGenerator
from sortlib.errors import SortError
from sortlib.validate.verify import verify_sort

logger = logging.getLogger(__name__)

DEFAULT_NUM_ITEMS = 1000

_FLAGS = {
    "insertion": "-i",
    "bubble": "-b",
    "shell": "-s",
    "quick": "-q",
    "merge": "-m",
    "heap": "-H",
    "radix": "-r",
}


def _hex_words(values: Sequence[int]) -> str:
    # two's complement, like a 64-bit register dump
    return " ".join(f"{v & 0xFFFFFFFFFFFFFFFF:016X}" for v in values)


def run_demo(
    num_items: int,
    methods: List[str],
    *,
    console: Console,
    debug: bool = False,
    descending: bool = False,
    seed: Optional[int] = None,
) -> int:
    """Run the selected algorithms over one random array; return the exit status."""
    gen = MWCGenerator.from_time() if seed is None else MWCGenerator.from_seed(seed)
    logger.debug("data source: %r", gen)
    unsorted = gen.integers(num_items)
    compare = reverse_order if descending else natural_order

    if debug:
        console.print("Unsorted list:")
        console.print(_hex_words(unsorted), soft_wrap=True)

    failures = 0
    for name in methods:
        data = list(unsorted)
        counter = CallCounter()
        sort_in_place(name, data, compare, counter=counter, radix_width=8, radix_signed=True)

        console.print(f"{name.capitalize()} sort:")
        if debug:
            console.print("Sorted list:")
            console.print(_hex_words(data), soft_wrap=True)
        console.print(f"Number of comparisons to sort {num_items} items: {counter.calls}")

        # radix passes always produce ascending order
        expected = natural_order if name == "radix" else compare
        if not verify_sort(data, expected):
            console.print("[bold red]ERROR: Sort results are incorrect.[/bold red]")
            failures += 1

    return 0 if failures == 0 else 1


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="sortlib-demo",
        description="Sort an array of random 64-bit integers with the selected algorithms.",
    )
    p.add_argument("-n", "--num-items", type=int, default=None,
                   help=f"number of elements to sort (default {DEFAULT_NUM_ITEMS})")
    for name, flag in _FLAGS.items():
        p.add_argument(flag, f"--{name}", dest="methods", action="append_const", const=name,
                       help=f"use {name} sort")
    p.add_argument("-a", "--all", action="store_true", help="use every algorithm")
    p.add_argument("-d", "--debug", action="store_true",
                   help="display sort results and other debug information")
    p.add_argument("--descending", action="store_true",
                   help="sort comparison-based methods in descending order")
    p.add_argument("--seed", type=int, default=None, help="seed for the random data (default: time)")
    return p


def main(argv: Optional[List[str]] = None, console: Optional[Console] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    console = console or Console(highlight=False)
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING)

    selected = set(args.methods or [])
    methods = [name for name in ALGORITHMS if args.all or name in selected]
    if not methods:
        console.print("[bold red]Error:[/bold red] No sort methods selected")
        console.print(parser.format_usage(), markup=False)
        return 1

    num_items = args.num_items
    if num_items is None:
        console.print("Number of items to sort is unspecified.")
        console.print(f"Defaulting to {DEFAULT_NUM_ITEMS}.")
        num_items = DEFAULT_NUM_ITEMS
    elif num_items < 2:
        console.print("[bold red]Error:[/bold red] At least 2 items are required for sort.")
        return 1

    try:
        return run_demo(
            num_items,
            methods,
            console=console,
            debug=args.debug,
            descending=args.descending,
            seed=args.seed,
        )
    except (SortError, ValueError) as e:
        console.print(f"[bold red]Sort failed:[/bold red] {escape(str(e))}")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
