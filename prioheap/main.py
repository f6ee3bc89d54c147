"""Command-line entry point for prioheap.

Adds the integers given on the command line to a min- or max-heap, drains
it, and prints the values one per line in extraction order.
"""

import logging
from argparse import ArgumentParser
from typing import List, Optional

from prioheap.common import Impossible
from prioheap.heap import PriorityHeap


def build_heap(order: str, values: List[int]) -> PriorityHeap[int]:
    """Create a heap for the given order name and fill it.

    Args:
        order: Either "min" or "max".
        values: The integers to add.

    Returns:
        The populated heap.
    """
    match order:
        case "min":
            heap = PriorityHeap.new_min(int)
        case "max":
            heap = PriorityHeap.new_max(int)
        case _:
            raise Impossible(order)
    for value in values:
        heap.add(value)
        logging.debug("added %d (size %d)", value, heap.size())
    return heap


def main_with_values(order: str, values: List[int]) -> List[int]:
    """Drain a heap built from the values and print the extraction order.

    Returns:
        The drained values, in the order they were printed.
    """
    heap = build_heap(order, values)
    logging.info("draining %s-heap of %d values", order, heap.size())
    drained = []
    for value in heap.drain():
        print(value)
        drained.append(value)
    return drained


def make_parser() -> ArgumentParser:
    """Create the command-line argument parser.

    Returns:
        An ArgumentParser configured with all the command-line options.
    """
    parser = ArgumentParser(prog="prioheap")
    parser.add_argument("--log-level", default="INFO")
    parser.add_argument("--order", choices=["min", "max"], default="min")
    parser.add_argument("values", nargs="*", type=int)
    return parser


def configure_logging(log_level: str) -> None:
    """Configure the logging system with the specified log level.

    Args:
        log_level: The logging level (e.g., 'DEBUG', 'INFO', 'WARNING').
    """
    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(filename)s:%(lineno)d -- %(message)s",
        level=log_level,
    )


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the prioheap command.

    Parses command-line arguments, configures logging, and drains the heap.
    """
    parser = make_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    main_with_values(args.order, args.values)
    logging.info("done")


if __name__ == "__main__":
    main()
