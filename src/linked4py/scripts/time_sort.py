"""Time the selection sort of each list kind on random integer sequences"""

import argparse
import logging
import os
import time
from typing import Any, Type

import numpy as np
from tqdm import tqdm

from linked4py.collections import DoublyLinkedList, SinglyLinkedList, SortOrder
from linked4py.collections.linked_list import LinkedList

logger = logging.getLogger(__name__)


def time_sort(
    list_class: Type[LinkedList[Any]],
    values: list[int],
    order: SortOrder,
) -> float:
    """Seconds taken to sort a fresh list holding `values`."""
    linked_list = list_class(values)
    t0 = time.perf_counter()
    linked_list.sort(order=order)
    t1 = time.perf_counter()
    return t1 - t0


def main(parsed_args: argparse.Namespace) -> None:
    list_class: Type[LinkedList[Any]] = {
        "singly": SinglyLinkedList,
        "doubly": DoublyLinkedList,
    }[parsed_args.kind]
    order = SortOrder[parsed_args.order.upper()]
    rng = np.random.default_rng(parsed_args.seed)

    with open(parsed_args.timing_log_file, "w", encoding="utf-8") as timing_log_file:
        timing_log_file.write("Size\tMean sort duration (ms)\n")
        for size in tqdm(parsed_args.sizes):
            durations = []
            for _ in range(parsed_args.repeats):
                values = rng.integers(0, size * 10 + 1, size=size).tolist()
                durations.append(time_sort(list_class, values, order))
            mean = float(np.mean(durations)) * 1000
            logger.info("Size %d: %.3f ms", size, mean)
            timing_log_file.write(f"{size}\t{mean}\n")


if __name__ == "__main__":
    if __debug__:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=os.environ.get("LOGLEVEL", "WARNING"))
    parser = argparse.ArgumentParser()
    parser.add_argument(
        "--kind",
        type=str,
        required=True,
        choices=["singly", "doubly"],
    )
    parser.add_argument("--order", type=str, default="asc", choices=["asc", "desc"])
    parser.add_argument("--sizes", required=True, type=int, nargs="+")
    parser.add_argument("--repeats", type=int, default=5)
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--timing_log_file", required=True, type=str)
    args = parser.parse_args()
    main(args)
