"""Count the elementary list operations performed by the selection sort."""

import argparse
from collections import defaultdict as dd
import io
import json
import logging
import os
import sys
from typing import Any, Callable, Iterable, Optional, Type

import timeout_decorator  # type: ignore

from linked4py.collections import DoublyLinkedList, SinglyLinkedList, SortOrder
from linked4py.collections.linked_list import LinkedList
from linked4py.collections.logging import ListOperation, VERBOSE
from linked4py.utils import read_value_sequences

logger = logging.getLogger(__name__)

LIST_KINDS: dict[str, Type[LinkedList[Any]]] = {
    "singly": SinglyLinkedList,
    "doubly": DoublyLinkedList,
}


class VerboseFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno == VERBOSE


def collect_operation_info(operation: Callable[[], Any]) -> dict[str, int]:
    """Run `operation` and count the `ListOperation` events it logs."""
    logger_dict = logging.Logger.manager.loggerDict
    list_loggers = {
        name: list_logger
        for name, list_logger in logger_dict.items()
        if name.startswith("linked4py.collections")
        and isinstance(list_logger, logging.Logger)
    }
    list_logger_configs = {
        name: (
            list_logger.level,
            list_logger.disabled,
            list_logger.propagate,
            list_logger.handlers.copy(),
        )
        for name, list_logger in list_loggers.items()
    }
    stream = io.StringIO()
    handler: logging.Handler = logging.StreamHandler(stream)
    handler.addFilter(VerboseFilter())

    for list_logger in list_loggers.values():
        list_logger.setLevel(VERBOSE)
        list_logger.disabled = False
        list_logger.propagate = False
        list_logger.handlers.clear()
        list_logger.addHandler(handler)

    operation_info: dd[str, int] = dd(int)
    try:
        operation()
        for step in stream.getvalue().splitlines():
            if step not in ListOperation.__members__:
                raise ValueError(f"Unknown list operation: {step}")
            operation_info[step] += 1
    finally:
        handler.close()
        for list_logger, (level, disabled, propagate, handlers) in zip(
            list_loggers.values(), list_logger_configs.values()
        ):
            list_logger.setLevel(level)
            list_logger.disabled = disabled
            list_logger.propagate = propagate
            list_logger.handlers.clear()
            for old_handler in handlers:
                list_logger.addHandler(old_handler)
    return dict(operation_info)


def collect_sort_info(
    list_class: Type[LinkedList[Any]],
    values: list[Any],
    order: SortOrder,
) -> tuple[dict[str, int], list[Any]]:
    linked_list = list_class(values)
    operation_info = collect_operation_info(lambda: linked_list.sort(order=order))
    return operation_info, list(linked_list.values())


def collect_optional_sort_info(
    list_class: Type[LinkedList[Any]],
    values: list[Any],
    order: SortOrder,
    timeout: int,
) -> Optional[dict[str, Any]]:
    try:
        operation_info, result = timeout_decorator.timeout(timeout)(
            collect_sort_info
        )(list_class, values, order)
        return {"operation_info": operation_info, "sorted": result}
    except timeout_decorator.TimeoutError:
        logger.warning("Sort timeout for a sequence of %d values", len(values))
        return None


def run_and_log_trace(
    list_class: Type[LinkedList[Any]],
    sequences: Iterable[list[Any]],
    order: SortOrder = SortOrder.ASC,
    timeout: int = 0,
) -> list[dict[str, Any]]:
    """
    Sort every sequence with `list_class` and print the operation counts of
    each run as JSON.

    Args:
        list_class: `SinglyLinkedList` or `DoublyLinkedList`.
        sequences: Value sequences, see `linked4py.utils.read_value_sequences`.
        order: Sort order to use.
        timeout: Seconds allowed per sequence, 0 for no limit.
    Returns:
        The printed records.
    """
    records = []
    for values in sequences:
        logger.info("Sequence: %s", values)
        result: Optional[dict[str, Any]] = None
        try:
            result = collect_optional_sort_info(list_class, values, order, timeout)
        except TypeError as e:
            logger.error("Values of sequence %s are not comparable: %s", values, e)
        finally:
            record = {"values": values, "result": result}
            records.append(record)
            print(json.dumps(record, indent=2))
    return records


def main(args: argparse.Namespace) -> None:
    list_class = LIST_KINDS[args.kind]
    order = SortOrder[args.order.upper()]
    run_and_log_trace(
        list_class, read_value_sequences(sys.stdin), order, args.timeout
    )


if __name__ == "__main__":
    if __debug__:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=os.environ.get("LOGLEVEL", "WARNING"))
    parser = argparse.ArgumentParser()
    parser.add_argument("--kind", type=str, required=True, choices=list(LIST_KINDS))
    parser.add_argument("--order", type=str, default="asc", choices=["asc", "desc"])
    parser.add_argument("--timeout", type=int, default=60)
    main(parser.parse_args())
