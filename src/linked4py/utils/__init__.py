"""Utility functions for the project."""

import json
import os
from typing import TYPE_CHECKING, Any, Iterable, Optional, Union

if TYPE_CHECKING:
    from ..collections.linked_list import LinkedList


def escape(values: list[Any]) -> str:
    return json.dumps(values)


def unescape(text: str) -> list[Any]:
    output = json.loads(text)
    if not isinstance(output, list):
        raise ValueError("Invalid value sequence")
    return output


def load_value_sequences(
    path: Union[os.PathLike[str], str],
) -> Iterable[list[Any]]:
    with open(path, "r", encoding="utf-8") as dataset:
        yield from read_value_sequences(dataset)


def read_value_sequences(dataset: Iterable[str]) -> Iterable[list[Any]]:
    """One JSON array per line. Blank lines and `#` comments are skipped."""
    for line in dataset:
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        yield unescape(line)


def render(linked_list: "LinkedList[Any]") -> Optional[str]:
    """`None` for an empty list, otherwise the nodes joined by the list's
    separator."""
    if linked_list.is_empty():
        return None
    return str(linked_list)
