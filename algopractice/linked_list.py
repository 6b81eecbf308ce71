"""Singly linked list of integers and helpers around it."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list; identity, not value, defines equality."""

    val: int = 0
    next: Optional["ListNode"] = None

    def __iter__(self) -> Iterator[int]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next


def build_list(nums: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``nums`` in order; empty input gives None."""
    head: Optional[ListNode] = None
    for value in reversed(list(nums)):
        head = ListNode(value, head)
    return head


def list_to_values(head: Optional[ListNode]) -> list[int]:
    """Return the values of a list as a Python list."""
    return list(head) if head is not None else []


def format_list(head: Optional[ListNode]) -> str:
    """Render a list as ``"1 -> 2 -> nil"``."""
    return "".join(f"{value} -> " for value in list_to_values(head)) + "nil"


def print_list(head: Optional[ListNode]) -> None:
    """Print the rendering of a list."""
    print(format_list(head))


def list_length(head: Optional[ListNode]) -> int:
    """Return the number of nodes in a list."""
    return len(list_to_values(head))


def lists_equal(l1: Optional[ListNode], l2: Optional[ListNode]) -> bool:
    """Return True when both lists hold the same values in the same order."""
    return list_to_values(l1) == list_to_values(l2)