"""Singly linked list puzzles: digit addition, k-way merge, removal and reordering."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import zip_longest


@dataclass(eq=False)
class ListNode:
    """One node of a singly linked list."""

    val: int = 0
    next: ListNode | None = None

    def __iter__(self) -> Iterator[int]:
        node: ListNode | None = self
        while node is not None:
            yield node.val
            node = node.next


def build_list(values: Iterable[int]) -> ListNode | None:
    """Linked list holding ``values`` in order; None when there are none."""
    dummy = ListNode()
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def list_values(head: ListNode | None) -> list[int]:
    """Values of the list starting at ``head``, in order."""
    return [] if head is None else list(head)


def add_two_numbers(l1: ListNode | None, l2: ListNode | None) -> ListNode | None:
    """Sum of two numbers stored as lists of digits, least significant first."""
    dummy = ListNode()
    tail = dummy
    carry = 0
    while l1 is not None or l2 is not None or carry:
        total = carry
        if l1 is not None:
            total += l1.val
            l1 = l1.next
        if l2 is not None:
            total += l2.val
            l2 = l2.next
        carry, digit = divmod(total, 10)
        tail.next = ListNode(digit)
        tail = tail.next
    return dummy.next


def _merge_two(a: ListNode | None, b: ListNode | None) -> ListNode | None:
    dummy = ListNode()
    tail = dummy
    while a is not None and b is not None:
        if a.val < b.val:
            tail.next, a = a, a.next
        else:
            tail.next, b = b, b.next
        tail = tail.next
    tail.next = a if a is not None else b
    return dummy.next


def merge_k_lists(lists: Iterable[ListNode | None]) -> ListNode | None:
    """Merge sorted lists into one sorted list, pairing them off round by round."""
    heads = list(lists)
    if not heads:
        return None
    while len(heads) > 1:
        heads = [_merge_two(a, b) for a, b in zip_longest(heads[::2], heads[1::2])]
    return heads[0]


def remove_nth_from_end(head: ListNode | None, n: int) -> ListNode | None:
    """Unlink the ``n``-th node from the end and return the new head."""
    dummy = ListNode(0, head)
    right = head
    for _ in range(n):
        if right is None:
            raise ValueError(f"list is shorter than {n}")
        right = right.next
    if n < 1:
        raise ValueError("n must be at least 1")
    left = dummy
    while right is not None:
        left = left.next  # type: ignore[assignment]
        right = right.next
    left.next = left.next.next  # type: ignore[union-attr]
    return dummy.next


def reorder_list(head: ListNode | None) -> None:
    """Reorder in place to first, last, second, second-to-last, and so on."""
    if head is None:
        return
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[assignment]
        fast = fast.next.next
    second = slow.next
    slow.next = None
    prev: ListNode | None = None
    while second is not None:
        second.next, prev, second = prev, second, second.next
    first: ListNode | None = head
    second = prev
    while second is not None:
        after_first = first.next  # type: ignore[union-attr]
        after_second = second.next
        first.next = second  # type: ignore[union-attr]
        second.next = after_first
        first, second = after_first, after_second