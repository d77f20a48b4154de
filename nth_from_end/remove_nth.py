"""
Remove the n-th node from the end of a singly linked list in one pass.

A sentinel sits in front of the head so removing the head needs no
special case. fast is moved n + 1 links ahead of slow, then both walk
together until fast falls off the end. slow is then the predecessor of
the node to drop.

     n = 2
     sentinel -> 1 -> 2 -> 3 -> 4 -> 5 -> None
     slow                  fast                     after 3 steps
                           slow           fast      after walking together
     3.next = 5
"""

from .defs import *
from .schema_defs import *
from .linked_list import Node, has_cycle

def _count_step(walked, max_steps):
    walked += 1
    if max_steps is not None and walked > max_steps:
        raise CyclicListError(f"step limit exceeded: walked past max_steps = {max_steps}")

    return walked

def unlink_nth_from_end(head, n, settings=None):
    """
    Returns (new_head, removed_node).

    All checks happen before any link is changed so a failed call
    leaves the chain as it was.
    """
    settings = load_settings(settings)
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"n must be an int, got {type(n).__name__}")
    if n < MIN_N:
        raise NthFromEndError(f"n must be >= {MIN_N}, got {n}")
    if head is None:
        raise NthFromEndError("cannot remove from an empty list")
    if settings.detect_cycles and has_cycle(head):
        raise CyclicListError("list contains a cycle")

    sentinel = Node(SENTINEL_VALUE, head)
    fast = slow = sentinel
    walked = 0

    # Open a gap of n + 1 links.
    for _ in range(n + 1):
        # Ran off before the gap was open so the list is shorter than n.
        if fast is None:
            raise NthFromEndError(f"n = {n} exceeds list length {walked}")

        fast = fast.next
        if fast is not None:
            walked = _count_step(walked, settings.max_steps)

    while fast is not None:
        fast = fast.next
        slow = slow.next
        if fast is not None:
            walked = _count_step(walked, settings.max_steps)

    # The removed node keeps its own next.
    removed = slow.next
    slow.next = removed.next
    return sentinel.next, removed

def remove_nth_from_end(head, n, settings=None):
    """Remove the n-th node from the end (last node is 1) and return the new head."""
    new_head, _ = unlink_nth_from_end(head, n, settings)
    return new_head
