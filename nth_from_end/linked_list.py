from p2pd import log_exception
from .defs import *

class Node:
    __slots__ = ("value", "next")

    def __init__(self, value, next=None):
        self.value = value
        self.next = next

    def __repr__(self):
        return f"Node({self.value!r})"

def iter_nodes(head):
    cur = head
    while cur is not None:
        yield cur
        cur = cur.next

def iter_values(head):
    for node in iter_nodes(head):
        yield node.value

def count_nodes(head):
    count = 0
    for _ in iter_nodes(head):
        count += 1

    return count

def has_cycle(head):
    """Floyd's check: a fast pointer only meets a slow one inside a loop."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True

    return False

class LinkedList:
    """
    Owner view over a chain of nodes made elsewhere.

    Nothing is allocated here. The view only tracks the current head
    and length so removals done through it keep both in step.
    The chain must be acyclic: counting it on entry would never end.
    """
    def __init__(self, head=None):
        self.head = head
        self.count = count_nodes(head)

    def popleft(self):
        """Pop from the front. Raises IndexError if empty."""
        if self.head is None:
            raise IndexError("popleft from empty list")

        node = self.head
        self.head = node.next
        self.count -= 1
        return node

    def remove_nth_from_end(self, n, settings=None):
        """Unlink the n-th node from the end and return it."""
        from .remove_nth import unlink_nth_from_end
        try:
            head, removed = unlink_nth_from_end(self.head, n, settings)
        except Exception:
            log_exception()
            raise

        self.head = head
        self.count -= 1
        return removed

    def __iter__(self):
        return iter_values(self.head)

    def __bool__(self):
        return self.head is not None

    def __len__(self):
        return self.count
