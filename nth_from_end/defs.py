# Value carried by the temporary node placed before the real head.
SENTINEL_VALUE = None

# Smallest valid distance from the end (the last node is 1).
MIN_N = 1

class NthFromEndError(IndexError):
    """Raised when n is outside 1..len(list) or the list is empty."""
    pass

class CyclicListError(ValueError):
    """Raised when a cycle is found or the max_steps limit is exceeded,
    which may also mean the list is simply longer than the limit."""
    pass
