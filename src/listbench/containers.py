"""
Sequence containers compared by the benchmark harness.

Both variants store integers and expose the same positional capability set
(clear, append, get, insert, remove, size) through :class:`SequenceContainer`,
so the runner never needs to know which one it is driving.

Structures
----------
SequenceContainer -- Abstract interface shared by every benchmarked variant.
ArraySequence     -- Growable sequence backed by a contiguous NumPy buffer.
LinkedSequence    -- Doubly-linked list of heap-allocated nodes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from numbers import Integral
from typing import Iterator, List, Optional

import numpy as np


# ---------------------------------------------------------------------------
# 0. SequenceContainer
# ---------------------------------------------------------------------------

class SequenceContainer(ABC):
    """Abstract positional sequence of integers.

    Subclasses must implement ``clear``, ``append``, ``get``, ``insert``,
    ``remove``, ``size`` and ``__iter__``.  Indices are zero-based and
    non-negative; ``insert`` additionally accepts ``index == size``.
    """

    label: str = "base"

    @abstractmethod
    def clear(self) -> None:
        """Discard every element."""

    @abstractmethod
    def append(self, value: int) -> None:
        """Add *value* after the last element."""

    @abstractmethod
    def get(self, index: int) -> int:
        """Return the element at *index*.

        Raises
        ------
        IndexError
            If ``index`` is not in ``[0, size)``.
        """

    @abstractmethod
    def insert(self, index: int, value: int) -> None:
        """Insert *value* so that it ends up at *index*.

        Raises
        ------
        IndexError
            If ``index`` is not in ``[0, size]``.
        """

    @abstractmethod
    def remove(self, index: int) -> int:
        """Remove and return the element at *index*.

        Raises
        ------
        IndexError
            If ``index`` is not in ``[0, size)``.
        """

    @abstractmethod
    def size(self) -> int:
        """Return the number of stored elements."""

    @abstractmethod
    def __iter__(self) -> Iterator[int]:
        ...

    # -- shared helpers ----------------------------------------------------

    def is_empty(self) -> bool:
        return self.size() == 0

    def to_list(self) -> List[int]:
        """Return the contents as a plain Python list, front to back."""
        return list(iter(self))

    def _check_index(self, index: int, upper: int) -> None:
        if not 0 <= index < upper:
            raise IndexError(
                f"{type(self).__name__} index {index} out of range for size {self.size()}"
            )

    def __len__(self) -> int:
        return self.size()

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self.size()})"


# ---------------------------------------------------------------------------
# 1. ArraySequence
# ---------------------------------------------------------------------------

class ArraySequence(SequenceContainer):
    """Growable integer sequence stored in one contiguous NumPy buffer.

    Memory layout
    -------------
    A single ``int64[capacity]`` array holds the elements in slots
    ``[0, size)``.  When an append or insert finds the buffer full, a new
    buffer of twice the capacity is allocated and the live prefix copied
    over, so appends are amortised O(1).  Positional insert and remove shift
    the tail by one slot with a single slice assignment; NumPy detects the
    overlap and copies through a temporary.

    Time complexity
    ---------------
    +-----------------+----------------+
    | Operation       | Cost           |
    +=================+================+
    | append          | O(1) amortised |
    | get             | O(1)           |
    | insert(i)       | O(size - i)    |
    | remove(i)       | O(size - i)    |
    | clear           | O(1)           |
    +-----------------+----------------+

    Parameters
    ----------
    initial_capacity : int
        Number of slots allocated up front.
    """

    label = "ArraySequence"

    def __init__(self, initial_capacity: int = 16) -> None:
        if initial_capacity <= 0:
            raise ValueError(f"initial_capacity must be positive, got {initial_capacity}")

        self._initial_capacity: int = initial_capacity
        self._data: np.ndarray = np.empty(initial_capacity, dtype=np.int64)
        self._size: int = 0

    # -- write -------------------------------------------------------------

    def clear(self) -> None:
        """Forget every element.  The buffer shrinks back to its initial size."""
        self._data = np.empty(self._initial_capacity, dtype=np.int64)
        self._size = 0

    def append(self, value: int) -> None:
        self._ensure_capacity(self._size + 1)
        self._data[self._size] = _as_int(value)
        self._size += 1

    def insert(self, index: int, value: int) -> None:
        """Insert *value* at *index*, shifting ``[index, size)`` right by one.

        Complexity
        ----------
        O(size - index) -- one slice copy of the tail.
        """
        self._check_index(index, self._size + 1)
        value = _as_int(value)
        self._ensure_capacity(self._size + 1)
        if index < self._size:
            self._data[index + 1:self._size + 1] = self._data[index:self._size]
        self._data[index] = value
        self._size += 1

    def remove(self, index: int) -> int:
        """Remove the element at *index*, shifting the tail left by one."""
        self._check_index(index, self._size)
        value = int(self._data[index])
        if index < self._size - 1:
            self._data[index:self._size - 1] = self._data[index + 1:self._size]
        self._size -= 1
        return value

    # -- read --------------------------------------------------------------

    def get(self, index: int) -> int:
        self._check_index(index, self._size)
        return int(self._data[index])

    def size(self) -> int:
        return self._size

    @property
    def capacity(self) -> int:
        """Number of slots currently allocated."""
        return int(self._data.shape[0])

    def memory_usage(self) -> int:
        """Return the size of the backing buffer in bytes."""
        return int(self._data.nbytes)

    # -- internals ---------------------------------------------------------

    def _ensure_capacity(self, required: int) -> None:
        capacity = self._data.shape[0]
        if required <= capacity:
            return
        while capacity < required:
            capacity *= 2
        grown = np.empty(capacity, dtype=np.int64)
        grown[:self._size] = self._data[:self._size]
        self._data = grown

    def __iter__(self) -> Iterator[int]:
        for value in self._data[:self._size].tolist():
            yield value

    def __repr__(self) -> str:
        usage_kb = self.memory_usage() / 1024
        return (
            f"ArraySequence(size={self._size}, capacity={self.capacity}, "
            f"mem={usage_kb:.1f} KiB)"
        )


# ---------------------------------------------------------------------------
# 2. LinkedSequence
# ---------------------------------------------------------------------------

class _Node:
    """Internal node of a :class:`LinkedSequence`."""

    __slots__ = ("value", "prev", "next")

    def __init__(
        self,
        value: int,
        prev: Optional[_Node] = None,
        next: Optional[_Node] = None,
    ) -> None:
        self.value = value
        self.prev = prev
        self.next = next


class LinkedSequence(SequenceContainer):
    """Doubly-linked list of integers.

    Each element lives in its own :class:`_Node`.  The list keeps references
    to both ends, so work at either end is O(1); reaching an interior index
    walks from whichever end is closer, which makes the middle the most
    expensive position.

    Time complexity
    ---------------
    +-----------------+----------------------------+
    | Operation       | Cost                       |
    +=================+============================+
    | append          | O(1)                       |
    | get(i)          | O(min(i, size - i))        |
    | insert(i)       | O(min(i, size - i))        |
    | remove(i)       | O(min(i, size - i))        |
    | clear           | O(1)                       |
    +-----------------+----------------------------+
    """

    label = "LinkedSequence"

    def __init__(self) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size: int = 0

    # -- write -------------------------------------------------------------

    def clear(self) -> None:
        self._head = None
        self._tail = None
        self._size = 0

    def append(self, value: int) -> None:
        node = _Node(value, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def insert(self, index: int, value: int) -> None:
        """Link a new node in front of the node currently at *index*.

        ``index == size`` appends.
        """
        self._check_index(index, self._size + 1)
        if index == self._size:
            self.append(value)
            return

        successor = self._node_at(index)
        node = _Node(value, prev=successor.prev, next=successor)
        if successor.prev is None:
            self._head = node
        else:
            successor.prev.next = node
        successor.prev = node
        self._size += 1

    def remove(self, index: int) -> int:
        self._check_index(index, self._size)
        node = self._node_at(index)

        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev

        self._size -= 1
        return node.value

    # -- read --------------------------------------------------------------

    def get(self, index: int) -> int:
        self._check_index(index, self._size)
        return self._node_at(index).value

    def size(self) -> int:
        return self._size

    # -- internals ---------------------------------------------------------

    def _node_at(self, index: int) -> _Node:
        """Return the node at a valid *index*, walking from the nearer end."""
        if index < self._size // 2:
            node = self._head
            for _ in range(index):
                node = node.next
        else:
            node = self._tail
            for _ in range(self._size - 1 - index):
                node = node.prev
        return node

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next


def _as_int(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise TypeError(f"ArraySequence stores integers, got {type(value).__name__}")
    return int(value)


#: Variants benchmarked by default, in report column order.
DEFAULT_VARIANTS = (ArraySequence, LinkedSequence)
