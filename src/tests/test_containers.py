"""
===============================================================================
LISTBENCH - Sequence Container Test Suite
===============================================================================
Behavioural tests shared by every SequenceContainer variant (append, get,
insert, remove, clear, bounds checking), plus variant-specific checks for
ArraySequence buffer growth and LinkedSequence link integrity.
===============================================================================
"""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import numpy as np
import pytest

from listbench.containers import (
    ArraySequence, LinkedSequence, SequenceContainer, DEFAULT_VARIANTS,
)


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture(params=[ArraySequence, LinkedSequence], ids=["array", "linked"])
def container(request):
    """A fresh, empty instance of each variant."""
    return request.param()


def filled(container, n):
    for i in range(n):
        container.append(i)
    return container


# =============================================================================
# Shared behaviour
# =============================================================================

class TestSequenceBehaviour:
    """Both variants must behave like the same abstract sequence."""

    def test_new_container_is_empty(self, container):
        assert container.size() == 0
        assert container.is_empty()
        assert len(container) == 0
        assert not container
        assert container.to_list() == []

    def test_append_preserves_order(self, container):
        filled(container, 100)
        assert container.size() == 100
        assert container.to_list() == list(range(100))

    def test_get_by_index(self, container):
        filled(container, 10)
        assert container.get(0) == 0
        assert container.get(4) == 4
        assert container.get(9) == 9

    def test_insert_at_front_reverses_order(self, container):
        for i in range(50):
            container.insert(0, i)
        assert container.to_list() == list(range(49, -1, -1))

    def test_insert_at_size_appends(self, container):
        filled(container, 3)
        container.insert(3, 99)
        assert container.to_list() == [0, 1, 2, 99]

    def test_insert_in_middle(self, container):
        filled(container, 4)
        container.insert(2, 99)
        assert container.to_list() == [0, 1, 99, 2, 3]

    def test_insert_into_empty(self, container):
        container.insert(0, 7)
        assert container.to_list() == [7]

    def test_remove_returns_value(self, container):
        filled(container, 5)
        assert container.remove(0) == 0
        assert container.remove(3) == 4
        assert container.remove(1) == 2
        assert container.to_list() == [1, 3]

    def test_remove_last_element_empties(self, container):
        container.append(42)
        assert container.remove(0) == 42
        assert container.is_empty()
        container.append(1)
        assert container.to_list() == [1]

    def test_clear(self, container):
        filled(container, 20)
        container.clear()
        assert container.is_empty()
        container.append(5)
        assert container.to_list() == [5]

    def test_mixed_operations_match_builtin_list(self, container):
        """Random interleaving of operations tracks a plain list exactly."""
        rng = np.random.default_rng(42)
        reference = []
        for step in range(500):
            op = rng.integers(0, 3)
            if op == 0 or not reference:
                container.append(step)
                reference.append(step)
            elif op == 1:
                idx = int(rng.integers(0, len(reference) + 1))
                container.insert(idx, step)
                reference.insert(idx, step)
            else:
                idx = int(rng.integers(0, len(reference)))
                assert container.remove(idx) == reference.pop(idx)
        assert container.to_list() == reference
        assert container.size() == len(reference)


# =============================================================================
# Bounds checking
# =============================================================================

class TestIndexErrors:
    """Out-of-range positions raise IndexError like built-in sequences."""

    def test_get_on_empty(self, container):
        with pytest.raises(IndexError):
            container.get(0)

    def test_get_past_end(self, container):
        filled(container, 3)
        with pytest.raises(IndexError):
            container.get(3)

    def test_negative_index_rejected(self, container):
        filled(container, 3)
        with pytest.raises(IndexError):
            container.get(-1)
        with pytest.raises(IndexError):
            container.remove(-1)

    def test_insert_beyond_size(self, container):
        filled(container, 2)
        with pytest.raises(IndexError):
            container.insert(3, 0)

    def test_remove_on_empty(self, container):
        with pytest.raises(IndexError):
            container.remove(0)


# =============================================================================
# Variant-specific
# =============================================================================

class TestArraySequence:

    def test_grows_by_doubling(self):
        seq = ArraySequence(initial_capacity=4)
        filled(seq, 5)
        assert seq.capacity == 8
        filled(seq, 4)
        assert seq.capacity == 16
        assert seq.memory_usage() == 16 * 8

    def test_clear_resets_capacity(self):
        seq = ArraySequence(initial_capacity=2)
        filled(seq, 100)
        seq.clear()
        assert seq.capacity == 2

    def test_rejects_non_integers(self):
        seq = ArraySequence()
        with pytest.raises(TypeError):
            seq.append(1.5)
        with pytest.raises(TypeError):
            seq.insert(0, "3")

    def test_accepts_numpy_integers(self):
        seq = ArraySequence()
        seq.append(np.int64(7))
        assert seq.get(0) == 7
        assert type(seq.get(0)) is int

    def test_invalid_capacity(self):
        with pytest.raises(ValueError):
            ArraySequence(initial_capacity=0)


class TestLinkedSequence:

    def test_links_consistent_after_edits(self):
        seq = filled(LinkedSequence(), 10)
        seq.remove(0)
        seq.remove(seq.size() - 1)
        seq.insert(4, 100)

        forward = []
        node = seq._head
        while node is not None:
            forward.append(node.value)
            node = node.next

        backward = []
        node = seq._tail
        while node is not None:
            backward.append(node.value)
            node = node.prev

        assert forward == [1, 2, 3, 4, 100, 5, 6, 7, 8]
        assert backward == forward[::-1]

    def test_access_from_tail_half(self):
        seq = filled(LinkedSequence(), 9)
        assert seq.get(8) == 8
        assert seq.get(5) == 5

    def test_stores_any_value(self):
        seq = LinkedSequence()
        seq.append(2 ** 80)
        assert seq.get(0) == 2 ** 80


class TestVariants:

    def test_default_variants_share_interface(self):
        assert len(DEFAULT_VARIANTS) == 2
        for variant in DEFAULT_VARIANTS:
            assert issubclass(variant, SequenceContainer)
            assert variant.label != SequenceContainer.label

    def test_interface_is_abstract(self):
        with pytest.raises(TypeError):
            SequenceContainer()
