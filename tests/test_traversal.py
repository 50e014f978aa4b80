"""
Tests for advance, next_position, prev_position and distance.

Covers the traversal properties across all three tiers:
    - O(1) and looping advance agree on random-access sequences
    - distance(p, next_position(p, k)) == k
    - next/prev never mutate their input
    - prev on ForwardOnly is unsupported
    - advance(advance(p, k), -k) returns to p
"""

import pytest

from seqpos.config import Settings
from seqpos.containers import ArraySequence, ForwardList, LinkedSequence
from seqpos.errors import OutOfRange, Unreachable, UnsupportedOperation
from seqpos.traversal import (
    advance,
    advance_stepwise,
    distance,
    next_position,
    prev_position,
)

ALL_CONTAINERS = [ArraySequence, LinkedSequence, ForwardList]
BIDIRECTIONAL_CONTAINERS = [ArraySequence, LinkedSequence]


class TestAdvance:
    """Test in-place advance."""

    @pytest.mark.parametrize("container", ALL_CONTAINERS)
    def test_forward(self, container):
        seq = container([10, 20, 30, 40])
        pos = seq.begin()
        result = advance(pos, 3)
        assert result is pos
        assert pos.deref() == 40

    @pytest.mark.parametrize("container", ALL_CONTAINERS)
    def test_default_step_is_one(self, container):
        seq = container([10, 20])
        pos = seq.begin()
        advance(pos)
        assert pos.deref() == 20

    @pytest.mark.parametrize("container", ALL_CONTAINERS)
    def test_zero_is_noop(self, container):
        seq = container([10, 20])
        pos = seq.begin()
        advance(pos, 0)
        assert pos == seq.begin()

    @pytest.mark.parametrize("container", ALL_CONTAINERS)
    def test_to_end_sentinel(self, container):
        seq = container([1, 2, 3])
        pos = advance(seq.begin(), 3)
        assert pos == seq.end()
        assert pos.is_end

    @pytest.mark.parametrize("container", ALL_CONTAINERS)
    def test_past_end(self, container):
        seq = container([1, 2, 3])
        with pytest.raises(OutOfRange):
            advance(seq.begin(), 4)

    @pytest.mark.parametrize("container", BIDIRECTIONAL_CONTAINERS)
    def test_backward(self, container):
        seq = container([10, 20, 30])
        pos = advance(seq.end(), -2)
        assert pos.deref() == 20

    @pytest.mark.parametrize("container", BIDIRECTIONAL_CONTAINERS)
    def test_before_begin(self, container):
        seq = container([10, 20, 30])
        with pytest.raises(OutOfRange):
            advance(seq.begin(), -1)

    def test_forward_only_cannot_go_back(self):
        fl = ForwardList([1, 2, 3])
        pos = advance(fl.begin(), 2)
        with pytest.raises(UnsupportedOperation):
            advance(pos, -1)
        assert pos.deref() == 3

    def test_random_access_failure_does_not_move(self):
        seq = ArraySequence([1, 2, 3])
        pos = seq.position_at(1)
        with pytest.raises(OutOfRange):
            advance(pos, 5)
        assert pos.index == 1

    def test_not_a_position(self):
        with pytest.raises(UnsupportedOperation):
            advance([1, 2, 3], 1)


class TestAdvanceStepwise:
    """The loop form agrees with the O(1) form on random-access sequences."""

    @pytest.mark.parametrize("n", [-3, -1, 0, 1, 2, 5])
    def test_matches_constant_time_form(self, n):
        seq = ArraySequence(range(8))
        fast = seq.position_at(3)
        slow = seq.position_at(3)
        advance(fast, n)
        advance_stepwise(slow, n)
        assert fast == slow

    @pytest.mark.parametrize("n", [-4, 6])
    def test_both_forms_reject_out_of_range(self, n):
        seq = ArraySequence(range(8))
        with pytest.raises(OutOfRange):
            advance(seq.position_at(3), n)
        with pytest.raises(OutOfRange):
            advance_stepwise(seq.position_at(3), n)

    def test_forward_only_rejects_negative(self):
        fl = ForwardList([1])
        with pytest.raises(UnsupportedOperation):
            advance_stepwise(fl.end(), -1)


class TestNextPrev:
    """next_position / prev_position return moved copies."""

    @pytest.mark.parametrize("container", ALL_CONTAINERS)
    def test_next_does_not_mutate(self, container):
        seq = container([1, 2, 3, 4])
        pos = seq.begin()
        moved = next_position(pos, 2)
        assert moved.deref() == 3
        assert pos.deref() == 1
        assert pos == seq.begin()

    @pytest.mark.parametrize("container", BIDIRECTIONAL_CONTAINERS)
    def test_prev_does_not_mutate(self, container):
        seq = container([1, 2, 3, 4])
        pos = seq.end()
        moved = prev_position(pos, 3)
        assert moved.deref() == 2
        assert pos == seq.end()

    @pytest.mark.parametrize("container", BIDIRECTIONAL_CONTAINERS)
    def test_prev_default_step(self, container):
        seq = container([1, 2])
        assert prev_position(seq.end()).deref() == 2

    @pytest.mark.parametrize("k", [0, 1, 2, 5])
    def test_prev_on_forward_only(self, k):
        """Forward-only positions have no predecessor, whatever k is."""
        fl = ForwardList([1, 2, 3])
        with pytest.raises(UnsupportedOperation):
            prev_position(fl.end(), k)

    def test_next_past_end(self):
        seq = LinkedSequence([1])
        with pytest.raises(OutOfRange):
            next_position(seq.begin(), 2)


class TestRoundTrip:
    """advance(advance(p, k), -k) denotes the original element."""

    @pytest.mark.parametrize("container", BIDIRECTIONAL_CONTAINERS)
    @pytest.mark.parametrize("start,k", [(0, 0), (0, 4), (1, 2), (2, 3), (5, -5), (3, -1)])
    def test_round_trip(self, container, start, k):
        seq = container("abcde")
        original = next_position(seq.begin(), start)
        pos = original.copy()
        advance(advance(pos, k), -k)
        assert pos == original


class TestDistance:
    """Test counting steps between positions."""

    @pytest.mark.parametrize("container", ALL_CONTAINERS)
    def test_begin_to_end(self, container):
        seq = container([1, 2, 3, 4, 5])
        assert distance(seq.begin(), seq.end()) == 5

    @pytest.mark.parametrize("container", ALL_CONTAINERS)
    def test_empty(self, container):
        seq = container()
        assert distance(seq.begin(), seq.end()) == 0

    @pytest.mark.parametrize("container", ALL_CONTAINERS)
    def test_distance_to_next(self, container):
        """distance(p, next_position(p, k)) == k for every reachable k."""
        seq = container(range(6))
        p = next_position(seq.begin(), 2)
        for k in range(0, 5):
            assert distance(p, next_position(p, k)) == k

    def test_random_access_is_signed(self):
        seq = ArraySequence([1, 2, 3, 4, 5])
        assert distance(seq.end(), seq.begin()) == -5

    @pytest.mark.parametrize("container", [LinkedSequence, ForwardList])
    def test_unreachable_backward(self, container):
        """A scan that reaches the end sentinel raises instead of looping."""
        seq = container([1, 2, 3, 4, 5])
        with pytest.raises(Unreachable):
            distance(next_position(seq.begin(), 3), seq.begin())

    @pytest.mark.parametrize("container", ALL_CONTAINERS)
    def test_unreachable_other_sequence(self, container):
        a = container([1, 2])
        b = container([1, 2])
        with pytest.raises(Unreachable):
            distance(a.begin(), b.end())

    def test_scan_limit_argument(self):
        seq = ForwardList([1, 2, 3, 4, 5])
        assert distance(seq.begin(), seq.end(), limit=5) == 5
        with pytest.raises(Unreachable):
            distance(seq.begin(), seq.end(), limit=2)

    def test_scan_limit_from_settings(self):
        seq = LinkedSequence([1, 2, 3, 4, 5])
        settings = Settings(distance_scan_limit=3)
        with pytest.raises(Unreachable):
            distance(seq.begin(), seq.end(), settings=settings)
        assert distance(seq.begin(), next_position(seq.begin(), 3), settings=settings) == 3
        assert distance(seq.begin(), seq.end(), limit=10, settings=settings) == 5

    def test_settings_apply_only_to_their_call(self):
        """A bounded call leaves later unbounded calls alone."""
        seq = ForwardList(range(5))
        with pytest.raises(Unreachable):
            distance(seq.begin(), seq.end(), settings=Settings(distance_scan_limit=1))
        assert distance(seq.begin(), seq.end()) == 5

    def test_random_access_ignores_limit(self):
        seq = ArraySequence(range(100))
        assert distance(seq.begin(), seq.end(), limit=1) == 100

    def test_not_a_position(self):
        with pytest.raises(UnsupportedOperation):
            distance(0, 5)
