"""
Unit tests for target time calibration.

Tests:
- Upper median selection
- Quorum: every working-set question needs a first success
- First (not latest) success is used
- Tightening only ever lowers the target
"""

import pytest

from drill.core.calibration import (
    first_success_times,
    maybe_establish_target_time,
    tighten_target_time,
    upper_median,
)


class TestUpperMedian:
    def test_odd_count(self):
        assert upper_median([4.0, 2.0, 3.0]) == 3.0

    def test_even_count_takes_upper_middle(self):
        assert upper_median([1.0, 4.0, 2.0, 3.0]) == 3.0

    def test_single_value(self):
        assert upper_median([7.5]) == 7.5

    def test_empty_raises(self):
        with pytest.raises(ValueError):
            upper_median([])


class TestEstablish:
    def test_full_quorum_sets_upper_median(self, state_factory):
        state = state_factory(5, {0, 1, 2}, [(0, 2.0), (1, 3.0), (2, 4.0)])

        assert maybe_establish_target_time(state) == 3.0
        assert state.target_time == 3.0
        assert state.log[-1] == "Establish target time to median: 3.0"

    def test_incomplete_quorum_leaves_target_unset(self, state_factory):
        state = state_factory(5, {0, 1, 2}, [(0, 2.0), (1, None), (2, 4.0)])

        assert maybe_establish_target_time(state) is None
        assert state.target_time is None
        assert state.log[-1] == "Couldn't establish target time for current set results: 2.0 4.0"

    def test_uses_first_success_not_latest(self, state_factory):
        state = state_factory(
            5, {0, 1, 2}, [(0, None), (0, 9.0), (1, 1.0), (2, 1.0), (0, 0.5)]
        )

        assert sorted(first_success_times(state)) == [1.0, 1.0, 9.0]
        assert maybe_establish_target_time(state) == 1.0

    def test_dormant_successes_are_ignored(self, state_factory):
        state = state_factory(5, {0, 1}, [(3, 0.1), (4, 0.1), (0, 2.0)])

        assert maybe_establish_target_time(state) is None

    def test_existing_target_is_kept(self, state_factory):
        state = state_factory(5, {0}, [(0, 1.0)], target_time=4.0)

        assert maybe_establish_target_time(state) == 4.0
        assert state.log == []


class TestTighten:
    def test_lowers_target(self, state_factory):
        state = state_factory(3, {0}, target_time=6.0)

        assert tighten_target_time(state, 5.0) is True
        assert state.target_time == 5.0
        assert state.log[-1] == "Reducing target time 6.0 -> 5.0"

    def test_never_raises_target(self, state_factory):
        state = state_factory(3, {0}, target_time=3.0)

        assert tighten_target_time(state, 5.0) is False
        assert tighten_target_time(state, 3.0) is False
        assert state.target_time == 3.0

    def test_unset_target_stays_unset(self, state_factory):
        state = state_factory(3, {0})

        assert tighten_target_time(state, 1.0) is False
        assert state.target_time is None
