"""
Unit tests for InnovationTracker and ConnectionInnovation classes.
"""

from layerneat.genotype.innovation_tracker import ConnectionInnovation, InnovationTracker


class TestConnectionInnovation:

    def test_equality_ignores_innovation_number(self):
        assert ConnectionInnovation(1, 2, 5) == ConnectionInnovation(1, 2, 9)

    def test_direction_matters(self):
        assert ConnectionInnovation(1, 2, 5) != ConnectionInnovation(2, 1, 5)

    def test_hash_consistent_with_equality(self):
        innovations = {ConnectionInnovation(1, 2, 5), ConnectionInnovation(1, 2, 6)}
        assert len(innovations) == 1

    def test_not_equal_to_other_types(self):
        assert ConnectionInnovation(1, 2, 5) != (1, 2)


class TestInnovationTrackerNumbers:

    def test_numbers_start_at_one(self, tracker):
        assert tracker.get_innovation_number(1, 3) == 1

    def test_numbers_are_sequential(self, tracker):
        assert [tracker.get_innovation_number(s, t) for s, t in [(1, 3), (2, 3), (1, 4)]] == [1, 2, 3]

    def test_same_connection_gets_same_number(self, tracker):
        first = tracker.get_innovation_number(1, 3)
        tracker.get_innovation_number(2, 3)
        assert tracker.get_innovation_number(1, 3) == first
        assert len(tracker) == 2

    def test_reverse_connection_is_a_new_innovation(self, tracker):
        assert tracker.get_innovation_number(1, 3) != tracker.get_innovation_number(3, 1)


class TestInnovationTrackerLookup:

    def test_find_missing_returns_none(self, tracker):
        assert tracker.find(1, 3) is None
        assert len(tracker) == 0

    def test_find_existing(self, tracker):
        tracker.get_innovation_number(1, 3)
        innovation = tracker.find(1, 3)
        assert innovation.source == 1
        assert innovation.target == 3
        assert innovation.innovation_number == 1

    def test_contains(self, tracker):
        tracker.get_innovation_number(1, 3)
        assert ConnectionInnovation(1, 3, 99) in tracker
        assert ConnectionInnovation(3, 1, 1) not in tracker

    def test_iteration_in_creation_order(self, tracker):
        tracker.get_innovation_number(2, 3)
        tracker.get_innovation_number(1, 3)
        assert [i.innovation_number for i in tracker] == [1, 2]
        assert [(i.source, i.target) for i in tracker] == [(2, 3), (1, 3)]
