"""Tests for wordtiles.core.review – first-wrong-attempt log."""

from __future__ import annotations

from wordtiles.core.review import ReviewEntry, ReviewLog


class TestReviewLog:
    def test_starts_empty(self):
        log = ReviewLog()
        assert len(log) == 0
        assert log.entries() == []

    def test_record_inserts(self):
        log = ReviewLog()
        assert log.record(0, "She her homework is doing in her room now.") is True
        assert log.entries() == [ReviewEntry(0, "She her homework is doing in her room now.")]

    def test_first_attempt_wins(self):
        log = ReviewLog()
        log.record(0, "first.")
        assert log.record(0, "second.") is False
        assert log.entries() == [ReviewEntry(0, "first.")]
        assert log.get(0).incorrect_sentence == "first."

    def test_order_is_recording_order(self):
        log = ReviewLog()
        log.record(4, "d.")
        log.record(1, "a.")
        log.record(4, "again.")
        log.record(2, "b.")
        assert [e.level_index for e in log.entries()] == [4, 1, 2]

    def test_contains_and_get(self):
        log = ReviewLog()
        log.record(3, "x.")
        assert 3 in log
        assert 0 not in log
        assert log.get(0) is None

    def test_entries_is_a_copy(self):
        log = ReviewLog()
        log.record(0, "x.")
        log.entries().clear()
        assert len(log) == 1
