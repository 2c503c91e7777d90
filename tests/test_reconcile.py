"""Tests for carrying annotations across rebuilt partitions."""

import logging

import pytest

from numband import (
    MalformedInterval,
    RetainedRecord,
    build_partition,
    load_records,
    parse_interval,
    reconcile,
    toggle_lower,
)


def annotated(numbers, *annotations):
    partition = build_partition(numbers)
    for band, annotation in zip(partition, annotations):
        band.annotation = annotation
    return partition


def texts(partition):
    return [str(interval) for interval in partition.intervals()]


def test_adding_a_number_retains_split_band():
    """A band split by a new number is retained with its annotation."""
    old = annotated([10], "a", "b")

    new, retained = reconcile(old, build_partition([10, 20]))

    assert new.annotations() == ["a", "", ""]
    assert retained == [
        RetainedRecord(interval=parse_interval("( 10 , Infinity )"), annotation="b")
    ]


def test_identical_rebuild_keeps_everything():
    """Rebuilding the same numbers keeps every annotation."""
    old = annotated([1, 2], "x", "y", "z")

    new, retained = reconcile(old, build_partition([2, 1]))

    assert new.annotations() == ["x", "y", "z"]
    assert retained == []


def test_matching_requires_both_values():
    """A band matches only when both bound values are equal."""
    old = annotated([10, 20], "low", "mid", "high")

    new, retained = reconcile(old, build_partition([10, 30]))

    assert new.annotations() == ["low", "", ""]
    assert [r.annotation for r in retained] == ["mid", "high"]


def test_empty_annotations_are_not_retained():
    """Unmatched bands without annotations are dropped."""
    old = annotated([10], "", "")

    _, retained = reconcile(old, build_partition([5]))

    assert retained == []


def test_old_partition_is_not_modified():
    """Reconciling leaves the old partition untouched."""
    old = annotated([10], "a", "b")
    toggle_lower(old, 1, True)
    before = old.copy()

    reconcile(old, build_partition([10]))

    assert old == before


def test_inclusivity_is_carried_over():
    """Matched bands take the old band's inclusivity."""
    old = annotated([10, 20], "a", "b", "c")
    toggle_lower(old, 1, True)

    new, _ = reconcile(old, build_partition([10, 20, 30]))

    assert texts(new) == [
        "( -Infinity , 10 )",
        "[ 10 , 20 ]",
        "( 20 , 30 ]",
        "( 30 , Infinity )",
    ]
    assert new.annotations() == ["a", "b", "", ""]
    new.validate()


def test_inclusivity_carried_without_annotation():
    """Inclusivity carries over even when there is no annotation."""
    old = build_partition([10, 20])
    toggle_lower(old, 1, True)

    new, retained = reconcile(old, build_partition([10, 20]))

    assert texts(new) == texts(old)
    assert retained == []


class TestHistory:
    def test_history_record_is_reclaimed(self):
        """A band that reappears takes back its retained annotation."""
        record = RetainedRecord(
            interval=parse_interval("( 10 , Infinity )"), annotation="b"
        )
        old = annotated([10, 20], "a", "", "")

        new, retained = reconcile(old, build_partition([10]), [record])

        assert new.annotations() == ["a", "b"]
        assert retained == []

    def test_history_applies_recorded_inclusivity(self):
        """A reclaimed record restores its recorded inclusivity."""
        record = RetainedRecord(
            interval=parse_interval("[ 10 , 20 ]"), annotation="mid"
        )
        old = build_partition([])

        new, retained = reconcile(old, build_partition([10, 20]), [record])

        assert texts(new) == [
            "( -Infinity , 10 )",
            "[ 10 , 20 ]",
            "( 20 , Infinity )",
        ]
        assert new.annotations() == ["", "mid", ""]
        assert retained == []
        new.validate()

    def test_old_bands_take_priority_over_history(self):
        """Current bands win over history records for the same values."""
        record = RetainedRecord(
            interval=parse_interval("( -Infinity , 10 ]"), annotation="stale"
        )
        old = annotated([10], "fresh", "")

        new, retained = reconcile(old, build_partition([10]), [record])

        assert new.annotations() == ["fresh", ""]
        assert retained == [record]

    def test_history_does_not_override_settled_boundary(self):
        """History never changes a boundary set by a matched old band."""
        # The old first band settled the boundary at 10; the record's
        # exclusive lower bound must not undo it
        old = annotated([10], "low", "")
        toggle_lower(old, 1, True)
        record = RetainedRecord(
            interval=parse_interval("( 10 , 20 ]"), annotation="mid"
        )

        new, _ = reconcile(old, build_partition([10, 20]), [record])

        assert str(new[0].interval) == "( -Infinity , 10 )"
        assert str(new[1].interval) == "[ 10 , 20 ]"
        assert new.annotations() == ["low", "mid", ""]
        new.validate()

    def test_unclaimed_history_comes_first(self):
        """Older unclaimed records come before newly retained ones."""
        record = RetainedRecord(interval=parse_interval("( 1 , 2 ]"), annotation="old")
        old = annotated([10], "", "gone")

        _, retained = reconcile(old, build_partition([]), [record])

        assert [r.annotation for r in retained] == ["old", "gone"]


class TestRecordText:
    def test_text_round_trip(self):
        """A record survives conversion to text and back."""
        record = RetainedRecord(
            interval=parse_interval("[ 10 , 20.5 )"), annotation="a => b"
        )

        assert record.to_text() == "[ 10 , 20.5 ) => a => b"
        assert RetainedRecord.from_text(record.to_text()) == record
        assert record.canonical == "[ 10 , 20.5 )"

    def test_empty_annotation(self):
        """An empty annotation parses as an empty string."""
        record = RetainedRecord.from_text("( 1 , 2 ] => ")
        assert record.annotation == ""

    @pytest.mark.parametrize("line", ["( 1 , 2 ]", "(1,2] => x", "[ 2 , 1 ] => x"])
    def test_bad_lines_raise(self, line):
        """Lines without a valid interval or separator are malformed."""
        with pytest.raises(MalformedInterval):
            RetainedRecord.from_text(line)

    def test_load_records_drops_malformed_lines(self, caplog):
        """load_records skips bad lines and logs a warning."""
        lines = ["( 1 , 2 ] => keep", "garbage", "[ 3 , 4 ) => also"]

        with caplog.at_level(logging.WARNING, logger="numband.reconcile"):
            records = load_records(lines)

        assert [r.annotation for r in records] == ["keep", "also"]
        assert "garbage" in caplog.text
