import pytest

from govlens.core.frequency import count_frequency
from govlens.core.models import EntityCount


def test_dedup_and_ranking() -> None:
    mentions = ["Ministry of Finance", "Ministry of Finance", "Ministry of Defence"]

    assert count_frequency(mentions, 5) == [
        EntityCount(name="Ministry of Finance", count=2),
        EntityCount(name="Ministry of Defence", count=1),
    ]


def test_ties_keep_first_seen_order() -> None:
    items = ["gamma", "alpha", "beta", "alpha", "gamma", "delta"]

    ranked = count_frequency(items, 2)

    assert [e.name for e in ranked] == ["gamma", "alpha", "beta", "delta"]
    assert [e.count for e in ranked] == [2, 2, 1, 1]


def test_items_are_trimmed_before_counting() -> None:
    ranked = count_frequency(["  Department of Posts ", "Department of Posts\n"], 5)

    assert ranked == [EntityCount(name="Department of Posts", count=2)]


def test_case_and_internal_spacing_stay_distinct() -> None:
    ranked = count_frequency(["Ministry of Finance", "Ministry  of Finance", "ministry of finance"], 5)

    assert len(ranked) == 3


@pytest.mark.parametrize("min_length", [0, 2, 5, 8])
def test_noise_filter_drops_short_items(min_length: int) -> None:
    items = ["a", "ab", "abcde", "abcdef", "abcdefghi", "   abc   "]

    ranked = count_frequency(items, min_length)

    assert all(len(entry.name) > min_length for entry in ranked)
    assert {entry.name for entry in ranked} == {
        item.strip() for item in items if len(item.strip()) > min_length
    }


def test_empty_input() -> None:
    assert count_frequency([], 5) == []
