from collections import Counter

import pytest

from dsakit.frequency import analyze_frequencies

SAMPLE = [4, 3, 1, 3, 4, 4, 2]


def test_source_example():
    report = analyze_frequencies(SAMPLE)
    assert report.max_count == 3
    assert report.most_frequent == [4]
    assert report.min_count == 1
    assert report.least_frequent == [1, 2]


def test_counts_match_counter():
    report = analyze_frequencies(SAMPLE)
    assert report.counts == dict(Counter(SAMPLE))
    assert sum(report.counts.values()) == len(SAMPLE)


def test_all_equal_counts():
    items = ["a", "b", "c"]
    report = analyze_frequencies(items)
    assert report.most_frequent == items
    assert report.least_frequent == items
    assert report.max_count == report.min_count


def test_accepts_generator():
    report = analyze_frequencies(x % 3 for x in range(9))
    assert report.counts == {0: 3, 1: 3, 2: 3}


def test_empty_raises():
    with pytest.raises(ValueError):
        analyze_frequencies([])


def test_str_report():
    text = str(analyze_frequencies(SAMPLE))
    assert text.splitlines()[0] == "Element - Frequency"
    assert "Highest Frequency Element(s) (Count: 3): 4" in text
    assert "Lowest Frequency Element(s) (Count: 1): 1 2" in text