"""Fuzzy subsequence scoring tests."""

from __future__ import annotations

from search.scoring import fuzzy_score, is_case_sensitive


def test_non_subsequence_does_not_match() -> None:
    assert fuzzy_score("Terminal", "fire") is None
    assert fuzzy_score("ab", "abc") is None
    assert fuzzy_score("Firefox", "xof") is None


def test_empty_pattern_scores_zero() -> None:
    assert fuzzy_score("Firefox", "") == 0


def test_lowercase_pattern_ignores_case() -> None:
    assert fuzzy_score("Firefox", "fire") is not None
    assert fuzzy_score("FIREFOX", "fire") is not None


def test_mixed_case_pattern_is_case_sensitive() -> None:
    assert is_case_sensitive("Fire")
    assert not is_case_sensitive("fire")
    assert fuzzy_score("Firefox", "Fire") is not None
    assert fuzzy_score("firefox", "Fire") is None


def test_contiguous_match_beats_scattered_match() -> None:
    contiguous = fuzzy_score("Firefox", "fire")
    scattered = fuzzy_score("File Inspector Remote Engine", "fire")

    assert contiguous is not None and scattered is not None
    assert contiguous > scattered


def test_longer_gap_scores_lower() -> None:
    short_gap = fuzzy_score("xaxb", "ab")
    long_gap = fuzzy_score("xaxxxxxb", "ab")

    assert short_gap is not None and long_gap is not None
    assert short_gap > long_gap


def test_word_boundary_bonus() -> None:
    boundary = fuzzy_score("open code", "c")
    inner = fuzzy_score("opencode", "c")

    assert boundary is not None and inner is not None
    assert boundary > inner


def test_prefix_match_score_value() -> None:
    # first char on a boundary earns a doubled bonus, the run keeps it
    assert fuzzy_score("Firefox", "fire") == 4 * 16 + 2 * 8 + 3 * 8


def test_distant_subsequence_scores_at_most_zero() -> None:
    score = fuzzy_score("a" + "x" * 80 + "b", "ab")

    assert score is not None
    assert score <= 0
