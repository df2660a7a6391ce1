"""Tests for fuzzy candidate scoring."""

import pytest

from wox_plugin.search import capital_initials, score, split_atoms


def test_capital_initials_keeps_upper_case_and_digits() -> None:
    assert capital_initials("GitHub") == "GH"
    assert capital_initials("Word2Vec") == "W2V"
    assert capital_initials("lowercase only") == ""


def test_split_atoms_drops_separators_and_empty_atoms() -> None:
    assert split_atoms("this-is-a-test") == ["this", "is", "a", "test"]
    assert split_atoms("--Leading  and_trailing!!") == ["leading", "and", "trailing"]
    assert split_atoms("---") == []


def test_character_gate_rejects_missing_characters() -> None:
    assert score("xyz", "Test Item") == 0
    assert score("test", "nomatch") == 0
    # every character present, but no rule matches
    assert score("tset", "test") == 0


def test_prefix_match() -> None:
    assert score("test", "Test Item One") == pytest.approx(100 - 13 / 4)
    assert score("TEST", "test") == pytest.approx(99.0)


def test_prefix_takes_precedence_over_substring() -> None:
    # the substring rule alone would give 90 - 10 / 2
    assert score("in", "intestinal") == pytest.approx(95.0)


def test_capital_initials_match() -> None:
    assert score("gh", "GitHub") == pytest.approx(99.0)
    assert score("w2v", "Word2Vec") == pytest.approx(99.0)
    assert score("test", "TwoExtraSpecialTest") == pytest.approx(99.0)


def test_atom_exact_match_uses_candidate_length() -> None:
    assert score("test", "this-is-a-test") == pytest.approx(100 - 14 / 4)
    assert score("a", "--a") == pytest.approx(97.0)


def test_atom_initials_prefix_and_contains() -> None:
    assert score("ott", "one two three") == pytest.approx(99.0)
    assert score("tt", "one two three") == pytest.approx(95 - 3 / 2)
    assert score("test", "not the extra special trials") == pytest.approx(95 - 5 / 4)


def test_substring_fallback() -> None:
    assert score("tin", "intestinal") == pytest.approx(90 - 10 / 3)
    assert score("test", "intestinal fortitude") == pytest.approx(85.0)


def test_lengths_count_code_points() -> None:
    assert score("é", "éa") == pytest.approx(98.0)
    assert score("naï", "naïve") == pytest.approx(100 - 5 / 3)


def test_empty_query_scores_zero() -> None:
    assert score("", "anything") == 0.0
    assert score("", "") == 0.0
