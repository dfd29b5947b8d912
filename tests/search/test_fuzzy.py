# tests/search/test_fuzzy.py
"""Tests for edit-distance primitives."""

import pytest

from darwin_palette.search.fuzzy import (
    Alignment,
    best_alignment,
    field_score,
    fold,
    highlight_spans,
    levenshtein_distance,
)


class TestFold:
    def test_lowercase_and_accents(self):
        assert fold("Hipertensão") == "hipertensao"
        assert fold("AÇÚCAR") == "acucar"

    def test_length_preserved(self):
        for text in ("Hipertensão", "İstanbul", "straße", "ÆON"):
            assert len(fold(text)) == len(text)

    def test_punctuation_untouched(self):
        assert fold("a-b/c?") == "a-b/c?"

    def test_multi_char_lowercase_folds_to_base_letter(self):
        assert fold("İstanbul") == "istanbul"
        assert fold("DİYARBAKIR") == "diyarbakir"


class TestLevenshtein:
    @pytest.mark.parametrize(
        "a, b, expected",
        [
            ("kitten", "sitting", 3),
            ("", "abc", 3),
            ("abc", "", 3),
            ("same", "same", 0),
            ("hypertenson", "hipertenso", 2),
        ],
    )
    def test_distance(self, a, b, expected):
        assert levenshtein_distance(a, b) == expected

    def test_symmetric(self):
        assert levenshtein_distance("diabets", "diabetes") == levenshtein_distance(
            "diabetes", "diabets"
        )


class TestBestAlignment:
    def test_exact_substring(self):
        assert best_alignment("tens", "hypertension") == Alignment(0, 5, 9)

    def test_prefix(self):
        assert best_alignment("hyper", "hypertension") == Alignment(0, 0, 5)

    def test_one_deletion(self):
        alignment = best_alignment("hypertenson", "hypertension")
        assert alignment.errors == 1
        assert alignment.start == 0

    def test_empty_pattern(self):
        assert best_alignment("", "abc") == Alignment(0, 0, 0)

    def test_empty_text(self):
        assert best_alignment("abc", "") == Alignment(3, 0, 0)

    def test_earliest_start_wins_ties(self):
        assert best_alignment("ab", "xxabyyab").start == 2


class TestFieldScore:
    def test_perfect_prefix_scores_zero(self):
        score, _ = field_score("asthma", "asthma")
        assert score == 0.0

    def test_typo_score(self):
        score, _ = field_score("hypertenson", "hypertension")
        assert score == pytest.approx(1 / 11)

    def test_start_penalty(self):
        score, _ = field_score("tens", "hypertension")
        assert score == pytest.approx(0.05)

    def test_start_penalty_disabled(self):
        score, _ = field_score("tens", "hypertension", distance=0)
        assert score == 0.0

    def test_clipped_to_one(self):
        score, _ = field_score("xyz", "abc")
        assert score == 1.0


class TestHighlightSpans:
    def test_accent_insensitive(self):
        assert highlight_spans("Hipertensão Arterial", "tensao") == [(5, 11)]

    def test_multiple_occurrences(self):
        assert highlight_spans("a-b a-b", "a-b") == [(0, 3), (4, 7)]

    def test_blank_query(self):
        assert highlight_spans("anything", "   ") == []

    def test_no_match(self):
        assert highlight_spans("Asthma", "zzz") == []
