"""Tests for rule-based experience tier classification."""

import pytest

from models.schemas.analysis import ExperienceTier
from services.experience_classifier import classify_experience, extract_max_years


class TestExtractMaxYears:
    def test_number_before_keyword(self):
        assert extract_max_years("5+ years of experience in Python") == 5

    def test_abbreviated_forms(self):
        assert extract_max_years("3 yrs exp") == 3

    def test_keyword_before_number(self):
        assert extract_max_years("Professional experience: 6 years in backend systems") == 6
        assert extract_max_years("exp: 4 yrs") == 4

    def test_multi_digit(self):
        assert extract_max_years("12 years of experience") == 12

    def test_takes_maximum(self):
        text = "2 years of experience in Java, 7 years of experience overall"
        assert extract_max_years(text) == 7

    def test_no_mentions(self):
        assert extract_max_years("Built things in 2019") == 0
        assert extract_max_years("") == 0


class TestClassifyExperience:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("Senior Developer, recent graduate", ExperienceTier.SENIOR),
            ("5 years of experience as a developer", ExperienceTier.SENIOR),
            ("intern, 1 year experience", ExperienceTier.ENTRY),
            ("3 years of experience building APIs", ExperienceTier.INTERMEDIATE),
            ("Software developer", ExperienceTier.INTERMEDIATE),
            ("Student looking for opportunities", ExperienceTier.ENTRY),
            ("", ExperienceTier.ENTRY),
        ],
    )
    def test_examples(self, text, expected):
        assert classify_experience(text) == expected

    def test_senior_keyword_beats_entry_keyword(self):
        assert classify_experience("Team lead and intern mentor") == ExperienceTier.SENIOR

    def test_entry_keyword_blocks_mid_keyword(self):
        assert classify_experience("Graduate engineer") == ExperienceTier.ENTRY

    def test_entry_keyword_does_not_block_years(self):
        text = "Graduate with 3 years of experience"
        assert classify_experience(text) == ExperienceTier.INTERMEDIATE

    def test_is_case_insensitive(self):
        assert classify_experience("PRINCIPAL ARCHITECT") == ExperienceTier.SENIOR

    def test_is_deterministic(self):
        text = "Developer with 2 years of experience"
        assert classify_experience(text) == classify_experience(text)


def test_tiers_are_ordered():
    assert ExperienceTier.ENTRY < ExperienceTier.INTERMEDIATE < ExperienceTier.SENIOR
    assert max(ExperienceTier) == ExperienceTier.SENIOR


def test_tier_labels_round_trip():
    assert ExperienceTier.ENTRY.label == "fresher"
    assert ExperienceTier.SENIOR.label == "professional"
    assert ExperienceTier.parse("Professional") == ExperienceTier.SENIOR
    assert ExperienceTier.parse("entry") == ExperienceTier.ENTRY
    with pytest.raises(ValueError):
        ExperienceTier.parse("guru")
