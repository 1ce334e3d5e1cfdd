"""
Tests for the four-family sarcasm scorer (punctuation, phrases, patterns, shouting).
"""

from __future__ import annotations

import pytest

from avatar_mood.features.lexicon import Lexicon
from avatar_mood.features.sarcasm import detect_sarcasm


def test_oh_great_is_sarcastic():
    r = detect_sarcasm("Oh great, another meeting!")
    assert r.is_sarcastic is True
    assert r.confidence > 0.3
    assert r.confidence == pytest.approx(0.4)
    assert r.raw["phrases"] == 1
    assert r.raw["punctuation"] == 1
    assert r.evidence[0].startswith("Excessive punctuation (1)")
    assert r.evidence[1] == "Sarcastic phrases: oh great"


def test_families_in_order_with_shouting():
    r = detect_sarcasm("Yeah right, that's REALLY going to work...")
    assert r.raw == {"punctuation": 1, "phrases": 0, "patterns": 1, "capitalization": 1}
    assert r.confidence == pytest.approx(0.6)
    assert r.is_sarcastic
    assert [e.split(" ")[1] for e in r.evidence] == ["punctuation", "patterns:", "capitalization:"]
    assert r.evidence[-1] == "Excessive capitalization: REALLY"


def test_punctuation_contribution_capped_at_two():
    r = detect_sarcasm("What?! Really?? No!? Wow!...")
    assert r.raw["punctuation"] == 2
    assert r.evidence[0].startswith("Excessive punctuation (5)")
    assert r.confidence == pytest.approx(0.4)


def test_lowercase_shout_words_do_not_count():
    r = detect_sarcasm("really wow amazing")
    assert r.raw["capitalization"] == 0
    assert r.confidence == 0
    assert r.is_sarcastic is False
    assert r.primary == "none"
    assert r.evidence == ()


def test_capitalized_word_must_be_on_allow_list():
    r = detect_sarcasm("THIS IS BAD")
    assert r.raw["capitalization"] == 0
    assert r.confidence == 0


def test_each_shouted_word_counts():
    r = detect_sarcasm("WOW WOW")
    assert r.raw["capitalization"] == 2
    assert r.is_sarcastic


def test_single_phrase_stays_below_threshold():
    r = detect_sarcasm("That's brilliant")
    assert r.confidence == pytest.approx(0.2)
    assert not r.is_sarcastic


def test_confidence_capped_at_one():
    r = detect_sarcasm("Oh great, obviously, clearly, sure! Yeah right, whatever...")
    assert sum(r.raw.values()) > 5
    assert r.confidence == 1.0


def test_empty_text():
    r = detect_sarcasm("")
    assert r.confidence == 0
    assert not r.is_sarcastic


def test_injected_lexicon():
    lex = Lexicon.from_mapping({"sarcasm": {"phrases": ["as if"], "capitalization": ["NOPE"]}})
    r = detect_sarcasm("As if. NOPE", lex)
    assert r.raw == {"punctuation": 0, "phrases": 1, "patterns": 0, "capitalization": 1}
    assert r.is_sarcastic


def test_punctuated_shout_word_is_not_shouting():
    r = detect_sarcasm("WOW!")
    assert r.raw["capitalization"] == 0
    assert r.raw["punctuation"] == 1
    assert r.confidence == pytest.approx(0.2)
    assert not r.is_sarcastic


def test_shout_word_with_trailing_punctuation_in_sentence():
    r = detect_sarcasm("This is AMAZING!")
    assert r.raw["capitalization"] == 0
    assert not r.is_sarcastic


def test_injected_shout_words_keep_case():
    lex = Lexicon.from_mapping({"sarcasm": {"capitalization": ["NOPE"], "phrases": ["As If"]}})
    assert lex.sarcasm_words("capitalization") == ("NOPE",)
    assert lex.sarcasm_words("phrases") == ("as if",)
    assert detect_sarcasm("nope NOPE", lex).raw["capitalization"] == 1
