"""
Tests for the weighted intent classifier.
"""

from __future__ import annotations

import pytest

from avatar_mood.features.lexicon import INTENT_ORDER, Lexicon
from avatar_mood.features.speech_acts import classify_intent


def test_question():
    """'what' and the trailing '?' are both strong question patterns."""
    r = classify_intent("What time is the meeting?")
    assert r.primary == "question"
    assert r.raw["question"] == 4
    assert r.confidence == pytest.approx(0.8)


def test_no_intent_is_statement():
    r = classify_intent("The sky turned purple.")
    assert r.primary == "statement"
    assert r.confidence == 0
    assert all(v == 0 for v in r.raw.values())


def test_empty_text_is_statement():
    r = classify_intent("")
    assert r.primary == "statement"
    assert r.confidence == 0


def test_single_strong_match_is_two_thirds():
    r = classify_intent("hello")
    assert r.primary == "greeting"
    assert r.confidence == pytest.approx(2 / 3)


def test_strong_and_weak_weights():
    r = classify_intent("Please send me the report")
    assert r.primary == "command"
    assert r.raw["command"] == 3
    assert r.confidence == pytest.approx(0.75)
    assert "command: send, please" in r.evidence


def test_gratitude():
    assert classify_intent("Thank you for your help").primary == "gratitude"


def test_tie_resolves_to_earlier_intent():
    """'wrong' is a strong pattern for both complaint and apology."""
    r = classify_intent("That was wrong")
    assert r.raw["complaint"] == r.raw["apology"] == 2
    assert r.primary == "complaint"


def test_raw_keys_follow_fixed_order():
    assert tuple(classify_intent("hi").raw.keys()) == INTENT_ORDER


def test_confidence_bounded_below_one():
    r = classify_intent("what how why when where who which? explain, tell me, describe")
    assert r.primary == "question"
    assert 0 < r.confidence < 1


def test_injected_lexicon():
    lex = Lexicon.from_mapping({"intents": {"apology": {"strong": ["oops"], "weak": []}}})
    r = classify_intent("oops, what?", lex)
    assert r.primary == "apology"
    assert r.raw["question"] == 0
