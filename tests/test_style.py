"""
Tests for sentiment descriptions and the assistant system hint.
"""

from __future__ import annotations

import pytest

from avatar_mood.features import sentiment
from avatar_mood.features.style import describe, system_hint


@pytest.mark.parametrize("score,text", [
    (3, "very positive and happy"),
    (2, "positive and content"),
    (1, "positive and content"),
    (0, "slightly negative or neutral"),
    (-2, "negative and unhappy"),
    (-5, "very negative and distressed"),
])
def test_describe(score, text):
    assert describe(score) == text


def test_hint_mentions_evaluated_signals(analyzer):
    text = "Oh great, another meeting!"
    hint = system_hint(analyzer.analyze(text, sentiment.evaluate(text)))
    assert "shows: very positive and happy." in hint
    assert "sarcastic (confidence: 40.0%)" in hint
    assert "objective statement (confidence: 0.0%)" in hint
    assert "intent appears" not in hint
    assert "appears to be feeling" not in hint
    assert hint.rstrip().endswith("Keep your response natural and conversational.")


def test_hint_emotion_and_intent(analyzer):
    hint = system_hint(analyzer.analyze("Why am I so sad about this?", None))
    assert "feeling sadness (confidence: 100.0%)" in hint
    assert "intent appears to be a question" in hint


def test_hint_skips_disabled_features(make_analyzer):
    a = make_analyzer(subjectivity_analysis=False, sarcasm_detection=False)
    hint = system_hint(a.analyze("Oh great, another meeting!", None))
    assert "The message is a" not in hint
    assert "sarcastic (confidence" not in hint
