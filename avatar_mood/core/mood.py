# core/mood.py — fuse user analysis + reply sentiment into one avatar mood
from __future__ import annotations
from typing import Any, Literal

from ..features.records import AnalysisRecord, BaseSentiment, NEUTRAL

Mood = Literal["excited", "happy", "neutral", "sad", "angry"]

REPLY_WEIGHT = 0.5
SARCASM_DAMPING = 0.5

# Per-emotion nudge, scaled by the emotion confidence
EMOTION_ADJUSTMENT = {
    "joy": 2,
    "anger": -2,
    "sadness": -1,
    "fear": -1,
    "surprise": 0,
    "disgust": -2,
    "trust": 1,
    "anticipation": 1,
}

def combined_score(user_analysis: AnalysisRecord, reply_sentiment: Any) -> float:
    """user score + 0.5 x reply score, emotion nudge, then halved when sarcastic."""
    reply = BaseSentiment.coerce(reply_sentiment)
    score = user_analysis.score + REPLY_WEIGHT * reply.score

    emo = user_analysis.emotions
    if emo is not None and emo.primary != NEUTRAL:
        score += emo.confidence * EMOTION_ADJUSTMENT.get(emo.primary, 0)

    sarc = user_analysis.sarcasm
    if sarc is not None and sarc.is_sarcastic:
        score *= SARCASM_DAMPING
    return score

def mood_for_score(score: float) -> Mood:
    # Strict thresholds; boundary values fall to the lower bucket
    if score > 3: return "excited"
    if score > 1: return "happy"
    if score > -1: return "neutral"
    if score > -3: return "sad"
    return "angry"

def fuse_mood(user_analysis: AnalysisRecord, reply_sentiment: Any) -> Mood:
    """Fresh per turn; no memory of earlier moods."""
    return mood_for_score(combined_score(user_analysis, reply_sentiment))
