# features/visuals.py
# Fixed label -> (symbol, color, tag) lookups; no thresholds of its own
from __future__ import annotations
from types import MappingProxyType
from typing import Dict, Optional

from .records import Visual, NEUTRAL, STATEMENT

EMOTION_VISUALS = MappingProxyType({
    "joy":          Visual("😊", "#4CAF50", "JOY"),
    "anger":        Visual("😠", "#F44336", "ANGER"),
    "sadness":      Visual("😢", "#2196F3", "SADNESS"),
    "fear":         Visual("😨", "#9C27B0", "FEAR"),
    "surprise":     Visual("😲", "#FF9800", "SURPRISE"),
    "disgust":      Visual("🤢", "#795548", "DISGUST"),
    "trust":        Visual("🤝", "#4CAF50", "TRUST"),
    "anticipation": Visual("🤞", "#FFC107", "ANTICIPATION"),
    NEUTRAL:        Visual("😐", "#9E9E9E", "NEUTRAL"),
})

SENTIMENT_VISUALS = MappingProxyType({
    "positive": Visual("👍", "#4CAF50", "POSITIVE"),
    "negative": Visual("👎", "#F44336", "NEGATIVE"),
    "neutral":  Visual("🤷", "#9E9E9E", "NEUTRAL"),
})

INTENT_VISUALS = MappingProxyType({
    "question":  Visual("❓", "#2196F3", "QUESTION"),
    "command":   Visual("⚡", "#FF9800", "COMMAND"),
    "complaint": Visual("⚠️", "#F44336", "COMPLAINT"),
    "greeting":  Visual("👋", "#4CAF50", "GREETING"),
    "gratitude": Visual("🙏", "#4CAF50", "GRATITUDE"),
    "apology":   Visual("🙇", "#2196F3", "APOLOGY"),
})
STATEMENT_VISUAL = Visual("💬", "#9E9E9E", "STATEMENT")

def sentiment_bucket(score: float) -> str:
    if score > 0: return "positive"
    if score < 0: return "negative"
    return "neutral"

def for_emotion(emotion: Optional[str]) -> Visual:
    return EMOTION_VISUALS.get(emotion or NEUTRAL, EMOTION_VISUALS[NEUTRAL])

def for_sentiment(score: float) -> Visual:
    return SENTIMENT_VISUALS[sentiment_bucket(score)]

def for_intent(intent: Optional[str]) -> Visual:
    return INTENT_VISUALS.get(intent or STATEMENT, STATEMENT_VISUAL)

def build_visuals(emotion: Optional[str] = None,
                  score: Optional[float] = None,
                  intent: Optional[str] = None) -> Dict[str, Visual]:
    """Decorate whichever of emotion/sentiment/intent were evaluated; None means skipped."""
    out: Dict[str, Visual] = {}
    if emotion is not None:
        out["emotion"] = for_emotion(emotion)
    if score is not None:
        out["sentiment"] = for_sentiment(score)
    if intent is not None:
        out["intent"] = for_intent(intent)
    return out
