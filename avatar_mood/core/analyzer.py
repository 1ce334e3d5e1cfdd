# core/analyzer.py — composes the feature scorers into one AnalysisRecord
from __future__ import annotations
from typing import Any, Optional

from ..config import FeatureToggles
from ..features.lexicon import Lexicon, DEFAULT_LEXICON
from ..features.records import AnalysisRecord, BaseSentiment, InvalidInput
from ..features.emotion import detect_emotions
from ..features.sarcasm import detect_sarcasm
from ..features.speech_acts import classify_intent
from ..features.subjectivity import analyze_subjectivity
from ..features.visuals import build_visuals


class Analyzer:
    """
    Stateless orchestrator bound to one immutable toggle set and one lexicon.

    Each enabled scorer attaches its result; a disabled scorer leaves its field
    unset (absent, not zeroed). The base sentiment is carried over untouched and
    visuals are derived from whatever fields were evaluated.
    """

    def __init__(self, toggles: Optional[FeatureToggles] = None, lexicon: Lexicon = DEFAULT_LEXICON):
        self.toggles = toggles if toggles is not None else FeatureToggles()
        self.lexicon = lexicon

    def analyze(self, text: Any, base_sentiment: Any = None) -> AnalysisRecord:
        if not isinstance(text, str):
            raise InvalidInput(f"text must be a string, got {type(text).__name__}")
        base = BaseSentiment.coerce(base_sentiment)
        t = self.toggles

        emotions = detect_emotions(text, self.lexicon) if t.emotion_detection else None
        sarcasm = detect_sarcasm(text, self.lexicon) if t.sarcasm_detection else None
        intent = classify_intent(text, self.lexicon) if t.intent_classification else None
        subjectivity = analyze_subjectivity(text, self.lexicon) if t.subjectivity_analysis else None

        visuals = None
        if t.visual_outputs:
            visuals = build_visuals(
                emotion=emotions.primary if emotions is not None else None,
                score=base.score,
                intent=intent.primary if intent is not None else None,
            )

        return AnalysisRecord(
            base=base,
            enabled=t.as_dict(),
            emotions=emotions,
            sarcasm=sarcasm,
            intent=intent,
            subjectivity=subjectivity,
            visuals=visuals,
        )


def analyze(text: Any, base_sentiment: Any = None,
            toggles: Optional[FeatureToggles] = None,
            lexicon: Lexicon = DEFAULT_LEXICON) -> AnalysisRecord:
    """Functional entry point: analyze(text, base) with explicit toggles (all on by default)."""
    return Analyzer(toggles, lexicon).analyze(text, base_sentiment)
