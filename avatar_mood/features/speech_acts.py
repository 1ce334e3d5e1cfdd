# features/speech_acts.py
# Communicative intent from weighted phrase/keyword hits (lowercase substring search)
from __future__ import annotations
from typing import Dict

from .lexicon import Lexicon, DEFAULT_LEXICON, INTENT_ORDER, find_substrings
from .records import ScorerResult, STATEMENT

STRONG_WEIGHT = 2
WEAK_WEIGHT = 1

def score_intents(text: str, lexicon: Lexicon = DEFAULT_LEXICON) -> tuple[Dict[str, int], list[str]]:
    """Per-intent score = 2 x distinct strong patterns + 1 x distinct weak keywords."""
    low = (text or "").lower()
    scores: Dict[str, int] = {}
    evidence: list[str] = []
    for intent in INTENT_ORDER:
        pats = lexicon.intent_patterns(intent)
        strong = find_substrings(low, pats.strong)
        weak = find_substrings(low, pats.weak)
        scores[intent] = STRONG_WEIGHT * len(strong) + WEAK_WEIGHT * len(weak)
        if strong or weak:
            evidence.append(f"{intent}: {', '.join(strong + weak)}")
    return scores, evidence

def classify_intent(text: str, lexicon: Lexicon = DEFAULT_LEXICON) -> ScorerResult:
    """
    Primary = strict top scorer in fixed order (question, command, complaint,
    greeting, gratitude, apology); 'statement' with confidence 0 when nothing fired.
    Confidence saturates as max / (max + 1).
    """
    scores, evidence = score_intents(text, lexicon)

    primary, best = STATEMENT, 0
    for intent, s in scores.items():
        if s > best:
            primary, best = intent, s

    confidence = best / (best + 1) if best > 0 else 0.0
    return ScorerResult(primary=primary, confidence=confidence, raw=scores, evidence=tuple(evidence))
