# features/emotion.py
# Keyword-count emotion detection over eight fixed categories

from .lexicon import Lexicon, DEFAULT_LEXICON, EMOTION_ORDER, find_substrings
from .records import ScorerResult, NEUTRAL

def detect_emotions(text: str, lexicon: Lexicon = DEFAULT_LEXICON) -> ScorerResult:
    """
    Count distinct keyword hits per emotion; the strict maximum wins (earliest category on ties).
    Confidence is the winner's share of all hits, 0 when nothing matched.
    """
    low = (text or "").lower()
    scores: dict[str, int] = {}
    evidence: list[str] = []
    for emotion in EMOTION_ORDER:
        hits = find_substrings(low, lexicon.emotion_words(emotion))
        scores[emotion] = len(hits)
        if hits:
            evidence.append(f"{emotion}: {', '.join(hits)}")

    primary, best = NEUTRAL, 0
    for emotion, n in scores.items():
        if n > best:
            primary, best = emotion, n

    total = sum(scores.values())
    confidence = best / total if total else 0.0
    return ScorerResult(primary=primary, confidence=confidence, raw=scores, evidence=tuple(evidence))
