# features/subjectivity.py
# Opinion vs. fact: opinion markers and subjective verbs add, factual markers subtract

from .lexicon import Lexicon, DEFAULT_LEXICON, find_substrings
from .records import SubjectivityResult, NONE

MAX_SCORE = 10
THRESHOLD = 0.3

def analyze_subjectivity(text: str, lexicon: Lexicon = DEFAULT_LEXICON) -> SubjectivityResult:
    """
    Running score: +2 per opinion marker, +1 per subjective verb, then -1 per
    factual marker floored at 0. Confidence = min(score / 10, 1).
    """
    low = (text or "").lower()
    evidence: list[str] = []
    score = 0

    opinion = find_substrings(low, lexicon.subjectivity_words("opinion"))
    if opinion:
        evidence.append(f"Opinion words: {', '.join(opinion)}")
        score += 2 * len(opinion)

    verbs = find_substrings(low, lexicon.subjectivity_words("subjective_verbs"))
    if verbs:
        evidence.append(f"Subjective verbs: {', '.join(verbs)}")
        score += len(verbs)

    # Factual markers only suppress; they never appear as evidence
    factual = find_substrings(low, lexicon.subjectivity_words("factual"))
    score = max(0, score - len(factual))

    confidence = min(score / MAX_SCORE, 1.0)
    raw = {"opinion": len(opinion), "subjective_verbs": len(verbs), "factual": len(factual), "score": score}
    primary = "subjective" if confidence > THRESHOLD else NONE
    return SubjectivityResult(primary=primary, confidence=confidence, raw=raw, evidence=tuple(evidence))
