# features/sarcasm.py
# Sarcasm likelihood from four indicator families (punctuation, phrases, patterns, shouting)
from .lexicon import Lexicon, DEFAULT_LEXICON, find_substrings
from .records import SarcasmResult, NONE

MAX_SCORE = 5            # fixed normalization ceiling
THRESHOLD = 0.3          # confidence above this flags sarcasm
PUNCTUATION_CAP = 2      # distinct punctuation patterns count at most this much

def _shouted_words(text: str, allowed: tuple[str, ...]) -> list[str]:
    # Space-separated tokens taken as-is: all-caps, longer than 2 chars, and on the allow-list
    words = text.split(" ")
    return [w for w in words if len(w) > 2 and w.isupper() and w in allowed]

def detect_sarcasm(text: str, lexicon: Lexicon = DEFAULT_LEXICON) -> SarcasmResult:
    """Return (primary='sarcastic'|'none', confidence=min(score/5, 1), per-family raw counts, evidence)."""
    raw_text = text or ""
    low = raw_text.lower()
    evidence: list[str] = []

    punct = find_substrings(raw_text, lexicon.sarcasm_words("punctuation"))
    phrases = find_substrings(low, lexicon.sarcasm_words("phrases"))
    patterns = find_substrings(low, lexicon.sarcasm_words("patterns"))
    shouted = _shouted_words(raw_text, lexicon.sarcasm_words("capitalization"))

    raw = {
        "punctuation": min(len(punct), PUNCTUATION_CAP),
        "phrases": len(phrases),
        "patterns": len(patterns),
        "capitalization": len(shouted),
    }
    if punct:    evidence.append(f"Excessive punctuation ({len(punct)}): {' '.join(punct)}")
    if phrases:  evidence.append(f"Sarcastic phrases: {', '.join(phrases)}")
    if patterns: evidence.append(f"Sarcastic patterns: {', '.join(patterns)}")
    if shouted:  evidence.append(f"Excessive capitalization: {', '.join(shouted)}")

    confidence = min(sum(raw.values()) / MAX_SCORE, 1.0)
    primary = "sarcastic" if confidence > THRESHOLD else NONE
    return SarcasmResult(primary=primary, confidence=confidence, raw=raw, evidence=tuple(evidence))
