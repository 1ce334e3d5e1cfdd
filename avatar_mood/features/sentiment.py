# features/sentiment.py
# Lightweight AFINN-style word valence sentiment (integer weights in [-5, 5])
import re

from .records import BaseSentiment

LEX_VALENCE = {
    # positive
    "amazing": 4, "awesome": 4, "brilliant": 4, "ecstatic": 4, "fantastic": 4, "superb": 5,
    "thrilled": 5, "wonderful": 4, "outstanding": 5, "breathtaking": 5,
    "delighted": 3, "excellent": 3, "excited": 3, "glad": 3, "great": 3, "happy": 3,
    "joy": 3, "love": 3, "loved": 3, "perfect": 3, "cheerful": 2, "enjoy": 2,
    "appreciate": 2, "blessed": 3, "confident": 2, "cool": 1, "eager": 2, "good": 3,
    "grateful": 3, "helpful": 2, "hope": 2, "hopeful": 2, "like": 2, "nice": 3,
    "optimistic": 2, "thank": 2, "thanks": 2, "trust": 1, "useful": 2, "welcome": 2,
    "fine": 2, "fun": 4, "yes": 1, "sure": 1, "interesting": 2, "curious": 1,
    "enthusiastic": 3, "genius": 5, "reliable": 2, "secure": 2,
    # negative
    "angry": -3, "annoyed": -2, "anxious": -2, "awful": -3, "bad": -3, "broken": -1,
    "bug": -2, "confused": -2, "depressed": -2, "despair": -3, "disappointed": -2,
    "disgusted": -3, "disgusting": -3, "error": -2, "failed": -2, "fear": -2,
    "frustrated": -2, "furious": -3, "hate": -3, "hopeless": -2, "horrible": -3,
    "horrified": -3, "irritated": -3, "mad": -3, "miserable": -3, "mistake": -2,
    "nervous": -2, "no": -1, "problem": -2, "regret": -2, "ruined": -2, "sad": -2,
    "scared": -2, "shocked": -2, "sick": -2, "sorry": -1, "stressed": -2, "stupid": -2,
    "terrible": -3, "terrified": -3, "tired": -2, "upset": -2, "worried": -3,
    "wrong": -2, "dislike": -2, "outraged": -3, "heartbroken": -3, "grief": -2,
    "afraid": -2, "panicked": -3, "revolted": -3, "appalled": -2, "livid": -4,
    "enraged": -3, "fuming": -3, "issue": -1, "worst": -3, "ugh": -2,
}
NEGATORS = {"not", "no", "never", "don't", "dont", "doesn't", "isn't", "wasn't", "aren't",
            "can't", "cannot", "won't", "hardly", "barely"}

_STRIP = re.compile(r"[^\w\s']")

def _tokenize(t: str) -> list[str]:
    # Lowercase, drop punctuation except apostrophes
    return [w for w in _STRIP.sub(" ", t.lower()).split() if w]

def evaluate(text: str) -> BaseSentiment:
    """Sum word valences (a negator directly before a word flips it); comparative = score / tokens."""
    tokens = _tokenize(text or "")
    score = 0
    positive: list[str] = []
    negative: list[str] = []
    for i, w in enumerate(tokens):
        val = LEX_VALENCE.get(w, 0)
        if val == 0:
            continue
        if i > 0 and tokens[i - 1] in NEGATORS:
            val = -val
        score += val
        if val > 0: positive.append(w)
        else: negative.append(w)

    comparative = score / len(tokens) if tokens else 0.0
    return BaseSentiment(score=score, comparative=comparative,
                         positive=tuple(positive), negative=tuple(negative))
