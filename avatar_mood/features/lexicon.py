# features/lexicon.py
# Static category -> trigger tables shared read-only by every scorer
from __future__ import annotations
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Tuple, Dict, Any, Iterable

# Fixed category orders (ties resolve to the earliest entry)
EMOTION_ORDER: Tuple[str, ...] = (
    "joy", "anger", "sadness", "fear", "surprise", "disgust", "trust", "anticipation",
)
INTENT_ORDER: Tuple[str, ...] = (
    "question", "command", "complaint", "greeting", "gratitude", "apology",
)

EMOTION_WORDS: Dict[str, list[str]] = {
    "joy": ["happy", "joy", "excited", "delighted", "thrilled", "ecstatic", "elated", "jubilant", "cheerful", "gleeful"],
    "anger": ["angry", "furious", "enraged", "irritated", "annoyed", "mad", "livid", "outraged", "fuming", "seething"],
    "sadness": ["sad", "depressed", "melancholy", "sorrowful", "grief", "despair", "hopeless", "miserable", "heartbroken"],
    "fear": ["afraid", "scared", "terrified", "frightened", "panicked", "anxious", "worried", "nervous", "apprehensive"],
    "surprise": ["surprised", "shocked", "astonished", "amazed", "stunned", "bewildered", "perplexed", "confused"],
    "disgust": ["disgusted", "revolted", "repulsed", "appalled", "horrified", "sickened", "nauseated"],
    "trust": ["trust", "confident", "secure", "assured", "reliable", "faithful", "loyal"],
    "anticipation": ["excited", "eager", "enthusiastic", "optimistic", "hopeful", "expectant", "curious"],
}

# Sarcasm families: punctuation is matched on raw text, shout words are case-sensitive
CASE_SENSITIVE_SARCASM = ("punctuation", "capitalization")
SARCASM_WORDS: Dict[str, list[str]] = {
    "punctuation": ["!", "...", "??", "?!", "!?"],
    "phrases": ["oh great", "wonderful", "fantastic", "brilliant", "genius", "obviously", "clearly", "sure"],
    "patterns": ["yeah right", "oh really", "is that so", "no way", "whatever", "sure thing"],
    "capitalization": ["REALLY", "WOW", "AMAZING", "GREAT", "FANTASTIC"],
}

# Intent: strong patterns weigh 2, weak keywords weigh 1
INTENT_WORDS: Dict[str, Dict[str, list[str]]] = {
    "question": {
        "strong": ["what", "how", "why", "when", "where", "who", "which", "?"],
        "weak": ["explain", "tell me", "describe", "clarify", "understand"],
    },
    "command": {
        "strong": ["do this", "make", "create", "build", "send", "call", "go", "stop", "start"],
        "weak": ["please", "need", "want", "require", "demand"],
    },
    "complaint": {
        "strong": ["problem", "issue", "broken", "wrong", "bad", "terrible", "awful", "hate", "dislike"],
        "weak": ["not working", "doesn't work", "failed", "error", "bug"],
    },
    "greeting": {
        "strong": ["hello", "hi", "hey", "good morning", "good afternoon", "good evening"],
        "weak": ["greetings", "welcome", "nice to meet"],
    },
    "gratitude": {
        "strong": ["thank", "thanks", "appreciate", "grateful", "blessed"],
        "weak": ["helpful", "useful", "great job", "well done"],
    },
    "apology": {
        "strong": ["sorry", "apologize", "regret", "mistake", "wrong"],
        "weak": ["my bad", "my fault", "forgive", "excuse"],
    },
}

SUBJECTIVITY_WORDS: Dict[str, list[str]] = {
    "opinion": ["think", "believe", "feel", "opinion", "view", "perspective", "seems", "appears", "looks like"],
    "subjective_verbs": ["love", "hate", "like", "dislike", "prefer", "enjoy", "despise", "adore"],
    "factual": ["fact", "data", "statistics", "research", "study", "evidence", "proven", "confirmed"],
}


def _ordered_unique(words: Iterable[str], lower: bool = True) -> Tuple[str, ...]:
    # Keep first-seen order, drop repeats; triggers are matched against lowercased text
    return tuple(dict.fromkeys(w.lower() if lower else w for w in words))


def _freeze(table: Mapping[str, Iterable[str]], keep_case: Iterable[str] = ()) -> Mapping[str, Tuple[str, ...]]:
    keep = set(keep_case)
    return MappingProxyType({k: _ordered_unique(v, lower=k not in keep) for k, v in table.items()})


@dataclass(frozen=True)
class IntentPatterns:
    """Strong (weight 2) and weak (weight 1) triggers for one intent."""
    strong: Tuple[str, ...] = ()
    weak: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Lexicon:
    """Read-only keyword tables, built once and injected into the scorers."""
    emotions: Mapping[str, Tuple[str, ...]] = field(default_factory=lambda: MappingProxyType({}))
    sarcasm: Mapping[str, Tuple[str, ...]] = field(default_factory=lambda: MappingProxyType({}))
    intents: Mapping[str, IntentPatterns] = field(default_factory=lambda: MappingProxyType({}))
    subjectivity: Mapping[str, Tuple[str, ...]] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Lexicon":
        """
        Build a lexicon from plain nested dicts shaped like the module tables:
        {"emotions": {...}, "sarcasm": {...}, "intents": {name: {"strong": [...], "weak": [...]}},
         "subjectivity": {...}}. Missing sections are empty.
        """
        intents = {
            name: IntentPatterns(
                strong=_ordered_unique((table or {}).get("strong", ())),
                weak=_ordered_unique((table or {}).get("weak", ())),
            )
            for name, table in (data.get("intents") or {}).items()
        }
        return cls(
            emotions=_freeze(data.get("emotions") or {}),
            sarcasm=_freeze(data.get("sarcasm") or {}, keep_case=CASE_SENSITIVE_SARCASM),
            intents=MappingProxyType(intents),
            subjectivity=_freeze(data.get("subjectivity") or {}),
        )

    def emotion_words(self, category: str) -> Tuple[str, ...]:
        return self.emotions.get(category, ())

    def sarcasm_words(self, family: str) -> Tuple[str, ...]:
        return self.sarcasm.get(family, ())

    def intent_patterns(self, intent: str) -> IntentPatterns:
        return self.intents.get(intent, IntentPatterns())

    def subjectivity_words(self, family: str) -> Tuple[str, ...]:
        return self.subjectivity.get(family, ())


# Loaded once at import; never mutated afterwards
DEFAULT_LEXICON = Lexicon.from_mapping({
    "emotions": EMOTION_WORDS,
    "sarcasm": SARCASM_WORDS,
    "intents": INTENT_WORDS,
    "subjectivity": SUBJECTIVITY_WORDS,
})


def find_substrings(text: str, words: Iterable[str]) -> list[str]:
    """Return the triggers present in text as substrings, each at most once, in lexicon order."""
    return [w for w in words if w in text]
