# features/records.py
# Immutable records passed between scorers, orchestrator and callers
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Any, Mapping, Optional, Tuple
from types import MappingProxyType

NEUTRAL = "neutral"       # emotion sentinel: no emotional evidence
STATEMENT = "statement"   # intent sentinel: no actionable intent
NONE = "none"             # flag-style scorers that found nothing


class InvalidInput(TypeError):
    """Raised when the value handed to the analyzer is not text."""


@dataclass(frozen=True)
class BaseSentiment:
    """Word-valence sentiment supplied by the caller (score, comparative, matched words)."""
    score: float = 0.0
    comparative: float = 0.0
    positive: Tuple[str, ...] = ()
    negative: Tuple[str, ...] = ()

    @classmethod
    def coerce(cls, value: Any) -> "BaseSentiment":
        """Accept a BaseSentiment or a mapping with score/comparative/positive/negative."""
        if isinstance(value, BaseSentiment):
            return value
        if value is None:
            return cls()
        if not isinstance(value, Mapping):
            raise InvalidInput(f"base sentiment must be a mapping, got {type(value).__name__}")
        return cls(
            score=value.get("score") or 0,
            comparative=value.get("comparative") or 0,
            positive=tuple(value.get("positive") or ()),
            negative=tuple(value.get("negative") or ()),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "comparative": self.comparative,
            "positive": list(self.positive),
            "negative": list(self.negative),
        }


@dataclass(frozen=True)
class ScorerResult:
    """
    One scorer's verdict on one text.
    `confidence` is always derived from `raw` (in [0, 1]); `evidence` is human-readable.
    """
    primary: str
    confidence: float
    raw: Mapping[str, float] = field(default_factory=dict, hash=False)
    evidence: Tuple[str, ...] = ()

    def __post_init__(self):
        # Callers get a read-only view of the counts
        object.__setattr__(self, "raw", MappingProxyType(dict(self.raw)))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "primary": self.primary,
            "confidence": self.confidence,
            "raw": dict(self.raw),
            "evidence": list(self.evidence),
        }


@dataclass(frozen=True)
class SarcasmResult(ScorerResult):
    @property
    def is_sarcastic(self) -> bool:
        return self.primary == "sarcastic"

    def to_dict(self) -> Dict[str, Any]:
        d = super().to_dict()
        d["is_sarcastic"] = self.is_sarcastic
        return d


@dataclass(frozen=True)
class SubjectivityResult(ScorerResult):
    @property
    def is_subjective(self) -> bool:
        return self.primary == "subjective"

    def to_dict(self) -> Dict[str, Any]:
        d = super().to_dict()
        d["is_subjective"] = self.is_subjective
        return d


@dataclass(frozen=True)
class Visual:
    """Presentation tuple: emoji symbol, color token, upper-case tag."""
    symbol: str
    color: str
    tag: str

    def to_dict(self) -> Dict[str, str]:
        return {"symbol": self.symbol, "color": self.color, "tag": self.tag}


@dataclass(frozen=True)
class AnalysisRecord:
    """
    Base sentiment plus one optional result per enabled feature.
    A feature that was not evaluated has its field left as None and is absent from to_dict().
    """
    base: BaseSentiment
    enabled: Mapping[str, bool] = field(default_factory=dict, hash=False)
    emotions: Optional[ScorerResult] = None
    sarcasm: Optional[SarcasmResult] = None
    intent: Optional[ScorerResult] = None
    subjectivity: Optional[SubjectivityResult] = None
    visuals: Optional[Mapping[str, Visual]] = field(default=None, hash=False)

    def __post_init__(self):
        object.__setattr__(self, "enabled", MappingProxyType(dict(self.enabled)))
        if self.visuals is not None:
            object.__setattr__(self, "visuals", MappingProxyType(dict(self.visuals)))

    # Base sentiment passthrough
    @property
    def score(self) -> float:
        return self.base.score

    @property
    def comparative(self) -> float:
        return self.base.comparative

    @property
    def positive(self) -> Tuple[str, ...]:
        return self.base.positive

    @property
    def negative(self) -> Tuple[str, ...]:
        return self.base.negative

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = self.base.to_dict()
        for name in ("emotions", "sarcasm", "intent", "subjectivity"):
            result = getattr(self, name)
            if result is not None:
                d[name] = result.to_dict()
        if self.visuals is not None:
            d["visuals"] = {k: v.to_dict() for k, v in self.visuals.items()}
        d["enabled"] = dict(self.enabled)
        return d
