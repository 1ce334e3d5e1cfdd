import os
from dataclasses import dataclass, asdict
from typing import Mapping, Optional, Dict
from dotenv import load_dotenv

load_dotenv()  # load variables from .env into environment

# adapter settings
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3003"))

# feature toggle -> environment variable
TOGGLE_ENV = {
    "emotion_detection":     "ENABLE_EMOTION_DETECTION",
    "sarcasm_detection":     "ENABLE_SARCASTIC_DETECTION",
    "intent_classification": "ENABLE_INTENT_CLASSIFICATION",
    "subjectivity_analysis": "ENABLE_SUBJECTIVITY_ANALYSIS",
    "visual_outputs":        "ENABLE_VISUAL_OUTPUTS",
}
FALSY = {"false", "0", "no", "off"}

def _enabled(raw: Optional[str]) -> bool:
    # Unset or anything not explicitly falsy keeps the feature on
    return raw is None or raw.strip().lower() not in FALSY

@dataclass(frozen=True)
class FeatureToggles:
    """Five independent feature switches, read once at startup."""
    emotion_detection: bool = True
    sarcasm_detection: bool = True
    intent_classification: bool = True
    subjectivity_analysis: bool = True
    visual_outputs: bool = True

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "FeatureToggles":
        env = os.environ if environ is None else environ
        return cls(**{field: _enabled(env.get(var)) for field, var in TOGGLE_ENV.items()})

    def as_dict(self) -> Dict[str, bool]:
        return asdict(self)
