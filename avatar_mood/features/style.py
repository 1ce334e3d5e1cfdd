# features/style.py
from .records import AnalysisRecord, NEUTRAL, STATEMENT

RESPONSE_GUIDANCE = """Respond appropriately based on the analysis:
- If the user is being sarcastic: Acknowledge the sarcasm with humor or understanding
- If the user is asking a question: Provide a clear, helpful answer
- If the user is making a complaint: Be empathetic and offer solutions
- If the user is expressing gratitude: Show appreciation and warmth
- If the user is apologizing: Be forgiving and supportive
- If the user is giving a command: Acknowledge and respond appropriately
- If the user is greeting: Respond warmly and ask how you can help

Match the emotional context:
- Joy/Excitement: Be enthusiastic and positive
- Anger/Frustration: Be calm, understanding, and solution-oriented
- Sadness/Depression: Be empathetic and supportive
- Fear/Anxiety: Be reassuring and helpful
- Surprise/Confusion: Be clear and explanatory
- Disgust: Be understanding and offer alternatives
- Trust: Be reliable and professional
- Anticipation: Be encouraging and informative

Keep your response natural and conversational."""

def describe(score: float) -> str:
    """Plain-language band for a base sentiment score."""
    if score > 2:
        return "very positive and happy"
    if score > 0:
        return "positive and content"
    if score > -2:
        return "slightly negative or neutral"
    if score > -5:
        return "negative and unhappy"
    return "very negative and distressed"

def _pct(confidence: float) -> str:
    return f"{confidence * 100:.1f}%"

def system_hint(record: AnalysisRecord) -> str:
    """Assistant system prompt built from whichever signals were evaluated."""
    context = f"The user's message has been analyzed and shows: {describe(record.score)}."

    emo = record.emotions
    if emo is not None and emo.primary != NEUTRAL:
        context += f" The user appears to be feeling {emo.primary} (confidence: {_pct(emo.confidence)})."

    sarc = record.sarcasm
    if sarc is not None and sarc.is_sarcastic:
        context += f" The message appears to be sarcastic (confidence: {_pct(sarc.confidence)})."

    intent = record.intent
    if intent is not None and intent.primary != STATEMENT:
        context += f" The user's intent appears to be a {intent.primary} (confidence: {_pct(intent.confidence)})."

    subj = record.subjectivity
    if subj is not None:
        kind = "subjective opinion" if subj.is_subjective else "objective statement"
        context += f" The message is a {kind} (confidence: {_pct(subj.confidence)})."

    return f"You are a helpful AI assistant with an emotional avatar. {context}\n\n{RESPONSE_GUIDANCE}"
