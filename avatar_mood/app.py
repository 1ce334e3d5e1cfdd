import logging
from typing import Optional
from flask import Flask, request, jsonify

from .core.analyzer import Analyzer
from .core.mood import fuse_mood
from .features import sentiment, style
from .features.records import InvalidInput
from .config import FeatureToggles, HOST, PORT

FEATURES = [
    "Enhanced emotion detection",
    "Sarcasm detection",
    "Intent classification",
    "Subjectivity analysis",
    "Visual outputs",
]

def _json_object():
    # Request body must be a JSON object; anything else is treated as missing
    payload = request.get_json(force=True, silent=True)
    return payload if isinstance(payload, dict) else None

def create_app(analyzer: Optional[Analyzer] = None) -> Flask:
    app = Flask(__name__)
    app.logger.setLevel(logging.INFO)
    # toggles are read once here and bound to the analyzer for the app's lifetime
    analyzer = analyzer or Analyzer(FeatureToggles.from_env())
    toggles = analyzer.toggles.as_dict()

    for name, on in toggles.items():
        app.logger.info("feature %s: %s", name, "enabled" if on else "disabled")

    @app.errorhandler(InvalidInput)
    def invalid_input(e):
        return jsonify({"error": "Message must be text", "details": str(e)}), 400

    @app.route("/", methods=["GET"])
    def index():
        return jsonify({
            "message": "Avatar mood API is running",
            "enhancements": {"enabled": toggles, "features": FEATURES},
        })

    @app.route("/api/analyze", methods=["POST"])
    def analyze():
        payload = _json_object()
        if payload is None:
            return jsonify({"error": "Request body must be a JSON object"}), 400
        message = payload.get("message")
        if message is None or message == "":
            return jsonify({"error": "Message is required"}), 400

        base = sentiment.evaluate(message) if isinstance(message, str) else None
        record = analyzer.analyze(message, base)                   # InvalidInput -> 400
        app.logger.debug("analysis: %s", record)
        return jsonify({
            "original": base.to_dict(),
            "enhanced": record.to_dict(),
            "configuration": toggles,
            "system_hint": style.system_hint(record),
        })

    @app.route("/api/mood", methods=["POST"])
    def mood():
        payload = _json_object()
        if payload is None:
            return jsonify({"error": "Request body must be a JSON object"}), 400
        message = payload.get("message")
        if message is None or message == "":
            return jsonify({"error": "Message is required"}), 400

        reply = payload.get("reply", "")
        if reply is None:
            reply = ""
        if not isinstance(message, str) or not isinstance(reply, str):
            raise InvalidInput("message and reply must be strings")

        record = analyzer.analyze(message, sentiment.evaluate(message))
        emotion = fuse_mood(record, sentiment.evaluate(reply))
        app.logger.debug("mood=%s for analysis %s", emotion, record)
        return jsonify({
            "emotion": emotion,
            "sentiment": {
                "user_sentiment": record.to_dict(),
                "score": record.score,
                "comparative": record.comparative,
            },
        })

    @app.errorhandler(500)
    def server_error(e):
        app.logger.error("request failed: %s", getattr(e, "original_exception", e))
        return jsonify({"error": "Failed to process request"}), 500

    return app

app = create_app()

if __name__ == "__main__":
    print(f"Avatar mood API running at http://localhost:{PORT}/api/analyze")
    app.run(host=HOST, port=PORT, threaded=True, debug=True)  # dev server
