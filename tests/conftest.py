"""
Pytest fixtures for avatar_mood tests. Analyzers are built with explicit toggles,
never from the process environment.
"""

from __future__ import annotations

import pytest

from avatar_mood.config import FeatureToggles
from avatar_mood.core.analyzer import Analyzer


@pytest.fixture
def analyzer():
    """Analyzer with every feature enabled and the default lexicon."""
    return Analyzer(FeatureToggles())


@pytest.fixture
def make_analyzer():
    """Factory: make_analyzer(sarcasm_detection=False, ...) -> Analyzer with those toggles."""
    def _make(**toggles):
        return Analyzer(FeatureToggles(**toggles))
    return _make


@pytest.fixture
def make_client():
    """Factory for a Flask test client bound to an analyzer with the given toggles."""
    from avatar_mood.app import create_app

    def _make(**toggles):
        app = create_app(Analyzer(FeatureToggles(**toggles)))
        app.config["TESTING"] = True
        return app.test_client()
    return _make


@pytest.fixture
def client(make_client):
    return make_client()
