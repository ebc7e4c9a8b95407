"""Shared pytest fixtures."""

import pytest


@pytest.fixture
def article_text():
    """A short news-style article with one clear central topic."""
    return (
        "The city council approved a new budget for public transit on Monday. "
        "The transit budget adds funding for electric buses and longer service hours. "
        "Council members said the electric buses will replace the oldest diesel fleet. "
        "Several residents spoke about the weather during the public comment period. "
        "Service hours for transit will expand on weekends starting next spring. "
        "The mayor is expected to sign the transit budget later this week."
    )


@pytest.fixture
def isolated_text():
    """Four sentences, the last one sharing no content words with the rest."""
    return (
        "Solar panels convert sunlight into electricity. "
        "Solar electricity prices keep falling every year. "
        "Cheap solar electricity helps many households. "
        "Penguins waddle across Antarctic ice."
    )
