"""Shared fixtures for the test suite."""

import pytest

from consistencygrader.core.text import ensure_nltk_data


@pytest.fixture(scope="session")
def nltk_data():
    """Part-of-speech tagger data, fetched once per session if missing."""
    ensure_nltk_data()


@pytest.fixture
def brand_content():
    """Three samples of the same coffee brand message."""
    return {
        "website": (
            "Our roasters source ethically grown coffee beans. Therefore every cup "
            "delivers a smooth, balanced flavor you can trust."
        ),
        "twitter": (
            "Ethically grown coffee beans, roasted fresh. Totally awesome flavor "
            "in every cup, yeah!"
        ),
        "newsletter": (
            "Regarding our coffee: the beans are ethically grown and carefully "
            "roasted, thus each cup has a balanced flavor."
        ),
    }
