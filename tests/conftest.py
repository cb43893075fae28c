# tests/conftest.py
from pathlib import Path

import pytest

from viewprobe.model import RenderConfiguration

VIEWS_DIR = Path(__file__).resolve().parent / "views"


@pytest.fixture
def configuration():
    """Een configuratie die naar de test-views wijst."""
    return RenderConfiguration(view_folder_location=VIEWS_DIR)


@pytest.fixture
def hello_model():
    return {"test_text": "Hello World"}


@pytest.fixture
def article_model():
    return {"title": "A cool title", "author": "Aaron Buckley"}
