import pytest

from text_to_color.db import create_tables, init_engine_and_session
from text_to_color.extract import extract_color
from text_to_color import models  # noqa: F401 register tables

BROOK_OUTPUT = (
    "Imagery: A serene mountain brook, with clear water flowing over rocks.\n"
    "Hue: 160 (Fresh greenery.)\n"
    "Saturation: 50% (Calm.)\n"
    "Lightness: 50% (Balanced.)\n"
    "#4c8c64"
)


class FakeCompletionClient:
    """Returns a fixed answer and records every call."""

    def __init__(self, output=BROOK_OUTPUT):
        self.output = output
        self.calls = []

    def generate(self, text, history=None, keep_history=False):
        self.calls.append({"text": text, "history": history, "keep_history": keep_history})
        return extract_color(self.output)


@pytest.fixture
def SessionLocal(tmp_path):
    engine, SessionLocal = init_engine_and_session(f"sqlite:///{tmp_path / 'test.db'}")
    create_tables(SessionLocal)
    yield SessionLocal
    engine.dispose()


@pytest.fixture
def fake_client():
    return FakeCompletionClient()
