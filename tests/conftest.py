import os
import sys

import pytest

# Make the package importable without installing it
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from streamwrap.domain.parsed_stream import AddonInfo, ParsedNameData


class FakeFilenameParser:
    """Stands in for guessit so parser tests only see their own logic."""

    def __init__(self, languages=None, fail=False):
        self.calls = []
        self.languages = languages or []
        self.fail = fail

    def __call__(self, filename):
        self.calls.append(filename)
        if self.fail:
            raise RuntimeError("tokenizer exploded")
        return ParsedNameData(title="Fake", languages=list(self.languages))


@pytest.fixture
def addon():
    return AddonInfo(name="Test Addon", id="test-addon")


@pytest.fixture
def fake_parser():
    return FakeFilenameParser()


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    for key in list(os.environ):
        if key.startswith("STREAMWRAP_"):
            monkeypatch.delenv(key)
