"""
Tests for the built-in suggestion providers and the provider loader.
"""

import os

import pytest

from ghosttext.engine import CancellationToken
from ghosttext.providers import DocumentWordProvider, ProviderLoadException, load_provider


class TestDocumentWordProvider:
    """Tests for DocumentWordProvider."""

    @pytest.mark.parametrize(
        "leading_text,expected",
        [
            ("the quick brown fox and the qu", "ick"),
            ("quack quick qu", "ick"),
            ("Suggestion engines make sugg", None),
            ("suggestion engines make sug", "gestion"),
            ("a quick q", None),
            ("the quick ", None),
            ("", None),
            ("first line\nfi", "rst"),
        ],
    )
    def test_completion(self, leading_text, expected):
        provider = DocumentWordProvider()

        assert provider(leading_text, CancellationToken()) == expected

    def test_minimum_prefix_length(self):
        provider = DocumentWordProvider(min_prefix_length=1)

        assert provider("a quick q", CancellationToken()) == "uick"


class TestLoadProvider:
    """Tests for load_provider()."""

    def test_class_is_instantiated(self):
        provider = load_provider("ghosttext.providers:DocumentWordProvider")

        assert isinstance(provider, DocumentWordProvider)

    def test_dotted_attribute_path(self):
        assert load_provider("os:path.join") is os.path.join

    @pytest.mark.parametrize(
        "import_path",
        [
            "ghosttext.providers",
            ":DocumentWordProvider",
            "ghosttext.providers:",
            "ghosttext.no_such_module:provider",
            "ghosttext.providers:NoSuchProvider",
            "ghosttext.constants:APPLICATION_NAME",
        ],
    )
    def test_invalid_paths(self, import_path):
        with pytest.raises(ProviderLoadException):
            load_provider(import_path)
