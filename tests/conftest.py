"""Shared fixtures for wordcue tests."""

import pytest

import wordcue
from wordcue import Language, mapping_loader


@pytest.fixture(scope="session")
def registry():
    """The bundled registry, shared by all tests."""
    return wordcue.default_registry()


@pytest.fixture(scope="session")
def english(registry):
    return registry[Language.ENGLISH]


@pytest.fixture
def tiny_lists():
    """An empty word list for every guessable language."""
    return {lang.resource_name: "" for lang in Language.guessable()}


@pytest.fixture
def tiny_registry(tiny_lists):
    """Registry over small in-memory lists: English and French share words."""
    tiny_lists["english"] = "foo bar | shared\nonly_en"
    tiny_lists["french"] = "foo bar | shared\nonly_fr"
    return wordcue.StopWordRegistry(mapping_loader(tiny_lists))
