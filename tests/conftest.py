"""Pytest configuration and shared fixtures for the line-diff test suite."""

import os

import pytest
from hypothesis import Verbosity, settings

settings.register_profile("ci", max_examples=200, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=50)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


@pytest.fixture
def write_text(tmp_path):
    """Write text to a file without newline translation and return its path."""

    def _write(name: str, content: str):
        path = tmp_path / name
        path.write_bytes(content.encode("utf-8"))
        return path

    return _write
