"""
Shared fixtures.
"""

import pytest

from fakes import FakeGitHub, SAMPLE_FILES


@pytest.fixture
def fake_github():
    return FakeGitHub(dict(SAMPLE_FILES))
