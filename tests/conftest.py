"""Shared fixtures for create-gem tests."""

import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(__file__))

from create_gem.compatibility.matrix import CompatibilityEntry
from fake_collaborators import FakeDetector, FakeRunner, FakeStore


def make_entry(**supported_options):
    """Build a compatibility entry that matches every version."""
    return CompatibilityEntry(requirements=(">=0",), supported_options=supported_options)


@pytest.fixture
def store():
    return FakeStore()


@pytest.fixture
def detector():
    return FakeDetector(bundler="3.1.0")


@pytest.fixture
def runner():
    return FakeRunner()
