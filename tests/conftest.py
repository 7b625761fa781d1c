"""
Shared pytest fixtures and configuration for Ripple tests.
"""

import pytest


class Recorder:
    """Callable observer that keeps every value it is called with."""

    def __init__(self, transform=None):
        self.received = []
        self._transform = transform

    def __call__(self, value):
        if self._transform is not None:
            value = self._transform(value)
        self.received.append(value)

    @property
    def count(self):
        return len(self.received)


@pytest.fixture
def recorder():
    """Factory for fresh Recorder observers, optionally transforming payloads."""

    def make(transform=None):
        return Recorder(transform)

    return make
