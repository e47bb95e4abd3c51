"""Randomness collaborators used by the URL builder.

Both sources are plain no-argument callables so tests can pass a lambda
returning a fixed value.
"""

import os
import uuid
from collections.abc import Callable
from functools import lru_cache

from faker import Faker

SeedSource = Callable[[], str]
WordSource = Callable[[], str]


def uuid4_seed() -> str:
    """Return a version-4 UUID string built from 16 random bytes.

    Example:
        3f2b8c1e-9d4a-4e6b-a1f0-7c5d2e8b9a34
    """
    return str(uuid.UUID(bytes=os.urandom(16), version=4))


@lru_cache(maxsize=1)
def _faker() -> Faker:
    return Faker()


def lorem_word() -> str:
    """Return a single lower-case lorem word."""
    return _faker().word().lower()
