"""
Random identifier generation for short codes, user ids and visitor ids.
"""

import random
import string
from typing import Container, Optional

from tinyapp.errors import CodeGenerationError

ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits


class IdentifierGenerator:
    """
    Generates fixed-length random alphanumeric strings.

    The generator itself makes no uniqueness promise; `generate_unique`
    retries against a caller-supplied collection of taken ids.

    Pros: Simple, unpredictable
    Cons: Collision risk grows with the directory, checked by retrying
    """

    def __init__(self, rng: Optional[random.Random] = None):
        # Injectable for deterministic tests
        self.rng = rng or random.Random()
        self.characters = ALPHABET

    def generate(self, length: int) -> str:
        """Generate a random string of exactly `length` characters"""
        if length < 0:
            raise ValueError(f"Identifier length must be >= 0, got {length}")
        return ''.join(self.rng.choice(self.characters) for _ in range(length))

    def generate_unique(self, length: int, taken: Container[str], max_retries: int = 5) -> str:
        """Generate a string not present in `taken`"""
        for attempt in range(max_retries):
            candidate = self.generate(length)
            if candidate not in taken:
                return candidate

        raise CodeGenerationError(
            f"Could not generate unique identifier after {max_retries} attempts"
        )
