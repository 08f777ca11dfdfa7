"""Bug ID generation and shape checks"""

import random
import re
import string
import time
from typing import Any, Optional

ID_LENGTH = 24
HEX_CHARS = string.digits + "abcdef"

_ID_PATTERN = re.compile(r"[0-9a-f]{24}")

_random = random.SystemRandom()


def generate_random_string(length: int = 16, chars: str = HEX_CHARS) -> str:
    """Generate random string from the given alphabet"""
    return ''.join(_random.choice(chars) for _ in range(length))


def generate_bug_id(timestamp: Optional[float] = None) -> str:
    """Generate a bug ID: 8 hex digits of creation time, then 16 random hex digits"""
    if timestamp is None:
        timestamp = time.time()
    return f"{int(timestamp) & 0xFFFFFFFF:08x}{generate_random_string(ID_LENGTH - 8)}"


def is_valid_bug_id(value: Any) -> bool:
    """Check that a value has the shape of a bug ID"""
    return isinstance(value, str) and _ID_PATTERN.fullmatch(value) is not None
