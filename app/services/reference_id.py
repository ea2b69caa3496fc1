from __future__ import annotations

import secrets
import string
import time
from typing import Callable, Optional

BASE36_ALPHABET = string.digits + string.ascii_uppercase
TIME_CHARS = 5
RANDOM_CHARS = 4
DEFAULT_PREFIX = "RFQ"


def to_base36(number: int) -> str:
    if number < 0:
        raise ValueError("number must be non-negative")
    if number == 0:
        return "0"
    digits = []
    while number:
        number, rem = divmod(number, 36)
        digits.append(BASE36_ALPHABET[rem])
    return "".join(reversed(digits))


def make_reference_id(
    product_code: Optional[str],
    clock: Callable[[], float] = time.time,
) -> str:
    """
    Build an advisory RFQ reference such as ``EPRD-100500-K9X3ZQ7WA``.

    The last five base-36 digits of the millisecond clock are followed by four
    random base-36 characters. Nothing is stored and uniqueness is not checked.
    """
    prefix = (product_code or "").strip() or DEFAULT_PREFIX
    millis = int(clock() * 1000)
    time_part = to_base36(millis)[-TIME_CHARS:].rjust(TIME_CHARS, "0")
    random_part = "".join(secrets.choice(BASE36_ALPHABET) for _ in range(RANDOM_CHARS))
    return f"{prefix}-{time_part}{random_part}"
