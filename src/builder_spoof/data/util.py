"""Random value primitives shared by the entity makers."""

from __future__ import annotations

import random
import string
from datetime import UTC, datetime, timedelta
from typing import Callable, TypeVar

from faker import Faker

T = TypeVar("T")

_YEAR = timedelta(days=365)


def numeric_string(rng: random.Random, length: int) -> str:
    """Return ``length`` independently drawn decimal digits."""
    if length < 1:
        msg = f"length must be at least 1, got {length}"
        raise ValueError(msg)
    return "".join(rng.choice(string.digits) for _ in range(length))


def bounded_array(
    rng: random.Random,
    factory: Callable[[int], T],
    minimum: int = 1,
    maximum: int = 10,
) -> list[T]:
    """Call ``factory(index)`` for a random count in ``[minimum, maximum]``."""
    if minimum < 0 or minimum > maximum:
        msg = f"invalid bounds [{minimum}, {maximum}]"
        raise ValueError(msg)
    count = rng.randint(minimum, maximum)
    return [factory(index) for index in range(count)]


def between(fake: Faker, start: datetime, end: datetime) -> datetime:
    """Return a whole-second instant in ``[start, end]``."""
    if end <= start:
        return start
    value = fake.date_time_between(start_date=start, end_date=end, tzinfo=UTC)
    # Faker works on whole seconds, so clamp back into the sub-second bounds.
    return min(max(value.replace(microsecond=0), start), end)


def past(fake: Faker, ref: datetime, years: float = 1) -> datetime:
    """Return an instant no later than ``ref`` and at most ``years`` earlier."""
    return between(fake, ref - _YEAR * years, ref)


def alphanumeric(fake: Faker, length: int) -> str:
    return fake.password(length=length, special_chars=False)


def semver(fake: Faker) -> str:
    return fake.numerify("#.#.#")
