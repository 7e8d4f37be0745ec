from __future__ import annotations

import builtins

import faker

from wintergreen.config import global_config
from wintergreen.errors import InvalidArgument
from wintergreen.markers import DEFAULT_ALPHABET


def _is_int(value: object) -> bool:
    return isinstance(value, builtins.int) and not isinstance(value, bool)


class Randomizer:
    """Bounded random primitives backed by a Faker instance.

    The Faker instance owns the random source, so seeding it with
    ``seed_instance`` makes every value produced here reproducible.
    """

    __slots__ = ("faker",)

    def __init__(self, faker: faker.Faker) -> None:
        self.faker = faker

    @classmethod
    def seeded(cls, seed: builtins.int | None, locale: str = "en") -> Randomizer:
        faker_ = faker.Faker(locale)
        faker_.seed_instance(seed)
        return cls(faker_)

    def string(self, length: builtins.int, alphabet: str = DEFAULT_ALPHABET) -> str:
        if not _is_int(length):
            raise InvalidArgument(f"length must be an integer, got {length!r}.")
        if not isinstance(alphabet, str):
            raise InvalidArgument(f"alphabet must be a string, got {alphabet!r}.")
        if length < 0:
            raise InvalidArgument(f"length must be >= 0, got {length}.")
        if not alphabet and length > 0:
            raise InvalidArgument("alphabet cannot be empty when length > 0.")
        return "".join(self.faker.random.choices(alphabet, k=length))

    def int(self, min: builtins.int, max: builtins.int) -> builtins.int:
        """Return an integer from the inclusive range ``[min, max]``."""
        if not (_is_int(min) and _is_int(max)):
            raise InvalidArgument(f"min and max must be integers, got ({min!r}, {max!r}).")
        if min > max:
            raise InvalidArgument(f"min must be <= max, got ({min}, {max}).")
        if min == max:
            return min
        return self.faker.random_int(min=min, max=max)


def default_randomizer() -> Randomizer:
    return Randomizer(global_config.faker)


def random_string(
    length: int,
    alphabet: str = DEFAULT_ALPHABET,
    *,
    randomizer: Randomizer | None = None,
) -> str:
    return (randomizer or default_randomizer()).string(length, alphabet)


def random_int(bounds: tuple[int, int], *, randomizer: Randomizer | None = None) -> int:
    lower, upper = bounds
    return (randomizer or default_randomizer()).int(lower, upper)
