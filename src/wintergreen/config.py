import dataclasses
import os
import random
import uuid

import faker as fakerlib

DEFAULT_LOCALE = "en"

# Seeds the global random source at import time when set.
SEED_ENV_VAR = "WINTERGREEN_SEED"


@dataclasses.dataclass
class Config:
    """Process-wide defaults for randomizers and factories.

    ``faker`` is the random source behind the default randomizer. ``seed`` is
    the last seed applied and the fallback seed for factories that do not set
    ``__seed__``.
    """

    locale: str = DEFAULT_LOCALE
    seed: int | None = None
    faker: fakerlib.Faker = dataclasses.field(default_factory=lambda: fakerlib.Faker(DEFAULT_LOCALE))

    def use_locale(self, locale: str) -> None:
        if locale == self.locale:
            return
        self.locale = locale
        self.faker = fakerlib.Faker(locale)

    def reseed(self, seed: int) -> None:
        self.seed = seed
        random.seed(seed)
        self.faker.seed_instance(seed)


def _seed_from_env() -> int | None:
    value = os.getenv(SEED_ENV_VAR)
    if value is None or not value.strip():
        return None
    return int(value)


global_config = Config()

_env_seed = _seed_from_env()
if _env_seed is not None:
    global_config.reseed(_env_seed)


def configure(
    *,
    locale: str | None = None,
    faker: fakerlib.Faker | None = None,
    seed: int | None = None,
) -> None:
    """Replace the global locale or Faker instance and reseed the random source.

    A missing ``seed`` draws a fresh one, so every call leaves the global
    source in a known, reported state (``global_config.seed``).
    """
    if locale is not None:
        global_config.use_locale(locale)

    if faker is not None:
        global_config.faker = faker

    global_config.reseed(int(uuid.uuid4()) if seed is None else seed)
