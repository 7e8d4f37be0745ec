import dataclasses
from string import ascii_letters, digits

DEFAULT_ALPHABET = ascii_letters + digits


class Marker:
    """Base class for field generation markers.

    Markers are attached to fields with ``typing.Annotated`` and carry
    parameters only; the builder decides what to do with them.
    """

    __slots__ = ()


@dataclasses.dataclass(frozen=True, slots=True)
class RandomString(Marker):
    length: int
    alphabet: str = DEFAULT_ALPHABET


@dataclasses.dataclass(frozen=True, slots=True)
class RandomInt(Marker):
    min: int
    max: int

    @property
    def range(self) -> tuple[int, int]:
        return self.min, self.max
