from __future__ import annotations

import dataclasses
import inspect
import logging
import typing

from wintergreen.errors import ConstructionFailure
from wintergreen.fields import FieldDescriptor, describe
from wintergreen.markers import Marker, RandomInt, RandomString
from wintergreen.randomizer import Randomizer, default_randomizer

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class Success[T]:
    instance: T

    @property
    def ok(self) -> typing.Literal[True]:
        return True

    def unwrap(self) -> T:
        return self.instance


@dataclasses.dataclass(frozen=True)
class Failure:
    model_class: object
    reason: str
    error: BaseException | None = None

    @property
    def ok(self) -> typing.Literal[False]:
        return False

    def unwrap(self) -> typing.NoReturn:
        raise ConstructionFailure(self.reason) from self.error


type BuildResult[T] = Success[T] | Failure


def generate(marker: Marker, randomizer: Randomizer) -> object:
    match marker:
        case RandomString(length=length, alphabet=alphabet):
            return randomizer.string(length, alphabet)
        case RandomInt(min=min_, max=max_):
            return randomizer.int(min_, max_)
    raise TypeError(f"Unsupported marker: {marker!r}")


def _fail(model_class: object, reason: str, error: BaseException | None = None) -> Failure:
    logger.warning("Cannot build %r: %s", model_class, reason)
    return Failure(model_class, reason, error)


def _check_default_constructible(model_class: type) -> None:
    try:
        signature = inspect.signature(model_class)
    except ValueError:
        # some builtin and extension types expose no signature
        return
    signature.bind()


def populate[T](instance: T, fields: typing.Iterable[FieldDescriptor], randomizer: Randomizer) -> T:
    """Assign a generated value to every marked field of ``instance``.

    Unmarked fields are left untouched. Raises ``InvalidArgument`` on bad
    marker parameters and ``AttributeError`` on fields that cannot be written.
    """
    for field in fields:
        if field.marker is None:
            continue
        field.set(instance, generate(field.marker, randomizer))
    return instance


def build[T](model_class: type[T], *, randomizer: Randomizer | None = None) -> BuildResult[T]:
    """Default-construct ``model_class`` and fill its marked fields with random values.

    Types that cannot be built (not a class, abstract, constructor needs
    arguments, unresolvable annotations, unwritable fields) produce a
    ``Failure``. Malformed markers raise ``InvalidArgument``.
    """
    if not isinstance(model_class, type):
        return _fail(model_class, "not a class")

    if inspect.isabstract(model_class):
        return _fail(model_class, "abstract classes cannot be instantiated")

    try:
        fields = describe(model_class)
    except NameError as ex:
        return _fail(model_class, f"cannot resolve field annotations: {ex}", ex)

    try:
        _check_default_constructible(model_class)
    except TypeError as ex:
        return _fail(model_class, f"default construction failed: {ex}", ex)

    instance = model_class()

    try:
        populate(instance, fields, randomizer or default_randomizer())
    except AttributeError as ex:
        return _fail(model_class, f"field is not writable: {ex}", ex)

    return Success(instance)


def build_batch[T](
    model_class: type[T],
    count: int,
    *,
    randomizer: Randomizer | None = None,
) -> list[BuildResult[T]]:
    return [build(model_class, randomizer=randomizer) for _ in range(count)]
