from __future__ import annotations

import dataclasses
import functools
import inspect
import logging
import types
import typing

from wintergreen.errors import InvalidArgument, MarkerConflict
from wintergreen.markers import Marker, RandomInt, RandomString

logger = logging.getLogger(__name__)

Setter = typing.Callable[[object, object], None]


@dataclasses.dataclass(frozen=True, slots=True)
class FieldDescriptor:
    name: str
    type: object
    marker: Marker | None
    setter: Setter

    def set(self, instance: object, value: object) -> None:
        self.setter(instance, value)


def _make_setter(name: str) -> Setter:
    # object.__setattr__ goes around frozen dataclasses and custom __setattr__
    def setter(instance: object, value: object) -> None:
        object.__setattr__(instance, name, value)

    return setter


def _own_field_names(model_class: type) -> list[str]:
    return list(inspect.get_annotations(model_class))


def _split_annotated(field_type: object) -> tuple[object, tuple[object, ...]]:
    if typing.get_origin(field_type) is typing.Annotated:
        base_type, *metadata = typing.get_args(field_type)
        return base_type, tuple(metadata)
    return field_type, ()


def _is_class_var(field_type: object) -> bool:
    base, _ = _split_annotated(field_type)
    return base is typing.ClassVar or typing.get_origin(base) is typing.ClassVar


def _find_marker(model_class: type, name: str, metadata: tuple[object, ...]) -> Marker | None:
    markers = [item for item in metadata if isinstance(item, Marker)]
    if len(markers) > 1:
        kinds = ", ".join(type(marker).__name__ for marker in markers)
        raise MarkerConflict(
            f'Field "{model_class.__qualname__}.{name}" has more than one generation marker: {kinds}.'
        )
    return markers[0] if markers else None


def _unwrap_optional(field_type: object) -> object:
    if typing.get_origin(field_type) in (typing.Union, types.UnionType):
        non_none = [a for a in typing.get_args(field_type) if a is not type(None)]
        if len(non_none) == 1:
            return non_none[0]
    return field_type


def _accepts(field_type: object, value_type: type) -> bool:
    ft = _unwrap_optional(field_type)
    if ft is typing.Any or ft is object:
        return True
    if typing.get_origin(ft) is not None or not isinstance(ft, type):
        return False
    return issubclass(value_type, ft)


def _check_marker_type(model_class: type, descriptor: FieldDescriptor) -> None:
    match descriptor.marker:
        case RandomString():
            value_type: type = str
        case RandomInt():
            value_type = int
        case _:
            return

    if not _accepts(descriptor.type, value_type):
        raise InvalidArgument(
            f'Field "{model_class.__qualname__}.{descriptor.name}" is declared as {descriptor.type!r} '
            f"but {type(descriptor.marker).__name__} produces {value_type.__name__}."
        )


@functools.cache
def describe(model_class: type) -> tuple[FieldDescriptor, ...]:
    """Build the field table of a type.

    Only fields declared directly on ``model_class`` are listed, in
    declaration order. The result is cached per type.

    Raises ``MarkerConflict`` when a field carries more than one marker,
    ``InvalidArgument`` when a marker does not produce the declared field
    type and ``NameError`` when an annotation cannot be resolved.
    """
    hints = typing.get_type_hints(model_class, include_extras=True)
    descriptors: list[FieldDescriptor] = []

    for name in _own_field_names(model_class):
        field_type = hints[name]
        if _is_class_var(field_type):
            continue

        base_type, metadata = _split_annotated(field_type)
        descriptor = FieldDescriptor(
            name=name,
            type=base_type,
            marker=_find_marker(model_class, name, metadata),
            setter=_make_setter(name),
        )
        _check_marker_type(model_class, descriptor)
        descriptors.append(descriptor)

    logger.debug(
        "Described %s: %d field(s), %d marked.",
        model_class.__qualname__,
        len(descriptors),
        sum(1 for descriptor in descriptors if descriptor.marker is not None),
    )
    return tuple(descriptors)
