import typing

from wintergreen import builder
from wintergreen.builder import BuildResult
from wintergreen.config import global_config
from wintergreen.fields import FieldDescriptor, describe
from wintergreen.randomizer import Randomizer


def _model_class_from(bases: tuple[type, ...], attrs: typing.Mapping[str, object]) -> type:
    try:
        orig_bases = attrs.get("__orig_bases__")
        base_args = getattr(orig_bases[0], "__args__", None)  # type: ignore
        args_tuple = typing.cast(tuple[object, ...], base_args)
        model_class = args_tuple[0]
    except (KeyError, IndexError, TypeError):
        pass
    else:
        if isinstance(model_class, type):
            return model_class

    for base in bases:
        inherited = getattr(base, "__model_class__", None)
        if isinstance(inherited, type):
            return inherited

    raise TypeError("Factory subclasses must be parametrized with a model class, e.g. Factory[User].")


class FactoryMeta(type):
    def __new__(
        cls,
        name: str,
        bases: tuple[type, ...],
        attrs: dict[str, object],
    ) -> type:
        if not any(isinstance(base, FactoryMeta) for base in bases):
            return super().__new__(cls, name, bases, attrs)

        model_class = _model_class_from(bases, attrs)

        locale = typing.cast(str, attrs.get("__locale__", global_config.locale))
        seed = typing.cast(int | None, attrs.get("__seed__", global_config.seed))

        attrs.update(
            {
                "_fields": describe(model_class),
                "__model_class__": model_class,
                "__randomizer__": Randomizer.seeded(seed, locale),
            }
        )
        return super().__new__(cls, name, bases, attrs)


class Factory[T](metaclass=FactoryMeta):
    """Declarative builder bound to one model class.

    Example::

        class UserFactory(Factory[User]):
            __seed__ = 42

        user = UserFactory.build(name="Ada")
    """

    __model_class__: type[T]
    __locale__: str
    __seed__: int
    __randomizer__: Randomizer

    _fields: typing.ClassVar[tuple[FieldDescriptor, ...]]

    @classmethod
    def build_result(cls) -> BuildResult[T]:
        return builder.build(cls.__model_class__, randomizer=cls.__randomizer__)

    @classmethod
    def build(cls, **overrides: object) -> T:
        instance = cls.build_result().unwrap()
        fields = {field.name: field for field in cls._fields}
        for attr_name, attr_value in overrides.items():
            if attr_name in fields:
                fields[attr_name].set(instance, attr_value)
            else:
                object.__setattr__(instance, attr_name, attr_value)

        return instance

    @classmethod
    def build_batch(cls, count: int, **overrides: object) -> list[T]:
        return [cls.build(**overrides) for _ in range(count)]
