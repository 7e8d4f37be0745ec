import dataclasses
import typing

import pytest

from tests.assets import Account, Child, Credentials, Dice, Point
from wintergreen import ConstructionFailure, Failure, MarkerConflict, RandomInt, RandomString, Success
from wintergreen.factories import Factory


class TestFactory:
    def test_infers_model_class(self) -> None:
        class _AccountFactory(Factory[Account]): ...

        assert _AccountFactory.__model_class__ is Account

    def test_describes_model_at_definition(self) -> None:
        class _CredentialsFactory(Factory[Credentials]): ...

        assert [field.name for field in _CredentialsFactory._fields] == ["_token", "pin", "label"]

    def test_build(self) -> None:
        class _AccountFactory(Factory[Account]): ...

        account = _AccountFactory.build()
        assert isinstance(account, Account)
        assert len(account.username) == 8
        assert account.nickname == "anonymous"

    def test_build_with_overrides(self) -> None:
        class _AccountFactory(Factory[Account]): ...

        account = _AccountFactory.build(username="ada", nickname="Ada")
        assert account.username == "ada"
        assert account.nickname == "Ada"

    def test_build_with_override_for_undeclared_attribute(self) -> None:
        class _DiceFactory(Factory[Dice]): ...

        dice = _DiceFactory.build(color="red")
        assert dice.color == "red"  # type: ignore[attr-defined]

    def test_build_batch(self) -> None:
        class _DiceFactory(Factory[Dice]): ...

        results = _DiceFactory.build_batch(3)
        assert len(results) == 3
        assert all(1 <= dice.roll <= 10 for dice in results)

    def test_build_batch_with_overrides(self) -> None:
        class _AccountFactory(Factory[Account]): ...

        results = _AccountFactory.build_batch(3, nickname="bot")
        assert all(account.nickname == "bot" for account in results)

    def test_build_result(self) -> None:
        class _AccountFactory(Factory[Account]): ...

        assert isinstance(_AccountFactory.build_result(), Success)

    def test_same_seed_gives_same_instances(self) -> None:
        class _FirstFactory(Factory[Credentials]):
            __seed__ = 3

        class _SecondFactory(Factory[Credentials]):
            __seed__ = 3

        first = _FirstFactory.build()
        second = _SecondFactory.build()
        assert (first.token, first.pin) == (second.token, second.pin)

    def test_locale_is_applied(self) -> None:
        class _AccountFactory(Factory[Account]):
            __locale__ = "de"

        assert len(_AccountFactory.build().username) == 8

    def test_subclass_inherits_model_class(self) -> None:
        class _ChildFactory(Factory[Child]): ...

        class _SpecialChildFactory(_ChildFactory):
            __seed__ = 10

        assert _SpecialChildFactory.__model_class__ is Child
        child = _SpecialChildFactory.build()
        assert child.code == ""
        assert 1 <= child.level <= 3


class TestFactoryErrors:
    def test_requires_model_class(self) -> None:
        with pytest.raises(TypeError, match="must be parametrized"):

            class _BareFactory(Factory): ...

    def test_rejects_conflicting_markers_at_definition(self) -> None:
        @dataclasses.dataclass
        class _Ambiguous:
            value: typing.Annotated[str, RandomString(3), RandomInt(1, 2)] = ""

        with pytest.raises(MarkerConflict):

            class _AmbiguousFactory(Factory[_Ambiguous]): ...

    def test_build_raises_construction_failure(self) -> None:
        class _PointFactory(Factory[Point]): ...

        with pytest.raises(ConstructionFailure, match="default construction failed"):
            _PointFactory.build()

    def test_build_result_returns_failure(self) -> None:
        class _PointFactory(Factory[Point]): ...

        assert isinstance(_PointFactory.build_result(), Failure)
