import pytest

from maybe import Maybe, Option


def test_maybe_has_exactly_some_and_none() -> None:
    assert list(Maybe) == [Maybe.SOME, Maybe.NONE]


def test_maybe_members_are_distinct() -> None:
    assert Maybe.SOME != Maybe.NONE
    assert Maybe["SOME"] is Maybe.SOME
    assert Maybe["NONE"] is Maybe.NONE


@pytest.mark.parametrize(
    ("option", "expected"),
    [
        pytest.param(Option.some(1), Maybe.SOME, id="some"),
        pytest.param(Option[int].none(), Maybe.NONE, id="none"),
    ],
)
def test_option_is_returns_tag(option: Option[int], expected: Maybe) -> None:
    assert option.is_() is expected
    assert option.is_a(expected)
