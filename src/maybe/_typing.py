__all__ = [
    "assert_never",
    "override",
]

import typing as t

# NOTE: this allows to use `assert_never` and `override` during runtime (when typing_extensions is not installed).
if t.TYPE_CHECKING:
    from typing_extensions import assert_never, override

else:

    def assert_never(*args: object, **kwargs: object) -> t.NoReturn:
        raise RuntimeError(args, kwargs)  # pragma: no cover

    def override(func: object) -> object:
        return func
