__all__ = [
    "Maybe",
    "Option",
]

from maybe.option import Option
from maybe.tag import Maybe
