"""Options controlling how text is turned into a slug"""

import dataclasses
import logging
from dataclasses import dataclass
from typing import Callable


logger = logging.getLogger(__name__)

LATIN1_MAX = 0xFF


def is_latin1(ch: str) -> bool:
    """True if the code point falls in the Latin-1 range (U+0000..U+00FF)."""
    return ord(ch) <= LATIN1_MAX


def is_alphanum_latin1(ch: str) -> bool:
    """Default filter: alphanumeric and Latin-1."""
    return ch.isalnum() and is_latin1(ch)


@dataclass(frozen=True)
class Options:
    """Pipeline configuration; build variants with replace() rather than mutation."""
    separator:         str = "-"
    keep_if:           Callable[[str], bool] = is_alphanum_latin1
    lower_case:        bool = True
    strip_apostrophes: bool = True

    def __post_init__(self):
        # Undefined configuration: the separator can't be told apart from word content.
        if any(self.keep_if(ch) for ch in self.separator):
            logger.warning("Separator %r contains characters kept as word content", self.separator)

    def replace(self, **changes) -> "Options":
        """Return a copy with the given fields overridden."""
        return dataclasses.replace(self, **changes)


DEFAULT_OPTIONS = Options()


def default_options() -> Options:
    return DEFAULT_OPTIONS
