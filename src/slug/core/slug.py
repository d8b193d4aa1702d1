"""Validated slug type and its smart constructors: generate, parse, truncate"""

import logging
from functools import total_ordering
from typing import Any, Optional, Union

from pydantic import GetCoreSchemaHandler, TypeAdapter
from pydantic_core import core_schema

from slug.core import pipeline
from slug.core.options import Options, default_options


logger = logging.getLogger(__name__)

_CONSTRUCT = object()   # guards Slug.__init__; only this module can build a Slug


@total_ordering
class Slug:
    """A non-empty, separator-joined, case-normalized token.

    Instances come only from generate(), parse(), truncate() and concatenation,
    so every live value already satisfies the slug invariants.
    """
    __slots__ = ("_value",)

    def __init__(self, value: str, _token: object = None):
        if _token is not _CONSTRUCT:
            raise TypeError("Slug cannot be constructed directly; use generate(), parse() or truncate()")
        object.__setattr__(self, "_value", value)

    def __setattr__(self, name, value):
        raise AttributeError("Slug is immutable")

    def __delattr__(self, name):
        raise AttributeError("Slug is immutable")

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"Slug({self._value!r})"

    def __len__(self) -> int:
        return len(self._value)

    def __eq__(self, other):
        if not isinstance(other, Slug):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other):
        if not isinstance(other, Slug):
            return NotImplemented
        return self._value < other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __add__(self, other):
        """Glue two slugs end to end; no separator is inserted at the seam."""
        if not isinstance(other, Slug):
            return NotImplemented
        return _wrap(self._value + other._value)

    def __reduce__(self):
        return _wrap, (self._value,)

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        """Validate strings through parse() with default options; serialize as the plain string."""
        from_str = core_schema.no_info_after_validator_function(_decode, core_schema.str_schema())
        return core_schema.json_or_python_schema(
            json_schema=from_str,
            python_schema=core_schema.union_schema([core_schema.is_instance_schema(cls), from_str]),
            serialization=core_schema.plain_serializer_function_ser_schema(to_string),
        )


def _wrap(value: str) -> Slug:
    return Slug(value, _CONSTRUCT)


def _decode(value: str) -> Slug:
    s = parse(value)
    if s is None:
        raise ValueError(f"not a valid slug: {value!r}")
    return s


def generate_with(options: Options, text: str) -> Optional[Slug]:
    """Turn arbitrary text into a slug; None if nothing usable remains."""
    value = pipeline.run(text, options)
    if value is None:
        logger.debug("No words left after filtering %r", text)
        return None
    return _wrap(value)


def generate(text: str) -> Optional[Slug]:
    return generate_with(default_options(), text)


def parse_with(options: Options, text: str) -> Optional[Slug]:
    """Accept text only if it is already exactly the slug generate_with would produce."""
    s = generate_with(options, text)
    if s is None or s._value != text:
        logger.debug("Rejected %r: not already a slug", text)
        return None
    return s


def parse(text: str) -> Optional[Slug]:
    return parse_with(default_options(), text)


def to_string(slug: Slug) -> str:
    return slug._value


def truncate(max_len: int, slug: Slug, options: Optional[Options] = None) -> Optional[Slug]:
    """Shorten slug to at most max_len characters, dropping a dangling separator.

    The cut prefix is regenerated (not parsed), so the result is max_len or
    max_len - 1 characters long. None for max_len < 1 or if regeneration
    finds no words. Regeneration uses default options unless given others.
    """
    if max_len < 1:
        logger.debug("Invalid truncation length %d", max_len)
        return None
    if max_len >= len(slug._value):
        return slug
    return generate_with(options or default_options(), slug._value[:max_len])


_ADAPTER = TypeAdapter(Slug)


def encode_json(slug: Slug) -> str:
    """Encode a slug as a JSON string value."""
    return _ADAPTER.dump_json(slug).decode("utf-8")


def decode_json(data: Union[str, bytes]) -> Slug:
    """Decode a JSON string value; raises pydantic.ValidationError if it isn't a valid slug."""
    return _ADAPTER.validate_json(data)
