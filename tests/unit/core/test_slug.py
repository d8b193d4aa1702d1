"""Unit tests for core/slug.py"""

import copy
import pickle

import pytest

from slug.core.options import Options, default_options, is_latin1
from slug.core.slug import Slug, generate, generate_with, parse, parse_with, to_string


@pytest.mark.parametrize("text,expected", [
    ("My article title!", "my-article-title"),
    ("   a   ", "a"),
    ("This library's great", "this-librarys-great"),
    ("Hello World", "hello-world"),
    ("my_file_name", "my-file-name"),
    ("multiple---hyphens", "multiple-hyphens"),
    ("Special! Ch@rs#", "special-ch-rs"),
    ("Crème Brûlée", "crème-brûlée"),
    ("Price: 100€", "price-100"),
])
def test_generate_basic(text, expected):
    """generate converts text to a lowercase dash-separated slug."""
    assert to_string(generate(text)) == expected


@pytest.mark.parametrize("text", ["", "   ", "¬¬¬{}¬¬¬", "!!!", "€€€", "'''"])
def test_generate_ungeneratable_returns_none(text):
    """Input with no surviving words gives None rather than raising."""
    assert generate(text) is None


def test_generate_with_latin1_options():
    """A Latin-1 filter without case or apostrophe handling keeps punctuation."""
    opts = Options(keep_if=is_latin1, lower_case=False, strip_apostrophes=False)
    assert to_string(generate_with(opts, "This is my article's title!")) == "This-is-my-article's-title!"


def test_generate_is_idempotent():
    """Regenerating from a generated slug reproduces it."""
    s = generate("  Some -- Messy_Title!! ")
    assert generate(to_string(s)) == s


def test_parse_accepts_existing_slug():
    """parse returns the slug for already well-formed input."""
    assert to_string(parse("my-article-title")) == "my-article-title"


@pytest.mark.parametrize("text", [
    "My-article",       # case change
    "my article",       # character substitution
    "-my-article",      # leading separator
    "my-article-",      # trailing separator
    "my--article",      # empty word
    "library's",        # apostrophe stripped
    "",
    "¬¬¬",
])
def test_parse_rejects_anything_generate_would_change(text):
    """parse never transforms; any repair generate would make is a rejection."""
    assert parse(text) is None


def test_parse_with_custom_separator():
    """parse_with validates against the given separator."""
    opts = default_options().replace(separator="_")
    assert to_string(parse_with(opts, "snake_case_slug")) == "snake_case_slug"
    assert parse_with(opts, "kebab-case-slug") is None


def test_empty_separator_concatenates_words():
    """An empty separator glues words together, and the result still parses."""
    opts = default_options().replace(separator="")
    s = generate_with(opts, "a b c")
    assert to_string(s) == "abc"
    assert parse_with(opts, "abc") == s
    assert generate_with(opts, to_string(s)) == s


def test_slug_cannot_be_constructed_directly():
    """Only generate/parse/truncate build slugs."""
    with pytest.raises(TypeError):
        Slug("not-checked")


def test_slug_is_immutable():
    """Assigning to a slug raises."""
    s = generate("hello")
    with pytest.raises(AttributeError):
        s._value = "other"


def test_str_and_repr():
    """str unwraps losslessly; repr names the type."""
    s = generate("Hello World")
    assert str(s) == "hello-world"
    assert repr(s) == "Slug('hello-world')"
    assert len(s) == 11


def test_equality_and_hash_follow_string():
    """Slugs compare and hash by their string value."""
    a, b = generate("Hello World"), parse("hello-world")
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1
    assert a != generate("goodbye")
    assert a != "hello-world"


def test_ordering_is_lexicographic():
    """Ordering matches the underlying strings."""
    slugs = [generate(t) for t in ["beta", "alpha", "alpha two", "gamma"]]
    assert [str(s) for s in sorted(slugs)] == ["alpha", "alpha-two", "beta", "gamma"]
    assert generate("a") < generate("b") <= generate("b")


def test_concatenation_has_no_seam_separator():
    """a + b joins the raw strings and stays a valid slug."""
    a, b = generate("my article"), generate("part two")
    joined = a + b
    assert to_string(joined) == "my-articlepart-two"
    assert parse(to_string(a) + to_string(b)) == joined


def test_concatenation_with_non_slug_is_unsupported():
    """Adding a plain string is a TypeError."""
    with pytest.raises(TypeError):
        generate("abc") + "def"


def test_copy_and_pickle_preserve_value():
    """Copies and pickles round-trip to an equal slug."""
    s = generate("Copy Me")
    assert copy.copy(s) == s
    assert copy.deepcopy(s) == s
    assert pickle.loads(pickle.dumps(s)) == s
