"""CLI command implementations"""

from typing import Annotated, Optional

import typer

from slug.config import load_config
from slug.core.options import Options
from slug.core.slug import generate_with, parse_with, to_string, truncate
from slug.logging import get_logger


SeparatorOpt = Annotated[Optional[str], typer.Option("--separator", help="String inserted between words")]
KeepOpt = Annotated[
    Optional[str],
    typer.Option("--keep", help="Character filter: alphanum or latin1 (latin1 also keeps the default separator as word content)"),
]
LowerOpt = Annotated[Optional[bool], typer.Option("--lower-case/--preserve-case", help="Lower-case input first")]
ApostropheOpt = Annotated[
    Optional[bool],
    typer.Option("--strip-apostrophes/--keep-apostrophes", help="Delete apostrophes before processing"),
]
VerboseOpt = Annotated[bool, typer.Option("--verbose", "-v", help="Log debug detail to stderr")]


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _options(separator, keep, lower_case, strip_apostrophes, verbose) -> Options:
    """Load config with CLI overrides and standard error handling."""
    get_logger(verbose=verbose)
    try:
        settings = load_config(overrides={
            "separator": separator, "keep": keep,
            "lower_case": lower_case, "strip_apostrophes": strip_apostrophes,
        })
    except ValueError as e:
        _fail("Invalid configuration", e)
    return settings.to_options()


def generate_cmd(
    text: Annotated[str, typer.Argument(help="Text to turn into a slug")],
    separator: SeparatorOpt = None,
    keep: KeepOpt = None,
    lower_case: LowerOpt = None,
    strip_apostrophes: ApostropheOpt = None,
    verbose: VerboseOpt = False,
    ):
    """Print the slug generated from TEXT."""
    options = _options(separator, keep, lower_case, strip_apostrophes, verbose)
    s = generate_with(options, text)
    if s is None:
        _fail(f"cannot generate a slug from {text!r}")
    typer.echo(to_string(s))


def parse_cmd(
    text: Annotated[str, typer.Argument(help="String to validate as a slug")],
    separator: SeparatorOpt = None,
    keep: KeepOpt = None,
    lower_case: LowerOpt = None,
    strip_apostrophes: ApostropheOpt = None,
    verbose: VerboseOpt = False,
    ):
    """Print TEXT if it is already a valid slug; exit 1 otherwise."""
    options = _options(separator, keep, lower_case, strip_apostrophes, verbose)
    s = parse_with(options, text)
    if s is None:
        _fail(f"{text!r} is not a valid slug")
    typer.echo(to_string(s))


def truncate_cmd(
    max_len: Annotated[int, typer.Argument(help="Maximum length of the result")],
    text: Annotated[str, typer.Argument(help="Existing slug to shorten")],
    separator: SeparatorOpt = None,
    keep: KeepOpt = None,
    lower_case: LowerOpt = None,
    strip_apostrophes: ApostropheOpt = None,
    verbose: VerboseOpt = False,
    ):
    """Shorten a valid slug to at most MAX_LEN characters."""
    options = _options(separator, keep, lower_case, strip_apostrophes, verbose)
    s = parse_with(options, text)
    if s is None:
        _fail(f"{text!r} is not a valid slug")
    short = truncate(max_len, s, options)
    if short is None:
        _fail(f"cannot truncate {text!r} to length {max_len}")
    typer.echo(to_string(short))
