"""Terminal message helpers for the GAKUMU CLI.

Small helpers for rendering user-visible lines with sensible emoji→ASCII
fallbacks. Messages write to stderr so stdout keeps only the status table and
endpoint summary.
"""

import click


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on stderr."""
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def _glyph(emoji: str, fallback: str) -> str:
    return emoji if _supports_character(emoji) else fallback


def caution_glyph() -> str:
    """Return "⚠️" when stderr can encode it, otherwise "[!]"."""
    return _glyph("⚠️", "[!]")  # pragma: no mutate


def success_glyph() -> str:
    """Return "✅" when stderr can encode it, otherwise "[OK]"."""
    return _glyph("✅", "[OK]")  # pragma: no mutate


def error_glyph() -> str:
    """Return "❌" when stderr can encode it, otherwise "[X]"."""
    return _glyph("❌", "[X]")  # pragma: no mutate


def wait_glyph() -> str:
    """Return "⏳" when stderr can encode it, otherwise "[..]"."""
    return _glyph("⏳", "[..]")  # pragma: no mutate


def info(msg: str, bold: bool = False) -> None:
    """Emit a green progress line to **stderr**.

    Example:
        ``Building images...``
    """
    click.secho(msg, fg="green", bold=bold, err=True)


def notice(msg: str) -> None:
    """Emit a yellow line with an hourglass glyph to **stderr**.

    Example:
        ``⏳  Waiting for services to become ready: api, db``
    """
    g = wait_glyph()
    click.secho(f"{g}  {msg}", fg="yellow", err=True)


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to **stderr** with a caution glyph.

    Example:
        ``⚠️  .env not found; created it from .env.example.``
    """
    g = caution_glyph()
    click.secho(f"{g}  {msg}", fg="yellow", bold=True, err=True)


def success(msg: str) -> None:
    """Emit a green, bold success line to **stderr** with a success glyph.

    Example:
        ``✅  Setup complete!``
    """
    g = success_glyph()
    click.secho(f"{g}  {msg}", fg="green", bold=True, err=True)


def error(msg: str) -> None:
    """Emit a red, bold error line to **stderr** with an error glyph.

    Example:
        ``❌  Container runtime 'docker' was not found on PATH.``
    """
    g = error_glyph()
    click.secho(f"{g}  {msg}", fg="red", bold=True, err=True)
