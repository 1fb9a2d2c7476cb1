"""Template and output path resolution per source language.

Templates live either under a language directory (``typescript/src/main.j2``)
or under ``shared/``.  The existence probe is passed in by the caller so this
module never touches the filesystem itself.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import PurePosixPath

from atomgen.models import Language

from .errors import TemplateNotFoundError, UnsupportedLanguageError

SHARED_TEMPLATE_DIR = "shared"

_EXTENSIONS: dict[Language, str] = {
    Language.TYPESCRIPT: "ts",
    Language.JAVASCRIPT: "js",
    Language.COFFEESCRIPT: "coffee",
}


def as_language(language: str | None) -> Language:
    """Coerce a language name (any case) to ``Language``.

    Raises:
        UnsupportedLanguageError: If *language* is not a known language.
    """
    try:
        return Language((language or "").lower())
    except ValueError:
        raise UnsupportedLanguageError(language) from None


def language_extension(language: str | None) -> str:
    """Return the file extension (without dot) for *language*."""
    return _EXTENSIONS[as_language(language)]


def template_lookup_path(
    template_key: str,
    language: str,
    exists: Callable[[str], bool],
) -> str:
    """Return the template path to render for *template_key*.

    A template under the language directory wins over the shared one.

    Args:
        template_key: Path relative to a language directory, e.g. ``"src/main.j2"``.
        language: Selected language; used verbatim as the directory name.
        exists: Probe returning ``True`` if a template path exists.

    Raises:
        TemplateNotFoundError: If neither candidate exists.
    """
    language_path = str(PurePosixPath(language) / template_key)
    if exists(language_path):
        return language_path

    shared_path = str(PurePosixPath(SHARED_TEMPLATE_DIR) / template_key)
    if exists(shared_path):
        return shared_path

    raise TemplateNotFoundError(template_key)


def destination_path(template_key: str, language: str | None) -> str:
    """Map *template_key* to its output path with the language's extension.

    ``destination_path("src/main.j2", "typescript")`` -> ``"src/main.ts"``.
    """
    extension = language_extension(language)
    return str(PurePosixPath(template_key).with_suffix(f".{extension}"))
