"""Formatter (prettierx) options matching each ESLint style preset."""

from __future__ import annotations

from typing import Any

FORMATTER_PRESETS: dict[str, dict[str, Any]] = {
    "airbnb": {
        "arrowParens": "always",
        "bracketSpacing": False,
        "quoteProps": "as-needed",
        "semi": True,
        "singleQuote": True,
        "tabWidth": 2,
        "trailingComma": "all",
        "useTabs": False,
    },
    "google": {
        "arrowParens": "always",
        "bracketSpacing": False,
        "quoteProps": "consistent",
        "semi": False,
        "singleQuote": True,
        "tabWidth": 2,
        "useTabs": False,
    },
    "idiomatic": {
        "arrowParens": "always",
        "bracketSpacing": True,
        "singleQuote": True,
        "tabWidth": 2,
        "useTabs": False,
    },
    "standard": {
        "bracketSpacing": False,
        "semi": False,
        "singleQuote": True,
        "tabWidth": 2,
        "useTabs": False,
    },
    "semi": {
        "bracketSpacing": False,
        "semi": True,
        "singleQuote": True,
        "tabWidth": 2,
        "useTabs": False,
    },
    "xo": {
        "arrowParens": "as-needed",
        "bracketSpacing": False,
        "semi": True,
        "singleQuote": False,
        "tabWidth": 2,
        "useTabs": True,
    },
}


def resolve_formatter_options(preset: str | None) -> dict[str, Any] | None:
    """Return a copy of the formatter options for *preset*.

    ``None`` means the preset has no formatter counterpart and the tool's own
    defaults apply.
    """
    options = FORMATTER_PRESETS.get(preset or "")
    if options is None:
        return None
    return dict(options)
