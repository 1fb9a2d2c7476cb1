"""Errors raised by the configuration derivation functions."""

from __future__ import annotations


class DerivationError(Exception):
    """Base class for errors caused by answers the derivation cannot handle."""


class UnsupportedLanguageError(DerivationError):
    """Raised when a language has no extension or template mapping."""

    def __init__(self, language: str | None) -> None:
        self.language = language
        super().__init__(f"Unsupported language selected: {language!r}")


class UnsupportedBundlerError(DerivationError):
    """Raised when a bundler has no build or watch command."""

    def __init__(self, bundler: str | None) -> None:
        self.bundler = bundler
        super().__init__(f"Unsupported bundler '{bundler}'")


class TemplateNotFoundError(DerivationError):
    """Raised when neither a language-specific nor a shared template exists."""

    def __init__(self, template: str) -> None:
        self.template = template
        super().__init__(f"No template file found for {template}")


class UnknownLicenseError(DerivationError):
    """Raised when a license identifier is missing from the registry."""

    def __init__(self, identifier: str) -> None:
        self.identifier = identifier
        super().__init__(f"Unknown license identifier: {identifier}")
