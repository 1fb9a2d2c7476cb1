"""Entry points that turn one ``AnswerRecord`` into its derived records."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from atomgen.models import AnswerRecord, DerivedConfigBundle, DerivedFields

from .dependencies import resolve_dependencies
from .formatter import resolve_formatter_options
from .lint_staged import compose_lint_staged
from .manifest import compose_babel, compose_manifest, repository_name, split_list

if TYPE_CHECKING:
    from atomgen.licenses import LicenseRegistry


_WORD_RE = re.compile(r"[A-Z]+(?![a-z])|[A-Z]?[a-z]+|[0-9]+")


def class_name(name: str) -> str:
    """PascalCase identifier for a package name.

    ``"my-package"`` -> ``"MyPackage"``, ``"atom-HTTPClient"`` -> ``"AtomHttpClient"``.
    """
    return "".join(word.capitalize() for word in _WORD_RE.findall(name))


def lint_script(answers: AnswerRecord) -> str:
    if answers.has_styles:
        return "npm run lint:code && npm run lint:styles"
    return "npm run lint:code"


def derive_fields(answers: AnswerRecord, licenses: LicenseRegistry) -> DerivedFields:
    """Compute the template values that depend on *answers*.

    Raises:
        UnknownLicenseError: If ``answers.license`` is not in *licenses*.
    """
    info = licenses.lookup(answers.license)
    return DerivedFields(
        class_name=class_name(answers.name),
        repository_name=repository_name(answers.name),
        lint_script=lint_script(answers),
        license_name=info.name,
        license_url=info.url,
        license_text=info.license_text,
        workspace_openers=tuple(split_list(answers.workspace_opener_uris)),
        package_deps=tuple(split_list(answers.atom_dependencies)),
    )


def derive_bundle(answers: AnswerRecord) -> DerivedConfigBundle:
    """Derive every configuration document for *answers*.

    Errors from the individual composers propagate unchanged.
    """
    dependencies, dev_dependencies = resolve_dependencies(answers)
    return DerivedConfigBundle(
        manifest=compose_manifest(answers),
        babel_config=compose_babel(answers),
        formatter_options=resolve_formatter_options(answers.eslint_config),
        lint_staged=compose_lint_staged(answers),
        dependencies=dependencies,
        dev_dependencies=dev_dependencies,
    )
