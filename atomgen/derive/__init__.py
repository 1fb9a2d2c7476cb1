"""Configuration derivation engine.

Pure functions from an ``AnswerRecord`` to the documents of a scaffolded Atom
package.  Nothing here touches the filesystem, prints, or keeps state.

Quick usage::

    from atomgen.derive import derive_bundle
    from atomgen.models import AnswerRecord

    answers = AnswerRecord(
        name="my-package",
        language="typescript",
        bundler="rollup",
        eslint_config="airbnb",
    )
    bundle = derive_bundle(answers)
    print(bundle.manifest["scripts"]["build"])
"""

from atomgen.derive.dependencies import resolve_dependencies
from atomgen.derive.errors import (
    DerivationError,
    TemplateNotFoundError,
    UnknownLicenseError,
    UnsupportedBundlerError,
    UnsupportedLanguageError,
)
from atomgen.derive.fields import class_name, derive_bundle, derive_fields
from atomgen.derive.formatter import resolve_formatter_options
from atomgen.derive.lint_staged import compose_lint_staged
from atomgen.derive.manifest import activation_hooks, compose_babel, compose_manifest
from atomgen.derive.paths import destination_path, language_extension, template_lookup_path
from atomgen.derive.scripts import build_script, watch_script

__all__ = [
    "DerivationError",
    "TemplateNotFoundError",
    "UnknownLicenseError",
    "UnsupportedBundlerError",
    "UnsupportedLanguageError",
    "activation_hooks",
    "build_script",
    "class_name",
    "compose_babel",
    "compose_lint_staged",
    "compose_manifest",
    "derive_bundle",
    "derive_fields",
    "destination_path",
    "language_extension",
    "resolve_dependencies",
    "resolve_formatter_options",
    "template_lookup_path",
    "watch_script",
]
