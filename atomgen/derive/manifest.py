"""Package manifest (``package.json``) and Babel config composition.

``compose_manifest`` returns an ordered mapping ready for JSON serialisation.
The ``dependencies``/``devDependencies`` sections are always empty: the
resolved lists go to the package manager, which records them in the manifest
when it installs them.
"""

from __future__ import annotations

from typing import Any

from atomgen.models import ActivationHook, AnswerRecord, Language

from . import scripts
from .lint_staged import compose_lint_staged

INITIAL_VERSION = "0.0.0"
MAIN_ENTRY = "./lib/main"
ATOM_ENGINE_RANGE = ">=1.0.0 <2.0.0"
REPOSITORY_PREFIX = "atom-"

GITHUB_URL = "https://github.com/{author}/{repository}"
PACKAGE_HOMEPAGE_URL = "https://atom.io/packages/{name}"

ROOT_SCOPE_SUFFIX = ActivationHook.ROOT_SCOPE_USED.value
GRAMMAR_SUFFIX = ActivationHook.GRAMMAR_USED.value

BABEL_ELECTRON_TARGET = "2.0.0"


# ---------------------------------------------------------------------------
# Small derivations shared with the templates
# ---------------------------------------------------------------------------


def repository_name(name: str) -> str:
    """Repository name for a package: ``name`` with the ``atom-`` prefix."""
    return name if name.startswith(REPOSITORY_PREFIX) else f"{REPOSITORY_PREFIX}{name}"


def split_list(value: str | None) -> list[str]:
    """Split a comma-separated answer into trimmed, non-empty items."""
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


def normalize_hook(value: str, suffix: str) -> str:
    """Append ``:{suffix}`` to *value* unless it already ends with it."""
    marker = f":{suffix}"
    return value if value.endswith(marker) else f"{value}{marker}"


def activation_hooks(answers: AnswerRecord) -> list[str]:
    """Hook names for the manifest, in the order they were selected."""
    hooks: list[str] = []
    for hook in answers.activation_hooks:
        if hook == ActivationHook.LOADED_SHELL_ENVIRONMENT:
            hooks.append(ActivationHook.LOADED_SHELL_ENVIRONMENT.value)
        elif hook == ActivationHook.ROOT_SCOPE_USED:
            hooks.append(normalize_hook(answers.root_scope_used or "", ROOT_SCOPE_SUFFIX))
        elif hook == ActivationHook.GRAMMAR_USED:
            hooks.append(normalize_hook(answers.grammar_used or "", GRAMMAR_SUFFIX))
        else:
            raise ValueError(f"Unhandled activation hook: {hook!r}")
    return hooks


def activation_commands(answers: AnswerRecord) -> dict[str, list[str]]:
    if answers.has_code and answers.activation_commands:
        return {"atom-workspace": [f"{answers.name}:hello-world"]}
    return {}


# ---------------------------------------------------------------------------
# Documents
# ---------------------------------------------------------------------------


def compose_manifest(answers: AnswerRecord) -> dict[str, Any]:
    """Assemble the package manifest for *answers*.

    Raises:
        UnsupportedBundlerError: From the build/watch scripts.
        UnsupportedLanguageError: From the code lint script or lint-staged map.
    """
    has_code = answers.has_code
    repository = GITHUB_URL.format(
        author=answers.author, repository=repository_name(answers.name)
    )

    manifest: dict[str, Any] = {
        "name": answers.name,
        "version": INITIAL_VERSION,
        "description": answers.description,
        "license": answers.license,
        "private": answers.private,
    }
    if has_code:
        manifest["main"] = MAIN_ENTRY

    manifest["scripts"] = {
        "analyze": scripts.analyze_script(answers),
        "build": scripts.build_script(answers),
        "dev": "npm run start",
        "lint:code": scripts.lint_code_script(answers),
        "lint:styles": scripts.lint_styles_script(answers),
        "lint": scripts.LINT_ALL_SCRIPT,
        "postinstall": "husky install",
        "prepublishOnly": "npm run build",
        "start": scripts.watch_script(answers),
        "test": scripts.unit_test_script(answers),
    }
    manifest["keywords"] = []
    manifest["repository"] = {"type": "git", "url": repository}
    manifest["homepage"] = PACKAGE_HOMEPAGE_URL.format(name=answers.name)
    manifest["bugs"] = {"url": f"{repository}/issues"}
    manifest["engines"] = {"atom": ATOM_ENGINE_RANGE}
    manifest["activationCommands"] = activation_commands(answers)
    manifest["activationHooks"] = activation_hooks(answers) if has_code else []
    manifest["workspaceOpeners"] = split_list(answers.workspace_opener_uris) if has_code else []
    manifest["package-deps"] = split_list(answers.atom_dependencies) if has_code else []
    manifest["dependencies"] = {}
    manifest["devDependencies"] = {}
    manifest["lint-staged"] = compose_lint_staged(answers)
    return manifest


def compose_babel(answers: AnswerRecord) -> dict[str, Any] | None:
    """Babel config for JavaScript/TypeScript code, ``None`` otherwise."""
    if not answers.has_code or answers.language not in (
        Language.JAVASCRIPT.value,
        Language.TYPESCRIPT.value,
    ):
        return None
    return {
        "plugins": ["@babel/plugin-proposal-export-namespace-from"],
        "presets": [
            [
                "@babel/preset-env",
                {
                    "targets": {"electron": BABEL_ELECTRON_TARGET},
                    "corejs": "3",
                    "useBuiltIns": "entry",
                },
            ],
            *answers.babel_presets,
        ],
    }
