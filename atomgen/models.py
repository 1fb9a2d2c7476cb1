"""Pydantic v2 models for the atomgen answer record and derived documents.

Defines the enumerations for every closed choice the answers can make, the
immutable ``AnswerRecord`` that every derivation reads, and the two records the
derivation engine returns: ``DerivedFields`` (values threaded into templates)
and ``DerivedConfigBundle`` (the configuration documents).
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator
from pydantic.alias_generators import to_camel


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class Feature(str, Enum):
    """Package capabilities that can be enabled independently."""
    CODE = "code"
    GRAMMARS = "grammars"
    KEYMAPS = "keymaps"
    MENUS = "menus"
    SNIPPETS = "snippets"
    STYLES = "styles"


class Language(str, Enum):
    """Source languages supported for the ``code`` feature."""
    COFFEESCRIPT = "coffeescript"
    JAVASCRIPT = "javascript"
    TYPESCRIPT = "typescript"


class Bundler(str, Enum):
    """Build-tool families supported for the ``code`` feature."""
    ROLLUP = "rollup"
    WEBPACK = "webpack"


class PackageManager(str, Enum):
    NPM = "npm"
    YARN = "yarn"


class ActivationHook(str, Enum):
    """Activation hooks a package can subscribe to."""
    LOADED_SHELL_ENVIRONMENT = "core:loaded-shell-environment"
    ROOT_SCOPE_USED = "root-scope-used"
    GRAMMAR_USED = "grammar-used"


class CIProvider(str, Enum):
    """Hosted CI services a configuration file can be generated for."""
    BITBUCKET_PIPELINES = "bitbucketPipelines"
    CIRCLE_CI = "circleCI"
    GITHUB_ACTIONS = "githubActions"
    TRAVIS_CI = "travisCI"


METRICS_PACKAGE = "@atxm/metrics"
DEVELOPER_CONSOLE_PACKAGE = "@atxm/developer-console"

_TRACKING_ID_RE = re.compile(r"^UA-\d{4,}-\d+")


# ---------------------------------------------------------------------------
# Answer record
# ---------------------------------------------------------------------------

class AnswerRecord(BaseModel):
    """Every choice made about the package to scaffold.

    Instances are frozen; derivations return new records instead of mutating
    this one.  Keys may be given in snake_case or in the camelCase used by
    answers documents (``packageManager``, ``activationHooks``, ...).

    ``language`` and ``bundler`` stay plain strings: membership is checked by
    the composers that dispatch on them, so an unsupported value surfaces as
    ``UnsupportedLanguageError``/``UnsupportedBundlerError`` at derivation time.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    name: str = Field(..., min_length=1, description="Package identifier")
    description: str = Field(default="", description="Package description")
    author: str = Field(default="", description="GitHub handle of the author")
    private: bool = Field(default=False)
    license: str = Field(default="MIT", description="SPDX license identifier")
    features: tuple[Feature, ...] = Field(default=(Feature.CODE,))
    language: Optional[str] = Field(default=None)
    bundler: Optional[str] = Field(default=None)
    package_manager: PackageManager = Field(default=PackageManager.NPM)
    activation_commands: bool = Field(default=False)
    activation_hooks: tuple[ActivationHook, ...] = Field(default=())
    root_scope_used: Optional[str] = Field(default=None)
    grammar_used: Optional[str] = Field(default=None)
    workspace_opener_uris: Optional[str] = Field(
        default=None, alias="workspaceOpenerURIs", description="Comma-separated URIs"
    )
    atom_dependencies: Optional[str] = Field(
        default=None, description="Comma-separated Atom package names"
    )
    additional_dependencies: tuple[str, ...] = Field(default=())
    eslint_config: Optional[str] = Field(default=None)
    stylelint_config: Optional[str] = Field(default=None)
    babel_presets: tuple[str, ...] = Field(default=())
    ga_tracking_id: Optional[str] = Field(default=None)
    add_config: tuple[CIProvider, ...] = Field(default=())
    vscode_tasks: bool = Field(default=False)
    init_git: bool = Field(default=False)
    link_dev_package: bool = Field(default=False)
    open_in_editor: bool = Field(default=False)

    # -- Field rules -------------------------------------------------------

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str, info: ValidationInfo) -> str:
        value = value.strip()
        if not value:
            raise ValueError("package name must not be empty")
        context = info.context or {}
        if not context.get("allow_atom_prefix", True) and value.startswith("atom-"):
            raise ValueError("package name should not start with 'atom-'")
        return value

    @field_validator("description")
    @classmethod
    def _check_description(cls, value: str, info: ValidationInfo) -> str:
        context = info.context or {}
        if not value.strip() and not context.get("allow_empty_description", True):
            raise ValueError("package description must not be empty")
        return value

    @field_validator("language", "bundler")
    @classmethod
    def _normalize_choice(cls, value: Optional[str]) -> Optional[str]:
        """Lowercase so every composer sees the same spelling."""
        if value is None:
            return None
        return value.strip().lower()

    # -- Cross-field invariants --------------------------------------------

    @model_validator(mode="after")
    def _check_invariants(self) -> "AnswerRecord":
        has_code = self.has_code

        for field_name in ("language", "bundler"):
            value = getattr(self, field_name)
            if has_code and not value:
                raise ValueError(f"'{field_name}' is required when the code feature is selected")
            if not has_code and value is not None:
                raise ValueError(f"'{field_name}' is only allowed with the code feature")

        needs_eslint = has_code and self.language != Language.COFFEESCRIPT.value
        if needs_eslint and not self.eslint_config:
            raise ValueError("'eslint_config' is required for JavaScript and TypeScript code")
        if not needs_eslint and self.eslint_config is not None:
            raise ValueError("'eslint_config' is only allowed for JavaScript and TypeScript code")

        has_styles = self.has_styles
        if has_styles and not self.stylelint_config:
            raise ValueError("'stylelint_config' is required when the styles feature is selected")
        if not has_styles and self.stylelint_config is not None:
            raise ValueError("'stylelint_config' is only allowed with the styles feature")

        if ActivationHook.ROOT_SCOPE_USED in self.activation_hooks and not self.root_scope_used:
            raise ValueError("'root_scope_used' is required for the root-scope-used hook")
        if ActivationHook.GRAMMAR_USED in self.activation_hooks and not self.grammar_used:
            raise ValueError("'grammar_used' is required for the grammar-used hook")

        if METRICS_PACKAGE in self.additional_dependencies:
            if not self.ga_tracking_id or not _TRACKING_ID_RE.match(self.ga_tracking_id):
                raise ValueError("Unsupported tracking ID format (should be UA-XXXX-Y)")
        elif self.ga_tracking_id is not None:
            raise ValueError(f"'ga_tracking_id' is only allowed with {METRICS_PACKAGE}")

        return self

    # -- Convenience -------------------------------------------------------

    @property
    def has_code(self) -> bool:
        return Feature.CODE in self.features

    @property
    def has_styles(self) -> bool:
        return Feature.STYLES in self.features


# ---------------------------------------------------------------------------
# Derived records
# ---------------------------------------------------------------------------

class DerivedFields(BaseModel):
    """Values computed from an ``AnswerRecord`` for use in templates."""

    model_config = ConfigDict(frozen=True)

    class_name: str
    repository_name: str
    lint_script: str
    license_name: str
    license_url: str
    license_text: str
    workspace_openers: tuple[str, ...] = ()
    package_deps: tuple[str, ...] = ()


class DerivedConfigBundle(BaseModel):
    """The configuration documents derived from one ``AnswerRecord``."""

    model_config = ConfigDict(frozen=True)

    manifest: dict[str, Any]
    babel_config: Optional[dict[str, Any]] = None
    formatter_options: Optional[dict[str, Any]] = None
    lint_staged: dict[str, str] = Field(default_factory=dict)
    dependencies: list[str] = Field(default_factory=list)
    dev_dependencies: list[str] = Field(default_factory=list)
