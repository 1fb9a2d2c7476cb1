"""Unit tests for the answer record and derived models (atomgen.models).

Tests cover:
- Defaults and camelCase aliases
- Name and description rules with and without a validation context
- Presence invariants (language/bundler, eslint/stylelint config, hooks, tracking id)
- Immutability
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from atomgen.models import (
    ActivationHook,
    AnswerRecord,
    CIProvider,
    DerivedFields,
    Feature,
    PackageManager,
)


pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Defaults & aliases
# ---------------------------------------------------------------------------


class TestDefaults:
    def test_minimal_code_package(self):
        answers = AnswerRecord(
            name="minimal", language="javascript", bundler="rollup", eslint_config="xo"
        )
        assert answers.features == (Feature.CODE,)
        assert answers.package_manager is PackageManager.NPM
        assert answers.license == "MIT"
        assert answers.activation_hooks == ()
        assert answers.has_code is True
        assert answers.has_styles is False

    def test_camel_case_document(self):
        answers = AnswerRecord.model_validate({
            "name": "camel",
            "features": ["code", "styles"],
            "language": "typescript",
            "bundler": "webpack",
            "packageManager": "yarn",
            "eslintConfig": "google",
            "stylelintConfig": "recommended",
            "activationHooks": ["core:loaded-shell-environment"],
            "workspaceOpenerURIs": "atom://camel",
            "atomDependencies": "linter",
            "addConfig": ["githubActions", "travisCI"],
            "vscodeTasks": True,
        })
        assert answers.package_manager is PackageManager.YARN
        assert answers.eslint_config == "google"
        assert answers.activation_hooks == (ActivationHook.LOADED_SHELL_ENVIRONMENT,)
        assert answers.workspace_opener_uris == "atom://camel"
        assert answers.add_config == (CIProvider.GITHUB_ACTIONS, CIProvider.TRAVIS_CI)
        assert answers.vscode_tasks is True

    def test_frozen(self, js_answers):
        with pytest.raises(ValidationError):
            js_answers.name = "other"

    def test_unknown_feature_rejected(self, answers_factory):
        with pytest.raises(ValidationError):
            answers_factory(features=["code", "themes"])


# ---------------------------------------------------------------------------
# Name & description
# ---------------------------------------------------------------------------


class TestNameAndDescription:
    def test_name_stripped(self, answers_factory):
        assert answers_factory(name="  spaced  ").name == "spaced"

    def test_blank_name_rejected(self, answers_factory):
        with pytest.raises(ValidationError):
            answers_factory(name="   ")

    def test_atom_prefix_allowed_by_default(self, answers_factory):
        assert answers_factory(name="atom-thing").name == "atom-thing"

    def test_atom_prefix_rejected_by_context(self, answers_factory):
        data = answers_factory(name="atom-thing").model_dump()
        with pytest.raises(ValidationError, match="should not start with 'atom-'"):
            AnswerRecord.model_validate(data, context={"allow_atom_prefix": False})

    def test_empty_description_allowed_without_context(self, answers_factory):
        assert answers_factory(description="").description == ""

    def test_empty_description_rejected_by_context(self, js_answers):
        data = {**js_answers.model_dump(), "description": ""}
        with pytest.raises(ValidationError, match="description must not be empty"):
            AnswerRecord.model_validate(data, context={"allow_empty_description": False})


# ---------------------------------------------------------------------------
# Invariants
# ---------------------------------------------------------------------------


class TestInvariants:
    def test_code_requires_language(self, answers_factory):
        with pytest.raises(ValidationError, match="'language' is required"):
            answers_factory(language=None)

    def test_code_requires_bundler(self, answers_factory):
        with pytest.raises(ValidationError, match="'bundler' is required"):
            answers_factory(bundler=None)

    def test_language_without_code_rejected(self, answers_factory):
        with pytest.raises(ValidationError, match="only allowed with the code feature"):
            answers_factory(features=["menus"], bundler=None, eslint_config=None)

    def test_eslint_config_required_for_javascript(self, answers_factory):
        with pytest.raises(ValidationError, match="'eslint_config' is required"):
            answers_factory(eslint_config=None)

    def test_eslint_config_rejected_for_coffeescript(self, answers_factory):
        with pytest.raises(ValidationError, match="'eslint_config' is only allowed"):
            answers_factory(language="coffeescript")

    def test_stylelint_config_required_for_styles(self, answers_factory):
        with pytest.raises(ValidationError, match="'stylelint_config' is required"):
            answers_factory(features=["code", "styles"])

    def test_stylelint_config_rejected_without_styles(self, answers_factory):
        with pytest.raises(ValidationError, match="'stylelint_config' is only allowed"):
            answers_factory(stylelint_config="standard")

    @pytest.mark.parametrize(
        "hook, field",
        [("root-scope-used", "root_scope_used"), ("grammar-used", "grammar_used")],
    )
    def test_hook_requires_value(self, answers_factory, hook, field):
        with pytest.raises(ValidationError, match=field):
            answers_factory(activation_hooks=[hook])

    def test_metrics_requires_tracking_id(self, answers_factory):
        with pytest.raises(ValidationError, match="Unsupported tracking ID format"):
            answers_factory(additional_dependencies=["@atxm/metrics"])

    @pytest.mark.parametrize("tracking_id", ["UA-123-1", "G-ABCDEF", "UA-1234-"])
    def test_malformed_tracking_id(self, answers_factory, tracking_id):
        with pytest.raises(ValidationError):
            answers_factory(additional_dependencies=["@atxm/metrics"], ga_tracking_id=tracking_id)

    def test_valid_tracking_id(self, answers_factory):
        answers = answers_factory(
            additional_dependencies=["@atxm/metrics"], ga_tracking_id="UA-12345-6"
        )
        assert answers.ga_tracking_id == "UA-12345-6"

    def test_tracking_id_without_metrics_rejected(self, answers_factory):
        with pytest.raises(ValidationError):
            answers_factory(ga_tracking_id="UA-12345-6")

    def test_invalid_bundler_string_accepted(self, answers_factory):
        # Rejected later, by the composers that dispatch on it.
        assert answers_factory(bundler="grunt").bundler == "grunt"

    def test_language_and_bundler_lowercased(self, answers_factory):
        answers = answers_factory(language=" CoffeeScript ", bundler="Rollup", eslint_config=None)
        assert answers.language == "coffeescript"
        assert answers.bundler == "rollup"

    def test_mixed_case_coffeescript_rejects_eslint_config(self, answers_factory):
        with pytest.raises(ValidationError, match="'eslint_config' is only allowed"):
            answers_factory(language="CoffeeScript", bundler="rollup", eslint_config="airbnb")


class TestDerivedFields:
    def test_frozen(self):
        fields = DerivedFields(
            class_name="A",
            repository_name="atom-a",
            lint_script="npm run lint:code",
            license_name="MIT License",
            license_url="https://opensource.org/licenses/MIT",
            license_text="",
        )
        assert fields.workspace_openers == ()
        with pytest.raises(ValidationError):
            fields.class_name = "B"
