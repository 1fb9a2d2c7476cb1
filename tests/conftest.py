"""Shared pytest fixtures for the atomgen test suite.

Provides reusable fixtures for:
- Answer records for the common language/bundler/feature combinations
- A small in-memory license registry
- Generator configuration pointing at a temporary output directory
- A mocked process runner
"""

from __future__ import annotations

from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from atomgen.config import GeneratorConfig
from atomgen.licenses import LicenseRegistry
from atomgen.models import AnswerRecord
from atomgen.scaffolder.process import ProcessRunner


# ---------------------------------------------------------------------------
# Answer records
# ---------------------------------------------------------------------------

def make_answers(**overrides: Any) -> AnswerRecord:
    """Build an ``AnswerRecord`` for a JavaScript/webpack package, with overrides."""
    data: dict[str, Any] = {
        "name": "my-package",
        "description": "A package for testing",
        "author": "octocat",
        "license": "MIT",
        "features": ["code"],
        "language": "javascript",
        "bundler": "webpack",
        "eslint_config": "airbnb",
    }
    data.update(overrides)
    return AnswerRecord(**data)


@pytest.fixture
def js_answers() -> AnswerRecord:
    """JavaScript + webpack, code only."""
    return make_answers()


@pytest.fixture
def ts_answers() -> AnswerRecord:
    """TypeScript + rollup with code and styles."""
    return make_answers(
        features=["code", "styles"],
        language="typescript",
        bundler="rollup",
        eslint_config="xo",
        stylelint_config="standard",
    )


@pytest.fixture
def coffee_answers() -> AnswerRecord:
    """CoffeeScript + webpack with keymaps and menus."""
    return make_answers(
        features=["code", "keymaps", "menus"],
        language="coffeescript",
        bundler="webpack",
        eslint_config=None,
    )


@pytest.fixture
def styles_answers() -> AnswerRecord:
    """A theme-like package: styles only, no code."""
    return make_answers(
        features=["styles"],
        language=None,
        bundler=None,
        eslint_config=None,
        stylelint_config="standard",
    )


# ---------------------------------------------------------------------------
# Licenses
# ---------------------------------------------------------------------------

@pytest.fixture
def license_registry() -> LicenseRegistry:
    """A registry with one entry whose text has runs of blank lines."""
    return LicenseRegistry(
        entries={
            "MIT": {
                "name": "MIT License",
                "url": "https://opensource.org/licenses/MIT",
                "licenseText": "MIT License\n\n\n\nPermission is hereby granted.\n",
            },
        }
    )


# ---------------------------------------------------------------------------
# Generator configuration & runner
# ---------------------------------------------------------------------------

@pytest.fixture
def generator_config(tmp_path: Path) -> GeneratorConfig:
    """Config writing into a temporary directory without installing."""
    return GeneratorConfig(output_dir=tmp_path, install=False, clear=False)


@pytest.fixture
def mock_runner() -> MagicMock:
    """A ProcessRunner whose commands are recorded instead of executed."""
    runner = MagicMock(spec=ProcessRunner)
    runner.install = AsyncMock()
    runner.init_git = AsyncMock()
    runner.link_dev_package = AsyncMock()
    runner.open_in_editor = AsyncMock(return_value=True)
    return runner


@pytest.fixture
def answers_factory():
    """Callable building answer records from keyword overrides."""
    return make_answers
