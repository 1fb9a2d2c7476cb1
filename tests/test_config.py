"""Unit tests for GeneratorConfig (atomgen.config).

Tests cover:
- Defaults and field validation
- validation_context and project_path
- save/load round trip
- from_env overrides
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from atomgen.config import GeneratorConfig


# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------


class TestDefaults:
    @pytest.mark.unit
    def test_default_values(self):
        config = GeneratorConfig()
        assert config.allow_atom_prefix is True
        assert config.allow_empty_description is False
        assert config.clear is True
        assert config.debug is False
        assert config.install is True
        assert config.indentation == 2
        assert config.output_dir == Path(".")
        assert config.command_timeout == 300

    @pytest.mark.unit
    def test_default_template_dir_is_bundled(self):
        config = GeneratorConfig()
        assert (config.template_dir / "shared" / "package.json.j2").is_file()

    @pytest.mark.unit
    def test_indentation_must_be_positive(self):
        with pytest.raises(ValidationError):
            GeneratorConfig(indentation=0)

    @pytest.mark.unit
    def test_command_timeout_minimum(self):
        with pytest.raises(ValidationError):
            GeneratorConfig(command_timeout=5)


# ---------------------------------------------------------------------------
# Derived values
# ---------------------------------------------------------------------------


class TestDerivedValues:
    @pytest.mark.unit
    def test_validation_context(self):
        config = GeneratorConfig(allow_atom_prefix=False, allow_empty_description=True)
        assert config.validation_context() == {
            "allow_atom_prefix": False,
            "allow_empty_description": True,
        }

    @pytest.mark.unit
    def test_project_path(self, tmp_path):
        config = GeneratorConfig(output_dir=tmp_path)
        assert config.project_path("my-package") == tmp_path / "my-package"


# ---------------------------------------------------------------------------
# Serialisation
# ---------------------------------------------------------------------------


class TestSaveLoad:
    @pytest.mark.unit
    def test_round_trip(self, tmp_path):
        config = GeneratorConfig(debug=True, indentation=4, output_dir=tmp_path / "out")
        saved = config.save(tmp_path / "nested" / "config.json")
        assert saved.exists()
        assert json.loads(saved.read_text(encoding="utf-8"))["indentation"] == 4

        loaded = GeneratorConfig.load(saved)
        assert loaded == config


# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------


class TestFromEnv:
    @pytest.mark.unit
    def test_no_env_gives_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            assert GeneratorConfig.from_env() == GeneratorConfig()

    @pytest.mark.unit
    def test_flags(self):
        env = {
            "ATOMGEN_DEBUG": "yes",
            "ATOMGEN_INSTALL": "0",
            "ATOMGEN_CLEAR": "false",
            "ATOMGEN_ALLOW_ATOM_PREFIX": "off",
            "ATOMGEN_ALLOW_EMPTY_DESCRIPTION": "TRUE",
        }
        with patch.dict(os.environ, env, clear=True):
            config = GeneratorConfig.from_env()
        assert config.debug is True
        assert config.install is False
        assert config.clear is False
        assert config.allow_atom_prefix is False
        assert config.allow_empty_description is True

    @pytest.mark.unit
    def test_values(self, tmp_path):
        env = {
            "ATOMGEN_INDENTATION": "4",
            "ATOMGEN_COMMAND_TIMEOUT": "60",
            "ATOMGEN_OUTPUT_DIR": str(tmp_path),
            "ATOMGEN_TEMPLATE_DIR": str(tmp_path / "templates"),
        }
        with patch.dict(os.environ, env, clear=True):
            config = GeneratorConfig.from_env()
        assert config.indentation == 4
        assert config.command_timeout == 60
        assert config.output_dir == tmp_path
        assert config.template_dir == tmp_path / "templates"

    @pytest.mark.unit
    def test_empty_flag_ignored(self):
        with patch.dict(os.environ, {"ATOMGEN_DEBUG": ""}, clear=True):
            assert GeneratorConfig.from_env().debug is False
