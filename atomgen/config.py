"""atomgen configuration.

Typed settings for a generator run.  All settings use Pydantic v2 models so
they can be validated at construction time and serialised to/from JSON or
environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field

_TRUTHY = {"1", "true", "yes", "on"}

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "scaffolder" / "templates"


def _env_flag(name: str) -> Optional[bool]:
    """Read a boolean environment variable; ``None`` if unset or empty."""
    raw = os.environ.get(name)
    if not raw:
        return None
    return raw.strip().lower() in _TRUTHY


class GeneratorConfig(BaseModel):
    """Settings for one scaffolding run.

    Instances are typically created once by the CLI entry point and then
    passed to the answer loader, the generator and the process runner.
    """

    allow_atom_prefix: bool = Field(
        default=True, description="Allow package names starting with 'atom-'"
    )
    allow_empty_description: bool = Field(
        default=False, description="Accept an empty package description"
    )
    clear: bool = Field(default=True, description="Clear the console on startup")
    debug: bool = Field(default=False, description="Print answers and written files")
    install: bool = Field(
        default=True, description="Install dependencies after writing the files"
    )
    indentation: int = Field(default=2, ge=1, description="Indent width for JSON documents")
    output_dir: Path = Field(default=Path("."))
    template_dir: Path = Field(default=_DEFAULT_TEMPLATE_DIR)
    command_timeout: int = Field(
        default=300, ge=10, description="Per-command timeout in seconds"
    )

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    def validation_context(self) -> dict[str, bool]:
        """Context passed to ``AnswerRecord.model_validate``."""
        return {
            "allow_atom_prefix": self.allow_atom_prefix,
            "allow_empty_description": self.allow_empty_description,
        }

    def project_path(self, name: str) -> Path:
        """Directory the package called *name* is generated into."""
        return self.output_dir / name

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "GeneratorConfig":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "GeneratorConfig":
        """Build a ``GeneratorConfig`` from environment variables.

        Recognised variables (all optional):
            ATOMGEN_ALLOW_ATOM_PREFIX, ATOMGEN_ALLOW_EMPTY_DESCRIPTION,
            ATOMGEN_CLEAR, ATOMGEN_DEBUG, ATOMGEN_INSTALL, ATOMGEN_INDENTATION,
            ATOMGEN_OUTPUT_DIR, ATOMGEN_TEMPLATE_DIR, ATOMGEN_COMMAND_TIMEOUT.
        """
        kwargs: dict[str, Any] = {}

        for field_name in ("allow_atom_prefix", "allow_empty_description", "clear", "debug", "install"):
            flag = _env_flag(f"ATOMGEN_{field_name.upper()}")
            if flag is not None:
                kwargs[field_name] = flag

        if os.environ.get("ATOMGEN_INDENTATION"):
            kwargs["indentation"] = int(os.environ["ATOMGEN_INDENTATION"])
        if os.environ.get("ATOMGEN_COMMAND_TIMEOUT"):
            kwargs["command_timeout"] = int(os.environ["ATOMGEN_COMMAND_TIMEOUT"])
        if os.environ.get("ATOMGEN_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["ATOMGEN_OUTPUT_DIR"])
        if os.environ.get("ATOMGEN_TEMPLATE_DIR"):
            kwargs["template_dir"] = Path(os.environ["ATOMGEN_TEMPLATE_DIR"])

        return cls(**kwargs)
