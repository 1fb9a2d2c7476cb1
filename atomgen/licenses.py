"""SPDX license registry.

Maps a license identifier to its display name, reference URL and full text.
The bundled data file ships the permissive licenses most Atom packages use;
pass ``entries`` (or another JSON file) to extend it.
"""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from atomgen.derive.errors import UnknownLicenseError

_DEFAULT_DATA_FILE = Path(__file__).parent / "data" / "licenses.json"

_BLANK_RUN_RE = re.compile(r"\n{3,}")


class LicenseInfo(BaseModel):
    """One registry entry."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    identifier: str
    name: str
    url: str
    license_text: str = Field(default="", alias="licenseText")


def collapse_blank_lines(text: str) -> str:
    """Reduce every run of two or more blank lines to a single blank line."""
    return _BLANK_RUN_RE.sub("\n\n", text)


class LicenseRegistry:
    """Lookup table of SPDX licenses."""

    def __init__(
        self,
        entries: dict[str, dict[str, Any]] | None = None,
        data_file: str | Path | None = None,
    ) -> None:
        if entries is None:
            path = Path(data_file) if data_file is not None else _DEFAULT_DATA_FILE
            entries = json.loads(path.read_text(encoding="utf-8"))
        self._entries = {
            identifier: LicenseInfo(identifier=identifier, **data)
            for identifier, data in entries.items()
        }

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._entries

    def identifiers(self) -> list[str]:
        """All known identifiers, sorted."""
        return sorted(self._entries)

    def lookup(self, identifier: str) -> LicenseInfo:
        """Return the entry for *identifier* with its text tidied for output.

        Raises:
            UnknownLicenseError: If the identifier is not registered.
        """
        try:
            info = self._entries[identifier]
        except KeyError:
            raise UnknownLicenseError(identifier) from None
        return info.model_copy(
            update={"license_text": collapse_blank_lines(info.license_text)}
        )
