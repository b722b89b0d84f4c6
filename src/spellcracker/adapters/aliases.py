"""File-backed alias source.

The alias file is a JSON object mapping alias strings to the canonical query
they stand for::

    {"ec": "ember call", "storm": "calling the storm"}
"""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from pydantic import TypeAdapter, ValidationError

from spellcracker.domain.errors import AliasSourceError

if TYPE_CHECKING:
    from pathlib import Path

    from spellcracker.domain.ports import AliasSource

log = getLogger(__name__)

_ALIAS_MAPPING = TypeAdapter(dict[str, str])


@dataclass(frozen=True, slots=True)
class JsonAliasFile:
    path: Path

    def __call__(self) -> dict[str, str]:
        try:
            raw = self.path.read_bytes()
        except OSError as exc:
            raise AliasSourceError(f"Cannot read alias file {self.path}: {exc}") from exc
        try:
            aliases = _ALIAS_MAPPING.validate_json(raw)
        except ValidationError as exc:
            raise AliasSourceError(f"Malformed alias file {self.path}: {exc}") from exc
        log.debug("Read %s aliases from %s", len(aliases), self.path)
        return aliases


if TYPE_CHECKING:
    _source_check: AliasSource = JsonAliasFile(Path("aliases.json"))
