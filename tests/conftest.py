from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from spellcracker.adapters.witchesrevel import CatalogResponse, translate_catalog
from spellcracker.domain.aliases import AliasTable
from spellcracker.domain.catalog_index import build_index

if TYPE_CHECKING:
    from spellcracker.domain.catalog_index import CatalogIndex
    from spellcracker.domain.model import CatalogSnapshot

DATA_DIR = Path(__file__).resolve().parent / "data"


@pytest.fixture(scope="session")
def catalog_payload() -> dict[str, object]:
    with (DATA_DIR / "catalog.json").open() as handle:
        return json.load(handle)


@pytest.fixture(scope="session")
def alias_payload() -> dict[str, str]:
    with (DATA_DIR / "aliases.json").open() as handle:
        return json.load(handle)


@pytest.fixture
def snapshot(catalog_payload: dict[str, object]) -> CatalogSnapshot:
    return translate_catalog(CatalogResponse.model_validate(catalog_payload))


@pytest.fixture
def index(snapshot: CatalogSnapshot) -> CatalogIndex:
    return build_index(snapshot)


@pytest.fixture
def aliases(alias_payload: dict[str, str]) -> AliasTable:
    return AliasTable.from_mapping(alias_payload)
