from __future__ import annotations

from typing import TYPE_CHECKING

from spellcracker.domain.aliases import AliasTable
from spellcracker.domain.resolver import resolve

if TYPE_CHECKING:
    from spellcracker.domain.catalog_index import CatalogIndex


def _bound(table: AliasTable, index: CatalogIndex) -> AliasTable:
    return table.bind(lambda query: resolve(index, query))


def test_apply_alias_substitutes_canonical_query(aliases: AliasTable) -> None:
    assert aliases.apply_alias("EC") == "ember call"
    assert aliases.apply_alias("  The Pot ") == "witch's brew"


def test_apply_alias_returns_normalized_input_when_unknown(aliases: AliasTable) -> None:
    assert aliases.apply_alias("Ember  Storm!") == "ember storm"


def test_lookup_distinguishes_aliases_from_plain_queries(aliases: AliasTable) -> None:
    assert aliases.lookup("brew") == "witch's brew"
    assert aliases.lookup("Ember Storm") is None


def test_alias_chains_are_not_followed() -> None:
    table = AliasTable.from_mapping({"a": "b", "b": "ember call"})

    assert table.apply_alias("a") == "b"


def test_list_aliases_by_title(aliases: AliasTable, index: CatalogIndex) -> None:
    table = _bound(aliases, index)

    assert table.list_aliases("Witch's Brew") == ("brew", "the pot")
    assert table.list_aliases("Calling the Storm") == ("storm call",)
    assert table.list_aliases("Tidal Surge") == ()


def test_list_aliases_by_identifier(aliases: AliasTable, index: CatalogIndex) -> None:
    table = _bound(aliases, index)

    assert table.list_aliases("witchs-brew") == ("brew", "the pot")
    assert table.list_aliases("ember-call") == ("ec",)
    assert table.list_aliases("tidal-surge") == ()


def test_alias_with_fragment_target_is_grouped_under_matched_card(index: CatalogIndex) -> None:
    table = _bound(AliasTable.from_mapping({"pot": "witchs brw", "brew": "Witch's Brew"}), index)

    assert resolve(index, table.lookup("pot") or "") is not None
    assert table.list_aliases("witchs-brew") == ("pot", "brew")
    assert table.list_aliases("Witch's Brew") == ("pot", "brew")


def test_bind_keeps_targets(aliases: AliasTable, index: CatalogIndex) -> None:
    table = _bound(aliases, index)

    assert table.targets == aliases.targets
    assert table.apply_alias("ec") == "ember call"


def test_unbound_table_lists_nothing(aliases: AliasTable) -> None:
    assert aliases.list_aliases("Witch's Brew") == ()


def test_later_definition_replaces_earlier_one(index: CatalogIndex) -> None:
    table = AliasTable.from_pairs([("EC", "ember storm"), ("ec", "ember call")])

    assert len(table) == 1
    assert table.apply_alias("ec") == "ember call"
    assert _bound(table, index).list_aliases("ember-storm") == ()


def test_blank_definitions_are_ignored() -> None:
    table = AliasTable.from_pairs([("!!", "ember call"), ("ec", "   ")])

    assert len(table) == 0


def test_empty_table() -> None:
    table = AliasTable()

    assert table.apply_alias("EC") == "ec"
    assert table.list_aliases("ember call") == ()
