"""Translate validated catalog payloads into domain records."""

from __future__ import annotations

from typing import TYPE_CHECKING

from spellcracker.domain.model import CatalogEntry, CatalogSnapshot, Expansion, Printing

if TYPE_CHECKING:
    from .schema import CardPayload, CatalogResponse, ExpansionPayload


def translate_card(card: CardPayload) -> CatalogEntry:
    titles = [card.full_names.front_face]
    back = card.full_names.back_face
    if back and back != titles[0]:
        titles.append(back)

    prints: tuple[Printing, ...] = ()
    if card.prints is not None:
        prints = tuple(
            Printing(expansion_id=printed.expansion_id, number=printed.id)
            for printed in card.prints.prints_by_id.values()
        )

    return CatalogEntry(
        id=card.id,
        titles=tuple(titles),
        prints=prints,
        payload=card.model_dump(by_alias=True, mode="json"),
    )


def translate_expansion(expansion: ExpansionPayload) -> Expansion:
    return Expansion(
        id=expansion.id,
        name=expansion.collation_name,
        payload=expansion.model_dump(by_alias=True, mode="json"),
    )


def translate_catalog(response: CatalogResponse) -> CatalogSnapshot:
    return CatalogSnapshot(
        entries=tuple(translate_card(card) for card in response.cards),
        expansions=tuple(translate_expansion(expansion) for expansion in response.expansions),
    )
