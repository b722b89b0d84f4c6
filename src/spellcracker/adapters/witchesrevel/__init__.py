"""Witches' Revel catalog adapter."""

from __future__ import annotations

from .client import CatalogFetcher
from .schema import CardPayload, CatalogResponse, ExpansionPayload
from .translator import translate_card, translate_catalog, translate_expansion

__all__ = [
    "CardPayload",
    "CatalogFetcher",
    "CatalogResponse",
    "ExpansionPayload",
    "translate_card",
    "translate_catalog",
    "translate_expansion",
]
