from __future__ import annotations

import io
import json
from typing import TYPE_CHECKING

import pytest

from spellcracker.app import CardLookupService
from spellcracker.config import MissingConfigurationError
from spellcracker.config.catalog import CatalogConfig
from spellcracker.config.http_resilience import ResilienceConfig
from spellcracker.domain.errors import DataSourceError
from spellcracker.ui.cli import main

if TYPE_CHECKING:
    from collections.abc import Callable

    from spellcracker.domain.model import CatalogSnapshot


@pytest.fixture
def service_factory(
    snapshot: CatalogSnapshot, alias_payload: dict[str, str]
) -> Callable[[], CardLookupService]:
    def factory() -> CardLookupService:
        service = CardLookupService(
            config=CatalogConfig(
                api_url="https://api.example.com/",
                resilience=ResilienceConfig(name="test"),
            ),
            snapshot_source=lambda: snapshot,
            alias_source=lambda: alias_payload,
        )
        service.start()
        return service

    return factory


def _run(
    argv: list[str],
    factory: Callable[[], CardLookupService],
    capsys: pytest.CaptureFixture[str],
) -> object:
    main(argv, service_factory=factory)
    return json.loads(capsys.readouterr().out)


def test_lookup_prints_entry(
    service_factory: Callable[[], CardLookupService], capsys: pytest.CaptureFixture[str]
) -> None:
    result = _run(["lookup", "ember", "storm"], service_factory, capsys)

    assert result == {
        "id": "ember-storm",
        "title": "Ember Storm",
        "titles": ["Ember Storm"],
        "prints": [{"expansion": "core", "number": "2"}],
    }


def test_scan_reads_text_argument(
    service_factory: Callable[[], CardLookupService], capsys: pytest.CaptureFixture[str]
) -> None:
    result = _run(["scan", "[[ec]] and {{FW}}"], service_factory, capsys)

    assert isinstance(result, list)
    assert [(item["id"], item["view"]) for item in result] == [
        ("ember-call", "full"),
        ("flame-ward", "art"),
    ]


def test_scan_reads_stdin(
    service_factory: Callable[[], CardLookupService],
    capsys: pytest.CaptureFixture[str],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("[[Tidal Surge]]"))

    result = _run(["scan", "--max-results", "1"], service_factory, capsys)

    assert [item["id"] for item in result] == ["tidal-surge"]  # type: ignore[union-attr]


def test_suggest_and_aliases(
    service_factory: Callable[[], CardLookupService], capsys: pytest.CaptureFixture[str]
) -> None:
    assert _run(["suggest", "cal"], service_factory, capsys) == [
        {"value": "calling the storm", "name": "Calling the Storm"}
    ]
    assert _run(["aliases", "witch's", "brew"], service_factory, capsys) == {
        "title": "Witch's Brew",
        "aliases": ["brew", "the pot"],
    }


def test_lookup_without_match_exits_with_error(
    service_factory: Callable[[], CardLookupService], capsys: pytest.CaptureFixture[str]
) -> None:
    with pytest.raises(SystemExit) as exc:
        main(["lookup", "???"], service_factory=service_factory)

    assert exc.value.code == 1
    assert capsys.readouterr().out.strip() == "null"


def test_configuration_error_exits_with_2() -> None:
    def failing_factory() -> CardLookupService:
        raise MissingConfigurationError("Missing configuration for: API_URL")

    with pytest.raises(SystemExit) as exc:
        main(["random"], service_factory=failing_factory)

    assert exc.value.code == 2


def test_data_source_error_exits_with_1() -> None:
    def failing_factory() -> CardLookupService:
        raise DataSourceError("Failed to load data from API")

    with pytest.raises(SystemExit) as exc:
        main(["random"], service_factory=failing_factory)

    assert exc.value.code == 1


@pytest.mark.parametrize(
    "argv",
    [["suggest", "ember", "--limit", "-1"], ["scan", "x", "--max-results", "0"]],
)
def test_non_positive_limits_are_rejected(
    argv: list[str],
    service_factory: Callable[[], CardLookupService],
    capsys: pytest.CaptureFixture[str],
) -> None:
    with pytest.raises(SystemExit) as exc:
        main(argv, service_factory=service_factory)

    assert exc.value.code == 2
    assert "must be positive" in capsys.readouterr().err
