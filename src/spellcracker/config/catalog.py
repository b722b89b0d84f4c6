"""Card catalog configuration values."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from spellcracker.domain.references import DEFAULT_MAX_QUERY_LENGTH, DEFAULT_MAX_RESULTS

from .env import optional_env_var, positive_float_env_var, positive_int_env_var, require_env_vars
from .http_resilience import CacheConfig, ResilienceConfig, RetryPolicy
from .storage import StorageConfig, get_storage_config

DEFAULT_TIMEOUT_SECONDS = 30.0
CATALOG_PATH = "cards/all.json"


@dataclass(frozen=True, slots=True)
class CatalogConfig:
    """Where the catalog comes from and how references are extracted."""

    api_url: str
    resilience: ResilienceConfig
    aliases_path: Path | None = None
    result_limit: int = DEFAULT_MAX_RESULTS
    max_query_length: int = DEFAULT_MAX_QUERY_LENGTH

    @property
    def catalog_url(self) -> str:
        return f"{self.api_url}{CATALOG_PATH}"


def get_catalog_config(*, storage: StorageConfig | None = None) -> CatalogConfig:
    api_url = require_env_vars(("API_URL",))["API_URL"].strip()
    if not api_url.endswith("/"):
        api_url += "/"

    cache: CacheConfig | None = None
    cache_ttl = positive_float_env_var("CATALOG_CACHE_TTL_SECONDS", None)
    if cache_ttl is not None:
        storage_config = storage or get_storage_config()
        cache = CacheConfig(
            backend="sqlite",
            sqlite_path=str(storage_config.http_cache_path()),
            default_ttl_seconds=cache_ttl,
        )

    aliases_path = optional_env_var("ALIASES_PATH")
    timeout = positive_float_env_var("CATALOG_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS)

    return CatalogConfig(
        api_url=api_url,
        resilience=ResilienceConfig(
            name="witchesrevel",
            timeout_seconds=timeout or DEFAULT_TIMEOUT_SECONDS,
            retry=RetryPolicy(),
            cache=cache,
        ),
        aliases_path=Path(aliases_path) if aliases_path else None,
        result_limit=positive_int_env_var("RESULT_LIMIT", DEFAULT_MAX_RESULTS),
        max_query_length=positive_int_env_var("MAX_QUERY_LENGTH", DEFAULT_MAX_QUERY_LENGTH),
    )
