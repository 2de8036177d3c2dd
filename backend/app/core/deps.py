from functools import lru_cache

from app.config import settings

from engine.escalation.catalog import EnergyCatalog, build_catalog


@lru_cache
def get_catalog() -> EnergyCatalog:
    """Energy catalogue with any preset overrides from settings applied."""
    return build_catalog(settings.escalation_presets)
