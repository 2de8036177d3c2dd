from pydantic import field_validator
from pydantic_settings import BaseSettings

from engine.escalation.catalog import build_catalog
from engine.escalation.validation import validate_escalation_rates


class Settings(BaseSettings):
    model_config = {"env_prefix": "ENERCAST_", "case_sensitive": False}

    # App
    environment: str = "development"
    debug: bool = True
    app_name: str = "EnerCast"
    log_json: bool = False
    cors_origins: str = "http://localhost:3000,http://localhost:5173"

    # Projection defaults
    currency: str = "EUR"
    default_horizon_years: int = 20
    csv_delimiter: str = ";"
    strict_line_items: bool = False

    # Per-carrier default escalation (% / yr) overriding the built-in presets,
    # e.g. ENERCAST_ESCALATION_PRESETS='{"electricity": 4.5}'
    escalation_presets: dict[str, float] = {}

    @field_validator("escalation_presets")
    @classmethod
    def check_escalation_presets(cls, v: dict[str, float]) -> dict[str, float]:
        """Unknown carrier ids and out-of-range rates fail at startup."""
        try:
            catalog = build_catalog(v)
        except KeyError as exc:
            raise ValueError(exc.args[0]) from None
        validate_escalation_rates(catalog.default_rates())
        return v


settings = Settings()
