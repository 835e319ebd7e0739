"""Runtime settings — read from ``CAB_FARE_*`` environment variables."""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from cab_fare.config.tariff import TripLimits


class Settings(BaseSettings):
    """Engine-wide settings.  Everything has a default; env vars override."""

    max_km_per_day: float = Field(
        default=600.0,
        gt=0,
        description="Distance one driver covers per day, used to estimate round-trip days",
    )
    default_gst_rate: Literal[5, 12] = Field(
        default=5,
        description="GST rate (%) applied when the caller does not pick one",
    )
    supplier_gstin: str = Field(
        default="",
        description="Operator's own GSTIN; its first two characters are the home state code",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["text", "json"] = "text"

    model_config = SettingsConfigDict(env_prefix="CAB_FARE_", extra="ignore")

    @field_validator("supplier_gstin")
    @classmethod
    def normalise_gstin(cls, v: str) -> str:
        return v.strip().upper()

    @property
    def trip_limits(self) -> TripLimits:
        return TripLimits(max_km_per_day=self.max_km_per_day)


def get_settings() -> Settings:
    """Get settings instance."""
    return Settings()
