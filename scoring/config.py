"""Scoring settings read from the environment (and a local .env file)."""

import os
from typing import List, Literal

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

load_dotenv()


class ScoringSettings(BaseModel):
    """Knobs for handicap conversion defaults and the HTTP surface."""
    # "fixed": course handicap uses fixed_reference_par (the usual 72 baseline).
    # "course": it uses the par of the course from the player's tee.
    reference_par: Literal["fixed", "course"] = "fixed"
    fixed_reference_par: int = Field(72, ge=27, le=80)
    default_course_rating: float = Field(72.0, ge=55.0, le=85.0)
    default_slope_rating: int = Field(113, ge=55, le=155)
    default_tee: str = "white"
    log_level: str = "WARNING"
    cors_origins: List[str] = Field(default_factory=lambda: ["http://localhost:5173"])

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v):
        v = v.upper()
        if v not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level '{v}'")
        return v

    @classmethod
    def from_env(cls) -> "ScoringSettings":
        """Build settings from GOLF_* environment variables."""
        env_map = {
            "GOLF_REFERENCE_PAR": "reference_par",
            "GOLF_FIXED_REFERENCE_PAR": "fixed_reference_par",
            "GOLF_DEFAULT_COURSE_RATING": "default_course_rating",
            "GOLF_DEFAULT_SLOPE_RATING": "default_slope_rating",
            "GOLF_DEFAULT_TEE": "default_tee",
            "GOLF_LOG_LEVEL": "log_level",
        }
        values = {}
        for env_name, field_name in env_map.items():
            raw = os.environ.get(env_name)
            if raw is not None and raw.strip():
                values[field_name] = raw.strip()

        origins = os.environ.get("GOLF_CORS_ORIGINS")
        if origins:
            values["cors_origins"] = [o.strip() for o in origins.split(",") if o.strip()]

        try:
            return cls(**values)
        except ValidationError as e:
            error = e.errors()[0]
            field_name = error["loc"][0] if error["loc"] else "?"
            env_name = next((k for k, v in env_map.items() if v == field_name), field_name)
            raise ValueError(f"Invalid {env_name}: {error['msg']}") from e


def get_settings() -> ScoringSettings:
    return ScoringSettings.from_env()
