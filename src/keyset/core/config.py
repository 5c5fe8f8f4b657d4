import os

from pydantic import BaseModel, Field, field_validator

__all__ = ["Settings", "settings"]


class Settings(BaseModel):
    LOG_LEVEL: str = Field("INFO", description="Level of the package logger.")
    VALIDATE_KEYS: bool = Field(
        True,
        description="Reject values that are not int or str when adding to a keyset.",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        value = value.upper()
        if value not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value}")
        return value

    @classmethod
    def load(cls) -> "Settings":
        log_level = os.getenv("KEYSET_LOG_LEVEL") or os.getenv("LOG_LEVEL", "INFO")

        # Pydantic parses the flag ("false", "0", "off", "n", ...)
        return cls(
            LOG_LEVEL=log_level,
            VALIDATE_KEYS=os.getenv("KEYSET_VALIDATE_KEYS", "true").strip(),
        )


settings = Settings.load()
