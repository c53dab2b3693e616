"""
Configuration for the travel document codec
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class MRTDSettings(BaseSettings):
    """Settings for MRZ and seal handling"""

    model_config = SettingsConfigDict(env_prefix="MRTD_", env_file=".env", extra="ignore")

    # Two-digit years above the cutoff resolve to the 1900s
    century_cutoff: int = Field(default=60, ge=0, le=99)

    # Length of the random stand-in signature
    signature_length: int = Field(default=64, ge=1, le=1024)

    warn_unknown_codes: bool = True

    # Logging configuration
    log_level: str = "INFO"
    log_format: str = "text"


settings = MRTDSettings()
