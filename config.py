"""
config.py — Konfiguracja aplikacji przez zmienne środowiskowe.
Wszystkie zmienne mają prefiks PLUGCALC_.
"""
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Providery funkcji
    plugins_dir: str = "./plugins"
    builtin_functions: bool = True
    angle_mode: Literal["rad", "deg"] = "rad"

    # Zdalny provider (pusty URL = wyłączony)
    remote_provider_url: str = ""
    remote_timeout_ms: int = 2_000

    # Arytmetyka
    number_type: Literal["float", "decimal"] = "float"
    decimal_precision: int = 28

    # Logging
    log_level: str = "INFO"

    # App
    app_title: str = "PlugCalc"
    app_version: str = "0.1.0"

    model_config = SettingsConfigDict(env_prefix="PLUGCALC_", env_file=".env", extra="ignore")
