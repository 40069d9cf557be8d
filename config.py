"""
config.py — Konfiguracja aplikacji przez zmienne środowiskowe.
Wszystkie zmienne mają prefiks EXACT_CALC_.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Arytmetyka: maksymalny |licznik| wykładnika w potęgowaniu
    max_exponent: int = 100_000

    # Logging
    log_level: str = "INFO"

    # App
    app_title: str = "ExactCalc"
    app_version: str = "0.1.0"

    model_config = SettingsConfigDict(env_prefix="EXACT_CALC_", env_file=".env", extra="ignore")
