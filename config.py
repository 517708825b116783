"""
config.py — Konfiguracja aplikacji przez zmienne środowiskowe.
Wszystkie zmienne mają prefiks EXPR_TREE_.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Logging
    log_level: str = "INFO"

    # Evaluator: czy API/CLI domyślnie zwracają kroki obliczeń
    trace_steps: bool = True

    # App
    app_title: str = "ExprTree"
    app_version: str = "0.1.0"

    model_config = SettingsConfigDict(env_prefix="EXPR_TREE_", env_file=".env", extra="ignore")
