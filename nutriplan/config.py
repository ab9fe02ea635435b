from __future__ import annotations

import os
from pathlib import Path
from typing import List


class Settings:
    """Centralized configuration for the meal-planning backend."""

    def __init__(self) -> None:
        base_dir = Path(__file__).resolve().parent
        repo_root = base_dir.parent
        data_root_default = repo_root / "data"

        self.data_root: Path = Path(
            os.environ.get("NUTRIPLAN_DATA_ROOT") or data_root_default
        ).expanduser()
        self.app_db_path: Path = Path(
            os.environ.get("NUTRIPLAN_DB_PATH") or (self.data_root / "nutriplan.db")
        ).expanduser()

        # Language model (OpenAI-compatible chat/completions endpoint).
        # The default targets a local Ollama server, which exposes /v1.
        self.llm_base_url: str = os.environ.get(
            "NUTRIPLAN_LLM_BASE_URL", "http://localhost:11434/v1"
        )
        self.llm_api_key: str | None = os.environ.get("NUTRIPLAN_LLM_API_KEY")
        self.llm_model: str = os.environ.get("NUTRIPLAN_LLM_MODEL", "phi4-mini:3.8b")
        self.llm_timeout: float = float(os.environ.get("NUTRIPLAN_LLM_TIMEOUT", "120"))
        self.llm_max_tokens: int = int(os.environ.get("NUTRIPLAN_LLM_MAX_TOKENS", "8192"))
        self.llm_temperature: float = float(os.environ.get("NUTRIPLAN_LLM_TEMPERATURE", "0.2"))

        self.plan_language: str = os.environ.get("NUTRIPLAN_PLAN_LANGUAGE") or "Thai"

        cors = os.environ.get("NUTRIPLAN_CORS_ORIGINS", "*")
        if cors.strip() == "*":
            self.cors_origins: List[str] = ["*"]
        else:
            self.cors_origins = [
                origin.strip() for origin in cors.split(",") if origin.strip()
            ]


settings = Settings()
