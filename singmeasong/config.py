from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent / ".env")


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class AppConfig:
    title: str = "Sing Me A Song API"
    version: str = "1.0.0"
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Wipe-everything route used by end-to-end suites; switch off in production
    enable_reset_route: bool = _env_flag("ENABLE_E2E_RESET", "true")


DEFAULT_APP_CONFIG = AppConfig()
