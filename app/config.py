# -*- coding: utf-8 -*-


from pathlib import Path
from dataclasses import dataclass
from typing import Optional
import os

from dotenv import load_dotenv

# ============================================================================
# Load .env file for local environment configuration
# ============================================================================
load_dotenv()

# ============================================================================
# Read settings from environment variables (from .env or system)
# ============================================================================
# API Settings
_API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:3000/api")
_API_TIMEOUT = int(os.getenv("API_TIMEOUT", "30"))
_API_VERIFY_SSL = os.getenv("API_VERIFY_SSL", "true").lower() in ("true", "1", "yes")
_API_ACCESS_TOKEN = os.getenv("API_ACCESS_TOKEN", None)

# Locale
_DEFAULT_LANGUAGE = os.getenv("DEFAULT_LANGUAGE", "es")
_DEFAULT_CURRENCY = os.getenv("DEFAULT_CURRENCY", "COP")

# Logs location can be redirected (e.g. read-only installs)
_LOGS_DIR = os.getenv("LOGS_DIR", None)


@dataclass
class Config:
    """Application configuration."""

    # Application Info
    APP_NAME: str = "Publicador de Propiedades"
    APP_TITLE: str = "Property Listing Publisher"
    VERSION: str = "1.0.0"
    ORGANIZATION: str = "Alojamiento Estudiantil"

    # HTTP API Backend Settings
    # Reads from .env file (API_BASE_URL, API_TIMEOUT, API_VERIFY_SSL, API_ACCESS_TOKEN)
    API_BASE_URL: str = _API_BASE_URL
    API_TIMEOUT: int = _API_TIMEOUT
    API_VERIFY_SSL: bool = _API_VERIFY_SSL
    API_ACCESS_TOKEN: Optional[str] = _API_ACCESS_TOKEN

    # Paths
    PROJECT_ROOT: Path = Path(__file__).parent.parent
    LOGS_DIR: Path = Path(_LOGS_DIR) if _LOGS_DIR else PROJECT_ROOT / "logs"

    # Logging
    LOG_FILE: str = "app.log"
    LOG_PATH: Path = LOGS_DIR / LOG_FILE
    LOG_MAX_BYTES: int = 5 * 1024 * 1024  # 5MB
    LOG_BACKUP_COUNT: int = 3
    LOG_CONSOLE_LEVEL: str = os.getenv("LOG_CONSOLE_LEVEL", "INFO")

    # Locale
    DEFAULT_LANGUAGE: str = _DEFAULT_LANGUAGE
    DEFAULT_CURRENCY: str = _DEFAULT_CURRENCY

    # Submission wizard
    DRAFT_STORAGE_KEY: str = "containerFlowDraft"
    DEFAULT_PROPERTY_TYPE: str = "pension"
    MAX_GALLERY_IMAGES: int = 10
    MAX_UNIT_IMAGES: int = 10
    MIN_MONTHLY_RENT: int = 100000

    # UI Settings
    WINDOW_MIN_WIDTH: int = 960
    WINDOW_MIN_HEIGHT: int = 720

    # Branding Colors
    PRIMARY_COLOR: str = "#059669"
    ERROR_COLOR: str = "#DC2626"
    TEXT_MUTED: str = "#6B7280"
