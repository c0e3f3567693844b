"""
Application configuration management.

Load order (each layer overrides the previous):
  1. ``config/default.toml``      — committed static defaults
  2. ``config/local.toml``        — optional local overrides (gitignored)
  3. ``.env``                     — local secrets and env overrides (gitignored)
  4. Environment variables        — ``SPORTFIT_*`` prefix

Entry point: ``load_config(config_path=None) -> AppConfig``

CLI commands receive an ``AppConfig`` instance and pass the relevant sections
down. The scoring engine itself never reads configuration; callers hand it
explicit arguments (``top_n``, ``missing_list_limit``, ``profiles``).
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator

# ── Sub-config models ─────────────────────────────────────────────────────────


class ScoringConfig(BaseModel):
    """Ranking and data-sufficiency settings."""

    model_config = ConfigDict(frozen=True)

    top_n: int = 3
    missing_list_limit: int = 3
    catalogue_file: Optional[str] = None   # TOML override for the built-in catalogue

    @field_validator("top_n")
    @classmethod
    def validate_top_n(cls, v: int) -> int:
        if v < 0:
            raise ValueError(f"top_n must be >= 0, got {v}.")
        return v

    @field_validator("missing_list_limit")
    @classmethod
    def validate_missing_list_limit(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"missing_list_limit must be >= 1, got {v}.")
        return v


class ApiConfig(BaseModel):
    """Athlete stat store API connection."""

    model_config = ConfigDict(frozen=True)

    base_url: str = "http://localhost:5000"
    timeout_seconds: float = 10.0

    @field_validator("timeout_seconds")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError(f"timeout_seconds must be > 0, got {v}.")
        return v


class OutputConfig(BaseModel):
    """Filesystem paths for report output."""

    model_config = ConfigDict(frozen=True)

    recommendation_dir: str = "data/outputs/recommendations"


class LoggingConfig(BaseModel):
    """Logging output settings."""

    model_config = ConfigDict(frozen=True)

    level: str = "INFO"
    log_file: str = "data/logs/sportfit.log"
    json_format: bool = False

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid:
            raise ValueError(f"Log level must be one of {sorted(valid)}, got '{v}'.")
        return v.upper()


class AppConfig(BaseModel):
    """Complete application configuration.

    Constructed by ``load_config()`` which merges TOML + .env + environment.
    """

    model_config = ConfigDict(frozen=True)

    scoring: ScoringConfig = ScoringConfig()
    api: ApiConfig = ApiConfig()
    output: OutputConfig = OutputConfig()
    logging: LoggingConfig = LoggingConfig()
    debug: bool = False


# ── Loader ────────────────────────────────────────────────────────────────────

_PROJECT_ROOT = Path(__file__).parent.parent


def _find_project_root() -> Path:
    """Walk up from this file to find the project root (contains pyproject.toml)."""
    candidate = Path(__file__).parent
    for _ in range(5):
        if (candidate / "pyproject.toml").exists():
            return candidate
        candidate = candidate.parent
    return _PROJECT_ROOT


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """Load and merge application configuration.

    Args:
        config_path: Explicit path to a TOML config file. Defaults to
            ``<project_root>/config/default.toml``.

    Returns:
        Fully validated ``AppConfig`` instance.

    Raises:
        FileNotFoundError: If the specified ``config_path`` does not exist.
        pydantic.ValidationError: If merged config values fail validation.
    """
    root = _find_project_root()

    load_dotenv(dotenv_path=root / ".env", override=False)

    if config_path is None:
        config_path = root / "config" / "default.toml"

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(
            f"Config file not found: {config_path}\n"
            "Create config/default.toml or pass --config."
        )

    with open(config_path, "rb") as f:
        raw: dict[str, Any] = tomllib.load(f)

    local_config_path = config_path.parent / "local.toml"
    if local_config_path.exists():
        with open(local_config_path, "rb") as f:
            local_raw: dict[str, Any] = tomllib.load(f)
        raw = _deep_merge(raw, local_raw)

    raw = _apply_env_overrides(raw)
    raw = _resolve_catalogue_file(raw, root)

    return _build_app_config(raw)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge ``override`` into ``base``."""
    result = dict(base)
    for key, val in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(val, dict):
            result[key] = _deep_merge(result[key], val)
        else:
            result[key] = val
    return result


def _resolve_catalogue_file(raw: dict[str, Any], root: Path) -> dict[str, Any]:
    """Anchor a relative ``[scoring] catalogue_file`` at the project root."""
    scoring = raw.get("scoring")
    if isinstance(scoring, dict) and (catalogue := scoring.get("catalogue_file")):
        path = Path(catalogue)
        if not path.is_absolute():
            scoring["catalogue_file"] = str(root / path)
    return raw


def _apply_env_overrides(raw: dict[str, Any]) -> dict[str, Any]:
    """Apply SPORTFIT_* env vars to the raw config dict.

    Supported overrides:
      SPORTFIT_API_URL     → raw["api"]["base_url"]
      SPORTFIT_LOG_LEVEL   → raw["logging"]["level"]
      SPORTFIT_OUTPUT_DIR  → raw["output"]["recommendation_dir"]
      SPORTFIT_DEBUG       → raw["debug"]
    """
    if api_url := os.environ.get("SPORTFIT_API_URL"):
        raw.setdefault("api", {})["base_url"] = api_url

    if log_level := os.environ.get("SPORTFIT_LOG_LEVEL"):
        raw.setdefault("logging", {})["level"] = log_level

    if output_dir := os.environ.get("SPORTFIT_OUTPUT_DIR"):
        raw.setdefault("output", {})["recommendation_dir"] = output_dir

    if debug := os.environ.get("SPORTFIT_DEBUG"):
        raw["debug"] = debug.lower() in ("1", "true", "yes")

    return raw


def _build_app_config(raw: dict[str, Any]) -> AppConfig:
    """Map raw TOML dict to ``AppConfig`` model structure."""
    project = raw.pop("project", {})

    return AppConfig(
        scoring=ScoringConfig(**raw.get("scoring", {})),
        api=ApiConfig(**raw.get("api", {})),
        output=OutputConfig(**raw.get("output", {})),
        logging=LoggingConfig(**raw.get("logging", {})),
        debug=raw.get("debug", project.get("debug", False)),
    )
