"""Settings loader with environment variable and Docker secrets integration."""
from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from iam_admin.core.user_admin.client import DEFAULT_API_VERSION, REQUEST_TIMEOUT

logger = logging.getLogger(__name__)

SECRETS_DIR = Path("/run/secrets")


def _load_secret_from_file(secret_name: str, env_var: str | None = None, secrets_dir: Path | None = None) -> str | None:
    """
    Load secret from /run/secrets (Docker secrets pattern).

    Priority:
    1. /run/secrets/{secret_name} (Docker secrets mount)
    2. Environment variable (fallback)

    Args:
        secret_name: Name of the secret file in /run/secrets
        env_var: Optional environment variable name to check as fallback
        secrets_dir: Override of the secrets directory

    Returns:
        Secret value or None if not found
    """
    secret_file = (secrets_dir or SECRETS_DIR) / secret_name

    # Priority 1: Read from /run/secrets
    if secret_file.exists() and secret_file.is_file():
        try:
            secret_value = secret_file.read_text().strip()
            if secret_value:
                logger.info("Loaded %s from %s", secret_name, secret_file.parent)
                return secret_value
        except OSError as e:
            logger.warning("Failed to read %s: %s", secret_file, e)

    # Priority 2: Fallback to environment variable
    if env_var:
        secret_value = os.getenv(env_var)
        if secret_value:
            logger.info("Loaded %s from environment (fallback)", env_var)
            return secret_value

    return None


@dataclass
class IAMSettings:
    """Client configuration container."""
    base_url: str
    access_token: str = ""
    api_version: str = DEFAULT_API_VERSION
    request_timeout: float = REQUEST_TIMEOUT
    account_switch_key: str = ""


def _parse_timeout(raw: Optional[str]) -> float:
    if raw is None or not raw.strip():
        return float(REQUEST_TIMEOUT)
    try:
        timeout = float(raw)
    except ValueError:
        raise ValueError(f"IAM_REQUEST_TIMEOUT must be a number, got {raw!r}")
    if timeout <= 0:
        raise ValueError("IAM_REQUEST_TIMEOUT must be positive")
    return timeout


def load_settings(secrets_dir: Path | None = None, base_url: str | None = None) -> IAMSettings:
    """Load client settings from environment and /run/secrets.

    Args:
        secrets_dir: Override of the secrets directory
        base_url: API host taking precedence over IAM_BASE_URL

    Raises:
        RuntimeError: If neither base_url nor IAM_BASE_URL is set
        ValueError: If IAM_REQUEST_TIMEOUT is not a positive number
    """
    base_url = (base_url or os.environ.get("IAM_BASE_URL", "")).strip()
    if not base_url:
        raise RuntimeError("Environment variable IAM_BASE_URL is required.")

    access_token = _load_secret_from_file("iam_access_token", "IAM_ACCESS_TOKEN", secrets_dir) or ""
    api_version = os.environ.get("IAM_API_VERSION", DEFAULT_API_VERSION).strip() or DEFAULT_API_VERSION
    request_timeout = _parse_timeout(os.environ.get("IAM_REQUEST_TIMEOUT"))
    account_switch_key = os.environ.get("IAM_ACCOUNT_SWITCH_KEY", "").strip()

    logger.debug("Settings loaded: base_url=%s api_version=%s timeout=%s", base_url, api_version, request_timeout)

    return IAMSettings(
        base_url=base_url.rstrip("/"),
        access_token=access_token,
        api_version=api_version,
        request_timeout=request_timeout,
        account_switch_key=account_switch_key,
    )
