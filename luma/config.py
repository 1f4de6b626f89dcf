from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = 'https://api.lu.ma/v1'
DEFAULT_TIMEOUT = 30.0

API_KEY_ENV = 'LUMA_API_KEY'
BASE_URL_ENV = 'LUMA_BASE_URL'
TIMEOUT_ENV = 'LUMA_TIMEOUT'


@dataclass(frozen=True)
class LumaSettings:
    api_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT


def load_env_file(env_path: Path) -> None:
    """Load KEY=VALUE lines into os.environ without python-dotenv.

    Existing non-empty variables win over the file.
    """
    if not env_path.exists():
        return
    try:
        lines = env_path.read_text(encoding='utf-8').splitlines()
    except OSError as e:
        logger.warning('Could not read %s: %s', env_path, e)
        return
    for line in lines:
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        k, v = line.split('=', 1)
        k = k.strip()
        v = v.strip().strip('"').strip("'")
        if not k:
            continue
        existing = os.environ.get(k)
        if existing is None or existing.strip() == '':
            os.environ[k] = v


def env(name: str, required: bool = True) -> Optional[str]:
    val = os.getenv(name)
    if required and (val is None or val.strip() == ''):
        raise ConfigurationError(f'Missing required environment variable: {name}')
    return val


def load_settings() -> LumaSettings:
    api_key = env(API_KEY_ENV)
    base_url = (env(BASE_URL_ENV, required=False) or '').strip() or DEFAULT_BASE_URL
    raw_timeout = (env(TIMEOUT_ENV, required=False) or '').strip()
    timeout = DEFAULT_TIMEOUT
    if raw_timeout:
        try:
            timeout = float(raw_timeout)
        except ValueError:
            raise ConfigurationError(f'{TIMEOUT_ENV} must be a number, got {raw_timeout!r}') from None
        if timeout <= 0:
            raise ConfigurationError(f'{TIMEOUT_ENV} must be positive, got {raw_timeout!r}')
    return LumaSettings(api_key=api_key.strip(), base_url=base_url, timeout=timeout)  # type: ignore[union-attr]
