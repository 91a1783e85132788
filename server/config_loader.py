"""
Configuration loader for the media storage server.
Loads settings from config.ini and environment variables.
"""
import os
import configparser
from pathlib import Path
from typing import FrozenSet, List
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Get the directory containing this file
BASE_DIR = Path(__file__).parent

# Load config.ini
config = configparser.ConfigParser()
config_path = BASE_DIR / 'config.ini'
config.read(config_path)

DEFAULT_EXCLUDED = (
    '.git,node_modules,.DS_Store,package.json,package-lock.json,'
    'server.js,Dockerfile,.dockerignore,storage_api,__pycache__'
)


def _split(value: str) -> List[str]:
    return [item.strip() for item in value.split(',') if item.strip()]


class Config:
    """Configuration class that combines config.ini and environment variables."""

    # Server Configuration
    SERVER_HOST = os.getenv('HOST', config.get('server', 'host', fallback='0.0.0.0'))
    SERVER_PORT = int(os.getenv('PORT', config.getint('server', 'port', fallback=3000)))
    LOG_LEVEL = os.getenv('LOG_LEVEL', config.get('server', 'log_level', fallback='info'))

    # CORS Configuration
    CORS_ALLOW_ORIGINS = _split(config.get('cors', 'allow_origins', fallback='*'))
    CORS_ALLOW_CREDENTIALS = config.getboolean('cors', 'allow_credentials', fallback=False)
    CORS_ALLOW_METHODS = _split(config.get('cors', 'allow_methods', fallback='*'))
    CORS_ALLOW_HEADERS = _split(config.get('cors', 'allow_headers', fallback='*'))

    # Storage Configuration
    # relative roots in config.ini are relative to this directory
    STORAGE_DIR = Path(os.getenv('STORAGE_DIR') or BASE_DIR / config.get('storage', 'root', fallback='.'))
    EXCLUDED_ENTRIES: FrozenSet[str] = frozenset(
        _split(config.get('storage', 'excluded', fallback=DEFAULT_EXCLUDED))
    )

    # API description
    API_NAME = config.get('api', 'name', fallback='Media Storage API')
    API_VERSION = config.get('api', 'version', fallback='1.0.0')


# Export singleton instance
settings = Config()
