"""
Credential storage for the PDF Translator.

Credentials are kept in a dotenv-format file in the per-user configuration
directory:

    API_KEY='...'
    PROJECT_ID='...'
    ACCESS_TOKEN='...'
"""

import logging
import os
import sys
from pathlib import Path
from typing import Dict, Optional, Union

from dotenv import dotenv_values, set_key

from .config import (
    CONFIG_ENV_VAR, CONFIG_FILE_NAME, CONFIG_QUALIFIER, CONFIG_ORGANIZATION,
    CONFIG_APPLICATION, CREDENTIAL_KEYS
)
from .exceptions import ConfigError
from .models import Credentials
from .utils import mask_secret


def get_config_dir(platform: Optional[str] = None) -> Path:
    """Get the per-user configuration directory for this platform."""
    platform = platform or sys.platform
    home = Path.home()

    if platform.startswith('win'):
        base = Path(os.environ.get('APPDATA') or home / 'AppData' / 'Roaming')
        return base / CONFIG_ORGANIZATION / CONFIG_APPLICATION / 'config'
    if platform == 'darwin':
        bundle = f"{CONFIG_QUALIFIER}.{CONFIG_ORGANIZATION}.{CONFIG_APPLICATION.replace(' ', '-')}"
        return home / 'Library' / 'Application Support' / bundle

    base = Path(os.environ.get('XDG_CONFIG_HOME') or home / '.config')
    return base / CONFIG_APPLICATION.replace(' ', '').lower()


def get_config_path() -> Path:
    """Get the credentials file path, honouring the PDF_TRANSLATOR_CONFIG override."""
    override = os.getenv(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return get_config_dir() / CONFIG_FILE_NAME


class CredentialStore:
    """Loads and saves credentials in the per-user configuration file."""

    def __init__(self, path: Optional[Union[str, Path]] = None):
        self.path = Path(path) if path else get_config_path()

    def _read_values(self) -> Dict[str, Optional[str]]:
        """Read the raw key/value pairs of the file, without variable expansion."""
        return dotenv_values(self.path, interpolate=False)

    def load(self) -> Credentials:
        """Load credentials from the configuration file.

        Raises:
            ConfigError: If the file does not exist or lacks one of the keys
        """
        logging.debug(f"Loading credentials from {self.path}")
        if not self.path.is_file():
            raise ConfigError(
                f"No configuration found at {self.path}. Run with --config to create one."
            )

        values = self._read_values()
        missing = [key for key in CREDENTIAL_KEYS.values() if key not in values]
        if missing:
            raise ConfigError(f"Configuration file {self.path} is missing {', '.join(missing)}")

        return Credentials(**{
            field: values[key] or "" for field, key in CREDENTIAL_KEYS.items()
        })

    def save(self, candidate: Credentials) -> Credentials:
        """
        Merge the candidate onto the stored credentials and write the result.

        A field that is empty in the candidate keeps its previously saved value,
        so an empty string never overwrites a saved credential.

        Args:
            candidate: Newly supplied credentials

        Returns:
            The credentials as written
        """
        # Partially written files still contribute the keys they do hold
        values = self._read_values() if self.path.is_file() else {}
        previous = Credentials(**{
            field: values.get(key) or "" for field, key in CREDENTIAL_KEYS.items()
        })

        merged = Credentials()
        for field in CREDENTIAL_KEYS:
            new_value = getattr(candidate, field)
            old_value = getattr(previous, field)
            if not new_value and old_value:
                logging.debug(f"Keeping previously saved {field}")
                setattr(merged, field, old_value)
            else:
                setattr(merged, field, new_value)

        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.touch()
        for field, key in CREDENTIAL_KEYS.items():
            set_key(self.path, key, getattr(merged, field))

        logging.info(f"Credentials saved to {self.path}")
        return merged


def setup(candidate: Credentials, store: Optional[CredentialStore] = None) -> bool:
    """Save credentials given on the command line. Returns False if none were given."""
    if candidate.is_empty():
        print("You must at least provide one of the following arguments "
              "'--api-key <API_KEY>', '--access-token <ACCESS_TOKEN>', '--project-id <PROJECT_ID>'")
        return False

    store = store or CredentialStore()
    store.save(candidate)
    print("Configuration saved successfully!")
    return True


def describe(store: Optional[CredentialStore] = None) -> None:
    """Display the configuration file location and which credentials are set."""
    store = store or CredentialStore()
    print(f"Configuration file: {store.path}")

    try:
        credentials = store.load()
    except ConfigError as e:
        print(f"❌ {e}")
        return

    labels = {'api_key': 'API Key', 'project_id': 'Project ID', 'access_token': 'Access Token'}
    for field, label in labels.items():
        value = getattr(credentials, field)
        status = f"✅ {mask_secret(value)}" if value else "❌ not set"
        print(f"   {label}: {status}")
