"""Project configuration settings.

Container layout constants and the few environment-driven knobs used by
the CLI. Nothing here touches the filesystem at import time.
"""

from pathlib import Path
import os

import click

APP_NAME = "passmate"
VERSION = "0.1.0"

# Container layout: [salt][nonce][ciphertext][tag]
SALT_LENGTH = 16
NONCE_LENGTH = 12
KEY_LENGTH = 32  # AES-256
AUTH_TAG_LENGTH = 16  # GCM tag length
HEADER_LENGTH = SALT_LENGTH + NONCE_LENGTH

# Argon2 cost profile, by name, from argon2.profiles.
# Vaults carry no parameters: changing this locks out existing files.
KDF_PROFILE = os.environ.get("PASSMATE_KDF_PROFILE", "RFC_9106_LOW_MEMORY")

# Vault
VAULT_FILENAME = "default.vault"
TEMP_SUFFIX = ".tmp"

# Logging
LOG_LEVEL = os.environ.get("PASSMATE_LOG_LEVEL", "WARNING")


def default_vault_path() -> Path:
	"""Vault file used by the CLI.

	Resolved per call so ``PASSMATE_VAULT_PATH`` overrides set after import
	(tests) are honored.
	"""
	env_path = os.environ.get("PASSMATE_VAULT_PATH")
	if env_path:
		return Path(env_path)
	return Path(click.get_app_dir(APP_NAME)) / VAULT_FILENAME


__all__ = [
	'APP_NAME','VERSION','SALT_LENGTH','NONCE_LENGTH','KEY_LENGTH','AUTH_TAG_LENGTH',
	'HEADER_LENGTH','KDF_PROFILE','VAULT_FILENAME','TEMP_SUFFIX','LOG_LEVEL','default_vault_path'
]
