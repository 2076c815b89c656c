"""Configuration package for passmate.

Application code imports from ``config.settings``; the names are re-exported
here so ``from config import SALT_LENGTH`` keeps working for scripts.
"""

from config.settings import (
	APP_NAME, VERSION, SALT_LENGTH, NONCE_LENGTH, KEY_LENGTH, AUTH_TAG_LENGTH,
	HEADER_LENGTH, KDF_PROFILE, VAULT_FILENAME, TEMP_SUFFIX, LOG_LEVEL,
	default_vault_path,
)

__all__ = [
	'APP_NAME', 'VERSION', 'SALT_LENGTH', 'NONCE_LENGTH', 'KEY_LENGTH', 'AUTH_TAG_LENGTH',
	'HEADER_LENGTH', 'KDF_PROFILE', 'VAULT_FILENAME', 'TEMP_SUFFIX', 'LOG_LEVEL',
	'default_vault_path',
]
