"""Error taxonomy shared by the vault layers.

Each failure kind is its own class under ``VaultError`` so callers can catch
the whole family or a single kind. Underlying causes are chained with
``raise ... from`` and messages never include secret material.
"""
from __future__ import annotations


class VaultError(Exception):
	"""Base class for every vault failure."""


class StorageError(VaultError):
	"""Filesystem failure other than a missing vault file on open."""


class KeyDerivationError(VaultError):
	"""The password-hashing primitive rejected its inputs."""


class EncryptionError(VaultError):
	"""Authenticated encryption failed."""


class DecryptionError(VaultError):
	"""Authentication failed: wrong passphrase or tampered/corrupted file."""


class FormatError(VaultError):
	"""Decrypted plaintext is not a valid entry map."""


__all__ = ['VaultError','StorageError','KeyDerivationError','EncryptionError','DecryptionError','FormatError']
