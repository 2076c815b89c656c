"""Encrypted vault container.

File format::

	[salt: 16][nonce: 12][AES-256-GCM ciphertext][tag: 16]

The plaintext is the entry map as UTF-8 JSON. Every :meth:`Vault.save` draws
a fresh salt and a fresh nonce and rewrites the whole file.

A missing file opens as an empty vault, so a mistyped path is not an error
either; the open is logged at INFO to make that visible. There is no file
locking: concurrent writers race and the last replace wins.
"""
from __future__ import annotations
import json, os, logging
from pathlib import Path
from typing import Dict, List, Optional, Union
from config.settings import SALT_LENGTH, HEADER_LENGTH, AUTH_TAG_LENGTH, TEMP_SUFFIX
from .crypto import VaultCrypto
from .errors import (
	VaultError, StorageError, KeyDerivationError, EncryptionError, DecryptionError, FormatError
)
from .kdf import Passphrase, PassphraseLike, derive_key, generate_salt

log = logging.getLogger(__name__)

def encode_entries(data: Dict[str, str]) -> bytes:
	return json.dumps(data, sort_keys=True).encode('utf-8')

def decode_entries(raw: bytes) -> Dict[str, str]:
	try:
		obj = json.loads(raw.decode('utf-8'))
	except (UnicodeDecodeError, json.JSONDecodeError) as e:
		raise FormatError(f"Vault payload is not valid JSON: {e}") from e
	if not isinstance(obj, dict):
		raise FormatError(f"Vault payload must be an object, got {type(obj).__name__}")
	if not all(isinstance(v, str) for v in obj.values()):
		raise FormatError("Vault entries must map names to text values")
	return obj

def pack(salt: bytes, nonce: bytes, sealed: bytes) -> bytes:
	return salt + nonce + sealed

def unpack(raw: bytes) -> tuple[bytes, bytes, bytes]:
	"""Split file bytes into (salt, nonce, ciphertext+tag)."""
	if len(raw) < HEADER_LENGTH + AUTH_TAG_LENGTH:
		raise DecryptionError("Vault file too short")
	return raw[:SALT_LENGTH], raw[SALT_LENGTH:HEADER_LENGTH], raw[HEADER_LENGTH:]

class Vault:
	"""In-memory entry map bound to its encrypted file."""

	def __init__(self, path: Union[str, Path], passphrase: PassphraseLike, data: Optional[Dict[str, str]] = None):
		self._path = Path(path)
		self._passphrase = Passphrase(passphrase)
		self._data: Dict[str, str] = dict(data or {})
		self._crypto = VaultCrypto()

	@classmethod
	def open(cls, path: Union[str, Path], passphrase: PassphraseLike) -> 'Vault':
		"""Open the vault at ``path``, or return an empty one if the file is missing.

		Raises DecryptionError on a wrong passphrase or a damaged file,
		FormatError if the decrypted payload is not an entry map, and
		StorageError for any other filesystem failure.
		"""
		path = Path(path)
		secret = Passphrase(passphrase)
		try:
			raw = path.read_bytes()
		except FileNotFoundError:
			log.info("No vault at %s; starting empty", path)
			return cls(path, secret)
		except OSError as e:
			log.error("Failed to read vault %s: %s", path, e)
			raise StorageError(f"Failed to read vault {path}: {e}") from e
		salt, nonce, sealed = unpack(raw)
		key = derive_key(secret, salt)
		plaintext = VaultCrypto().decrypt(sealed, key, nonce)
		data = decode_entries(plaintext)
		log.info("Opened vault %s (%d entries)", path, len(data))
		return cls(path, secret, data)

	@property
	def path(self) -> Path:
		return self._path

	def get(self, name: str) -> Optional[str]:
		return self._data.get(name)

	def set(self, name: str, value: str) -> None:
		if not isinstance(name, str) or not isinstance(value, str):
			raise TypeError('Entry names and values must be str')
		self._data[name] = value

	def remove(self, name: str) -> None:
		self._data.pop(name, None)

	def entries(self) -> List[str]:
		return sorted(self._data)

	def save(self) -> None:
		"""Encrypt the entry map under a fresh salt and nonce and replace the file.

		The map itself is never touched, so a failed save can be retried.
		"""
		salt = generate_salt()
		key = derive_key(self._passphrase, salt)
		nonce = self._crypto.generate_nonce()
		blob = pack(salt, nonce, self._crypto.encrypt(encode_entries(self._data), key, nonce))
		self._write(blob)
		log.info("Vault saved -> %s", self._path)

	def _write(self, blob: bytes) -> None:
		tmp = self._path.with_name(self._path.name + TEMP_SUFFIX)
		try:
			fd = os.open(tmp, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
			with os.fdopen(fd, 'wb') as f:
				f.write(blob)
			os.replace(tmp, self._path)
		except OSError as e:
			try:
				tmp.unlink(missing_ok=True)
			except OSError:
				log.warning("Could not remove temporary file %s", tmp)
			log.error("Failed to save vault %s: %s", self._path, e)
			raise StorageError(f"Failed to save vault {self._path}: {e}") from e

	def __contains__(self, name: object) -> bool:
		return name in self._data

	def __len__(self) -> int:
		return len(self._data)

	def __repr__(self) -> str:
		return f"Vault(path={str(self._path)!r}, entries={len(self._data)})"

__all__ = [
	'Vault', 'Passphrase', 'derive_key', 'generate_salt',
	'VaultError', 'StorageError', 'KeyDerivationError', 'EncryptionError', 'DecryptionError', 'FormatError',
]
