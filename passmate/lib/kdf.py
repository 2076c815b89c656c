"""Key derivation (Argon2id) and the in-memory passphrase holder."""
from __future__ import annotations
import logging, secrets
from typing import Union
import argon2.profiles
from argon2 import Parameters
from argon2.exceptions import HashingError
from argon2.low_level import hash_secret_raw
from config.settings import SALT_LENGTH, KEY_LENGTH, KDF_PROFILE
from .errors import KeyDerivationError

log = logging.getLogger(__name__)

class Passphrase:
	"""Mutable holder for a passphrase that stays out of logs and tracebacks.

	The bytes live in a ``bytearray`` which is zeroed by :meth:`wipe` and on
	garbage collection. ``repr``/``str`` are masked and pickling is refused.
	Building one from another copies the bytes, so each owner wipes its own.
	"""
	__slots__ = ('_buf', '_wiped')

	def __init__(self, value: Union[str, bytes, bytearray, 'Passphrase']):
		if isinstance(value, Passphrase):
			value = value.reveal()
		elif isinstance(value, str):
			value = value.encode('utf-8')
		elif not isinstance(value, (bytes, bytearray)):
			raise TypeError(f"passphrase must be str, bytes or Passphrase, not {type(value).__name__}")
		self._buf = bytearray(value)
		self._wiped = False

	def reveal(self) -> bytes:
		if self._wiped:
			raise KeyDerivationError('Passphrase has been wiped')
		return bytes(self._buf)

	def wipe(self) -> None:
		for i in range(len(self._buf)):
			self._buf[i] = 0
		self._buf = bytearray()
		self._wiped = True

	@property
	def wiped(self) -> bool:
		return self._wiped

	def __len__(self) -> int:
		return len(self._buf)

	def __repr__(self) -> str:
		return 'Passphrase(********)'

	__str__ = __repr__

	def __reduce__(self):
		raise TypeError('Passphrase cannot be pickled')

	def __del__(self):
		buf = getattr(self, '_buf', None)
		if buf:
			for i in range(len(buf)):
				buf[i] = 0

PassphraseLike = Union[str, bytes, bytearray, Passphrase]

def _secret_bytes(passphrase: PassphraseLike) -> bytes:
	if isinstance(passphrase, Passphrase):
		return passphrase.reveal()
	if isinstance(passphrase, str):
		return passphrase.encode('utf-8')
	if isinstance(passphrase, (bytes, bytearray)):
		return bytes(passphrase)
	raise TypeError(f"passphrase must be str, bytes or Passphrase, not {type(passphrase).__name__}")

def _cost_profile(name: str) -> Parameters:
	profile = getattr(argon2.profiles, name, None)
	if not isinstance(profile, Parameters):
		raise KeyDerivationError(f"Unknown Argon2 profile: {name}")
	return profile

def generate_salt() -> bytes:
	return secrets.token_bytes(SALT_LENGTH)

def derive_key(passphrase: PassphraseLike, salt: bytes, profile: str | None = None) -> bytes:
	"""Derive a KEY_LENGTH-byte key from ``passphrase`` and ``salt`` with Argon2id.

	Cost parameters come from the named argon2-cffi profile (the library's
	recommended default unless configured otherwise); only the output length
	is fixed here. Same passphrase and salt always give the same key.
	"""
	if len(salt) != SALT_LENGTH:
		raise KeyDerivationError(f"Salt must be {SALT_LENGTH} bytes, got {len(salt)}")
	params = _cost_profile(profile or KDF_PROFILE)
	log.debug("Deriving key (profile=%s, salt=%d bytes)", profile or KDF_PROFILE, len(salt))
	try:
		return hash_secret_raw(
			secret=_secret_bytes(passphrase),
			salt=bytes(salt),
			time_cost=params.time_cost,
			memory_cost=params.memory_cost,
			parallelism=params.parallelism,
			hash_len=KEY_LENGTH,
			type=params.type,
			version=params.version,
		)
	except HashingError as e:
		raise KeyDerivationError(f"Argon2 rejected its inputs: {e}") from e
