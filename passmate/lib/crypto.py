"""Authenticated encryption (AES-256-GCM) for the vault payload."""
from __future__ import annotations
import secrets
from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from config.settings import KEY_LENGTH, NONCE_LENGTH, AUTH_TAG_LENGTH
from .errors import EncryptionError, DecryptionError

class VaultCrypto:
	"""Seal/open with an explicit nonce; the caller owns the container layout."""

	def generate_nonce(self) -> bytes:
		return secrets.token_bytes(NONCE_LENGTH)

	def encrypt(self, data: bytes, key: bytes, nonce: bytes) -> bytes:
		"""Return ciphertext with the GCM tag appended."""
		if len(key) != KEY_LENGTH: raise EncryptionError("Bad key length")
		if len(nonce) != NONCE_LENGTH: raise EncryptionError("Bad nonce length")
		try:
			enc = Cipher(algorithms.AES(key), modes.GCM(nonce)).encryptor()
			ct = enc.update(data) + enc.finalize()
		except (ValueError, TypeError, OverflowError) as e:
			raise EncryptionError(f"Encrypt failed: {e}") from e
		return ct + enc.tag

	def decrypt(self, blob: bytes, key: bytes, nonce: bytes) -> bytes:
		if len(key) != KEY_LENGTH: raise DecryptionError("Bad key length")
		if len(nonce) != NONCE_LENGTH: raise DecryptionError("Bad nonce length")
		if len(blob) < AUTH_TAG_LENGTH: raise DecryptionError("Ciphertext too short")
		ct = blob[:-AUTH_TAG_LENGTH]; tag = blob[-AUTH_TAG_LENGTH:]
		dec = Cipher(algorithms.AES(key), modes.GCM(nonce, tag)).decryptor()
		try:
			return dec.update(ct) + dec.finalize()
		except InvalidTag as e:
			raise DecryptionError("Authentication failed") from e
