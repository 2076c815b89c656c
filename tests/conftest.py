import pytest

@pytest.fixture(autouse=True)
def cheap_kdf(monkeypatch):
	"""Use argon2's cheapest profile so the suite stays fast."""
	monkeypatch.setattr('passmate.lib.kdf.KDF_PROFILE', 'CHEAPEST')
