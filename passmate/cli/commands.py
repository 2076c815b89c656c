"""CLI commands implemented with click.

Every command opens the vault at ``default_vault_path()``, asks for the
passphrase with hidden input, and maps vault errors to exit status 1.
"""
from __future__ import annotations
import logging, click
from contextlib import contextmanager
from pathlib import Path
from config.settings import APP_NAME, VERSION, LOG_LEVEL, default_vault_path
from passmate.lib.vault import Vault, VaultError, DecryptionError

password_option = click.option('--password', prompt=True, hide_input=True, help='Vault passphrase.')

def _vault_path() -> Path:
	path = default_vault_path()
	path.parent.mkdir(parents=True, exist_ok=True)
	return path

def _fail(message: str):
	click.echo(message, err=True)
	raise SystemExit(1)

@contextmanager
def _vault_errors():
	try:
		yield
	except DecryptionError:
		_fail('Error: wrong password or corrupted vault')
	except VaultError as e:
		_fail(f'Error: {e}')
	except OSError as e:
		_fail(f'Error: {e}')

@click.group()
@click.version_option(version=VERSION, prog_name=APP_NAME)
@click.option('--log-level', default=LOG_LEVEL, show_default=True,
	type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False))
def cli(log_level):
	"""Manage passwords with ease."""
	logging.basicConfig(level=log_level.upper(), format='%(levelname)s %(name)s: %(message)s')

@cli.command()
@click.option('--password', prompt=True, hide_input=True, confirmation_prompt=True, help='Vault passphrase.')
def init(password):
	"""Create (or re-encrypt) the vault."""
	with _vault_errors():
		path = _vault_path()
		vault = Vault.open(path, password)
		vault.save()
	click.echo(f'Initialized vault at {path}')

@cli.command('set')
@click.argument('name')
@click.argument('value')
@password_option
def set_entry(name, value, password):
	"""Add or update an entry."""
	with _vault_errors():
		vault = Vault.open(_vault_path(), password)
		vault.set(name, value)
		vault.save()

@cli.command('get')
@click.argument('name')
@password_option
def get_entry(name, password):
	"""Print the value of an entry."""
	with _vault_errors():
		value = Vault.open(_vault_path(), password).get(name)
	if value is None:
		_fail(f'{name} not found')
	click.echo(value)

@cli.command('remove')
@click.argument('name')
@password_option
def remove_entry(name, password):
	"""Delete an entry (no-op if absent)."""
	with _vault_errors():
		vault = Vault.open(_vault_path(), password)
		vault.remove(name)
		vault.save()

@cli.command('ls')
@password_option
def list_entries(password):
	"""List entry names, sorted."""
	with _vault_errors():
		names = Vault.open(_vault_path(), password).entries()
	for name in names:
		click.echo(name)
