import pytest
from click.testing import CliRunner
from config.settings import VERSION
from passmate.cli.commands import cli

@pytest.fixture
def vault_path(monkeypatch, tmp_path):
	path = tmp_path / 'config' / 'default.vault'
	monkeypatch.setenv('PASSMATE_VAULT_PATH', str(path))
	return path

def run(*args, input='testpwd\n'):
	return CliRunner().invoke(cli, list(args), input=input, prog_name='passmate')

def test_cli_help():
	r = run('--help', input=None)
	assert r.exit_code == 0
	assert 'Usage: passmate' in r.output
	assert 'Manage passwords with ease.' in r.output
	for cmd in ('init', 'set', 'get', 'remove', 'ls'):
		assert cmd in r.output

def test_cli_version():
	r = run('--version', input=None)
	assert r.exit_code == 0
	assert VERSION in r.output

def test_cli_init(vault_path):
	r = run('init', input='testpwd\ntestpwd\n')
	assert r.exit_code == 0
	assert f'Initialized vault at {vault_path}' in r.output
	assert vault_path.exists()

def test_cli_set_and_get(vault_path):
	assert run('set', 'mypass', 'testpass').exit_code == 0
	r = run('get', 'mypass')
	assert r.exit_code == 0
	assert 'testpass' in r.output

def test_cli_get_not_found(vault_path):
	r = run('get', 'mypass')
	assert r.exit_code == 1
	assert 'mypass not found' in r.output

def test_cli_remove(vault_path):
	assert run('set', 'mypass', 'testpass').exit_code == 0
	assert run('remove', 'mypass').exit_code == 0
	r = run('get', 'mypass')
	assert r.exit_code == 1
	assert 'mypass not found' in r.output

def test_cli_ls_sorted(vault_path):
	assert run('set', 'pass2', 'secretpass2').exit_code == 0
	assert run('set', 'pass1', 'secretpass1').exit_code == 0
	r = run('ls')
	assert r.exit_code == 0
	assert r.output.endswith('pass1\npass2\n')

def test_cli_wrong_password(vault_path):
	assert run('set', 'mypass', 'testpass').exit_code == 0
	r = run('get', 'mypass', input='wrongpwd\n')
	assert r.exit_code == 1
	assert 'wrong password or corrupted vault' in r.output
	assert 'testpass' not in r.output

def test_cli_password_option(vault_path):
	assert run('set', 'k', 'v', '--password', 'pw', input=None).exit_code == 0
	r = run('ls', '--password', 'pw', input=None)
	assert r.output == 'k\n'
