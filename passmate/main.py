"""Program entry point (CLI dispatcher).

All behavior lives in the click group; main remains a thin wrapper.
"""
from __future__ import annotations
from passmate.cli.commands import cli

def main():  # pragma: no cover - thin wrapper
	cli(prog_name='passmate')

if __name__ == '__main__':  # pragma: no cover
	main()
