"""Entry point for `python -m arkstatus`."""

from arkstatus.cli import main

main()
