"""Allow ``python -m gitignorer``."""

from gitignorer.main import cli

cli()
