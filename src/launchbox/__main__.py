"""Allow ``python -m launchbox``."""

from launchbox.cli import app

app()
