"""Allow ``python -m g13profile``."""

from g13profile.cli.main import cli

if __name__ == "__main__":
    cli()
