"""Allow running as ``python -m tasktrack_cli``."""

from tasktrack_cli.main import app

if __name__ == "__main__":
    app()
