"""Allow running rmds as ``python -m rmds``."""

from rmds.cli.main import run

if __name__ == "__main__":
    run()
