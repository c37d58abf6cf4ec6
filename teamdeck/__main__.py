"""Allow ``python -m teamdeck``."""

from teamdeck.main import run

if __name__ == "__main__":
    run()
