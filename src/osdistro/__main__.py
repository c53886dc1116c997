"""Allow ``python -m osdistro``."""

from osdistro.cli import main

if __name__ == "__main__":
    main()
