"""Allow ``python -m gitwrapped``."""

from gitwrapped.main import main

if __name__ == "__main__":
    raise SystemExit(main())
