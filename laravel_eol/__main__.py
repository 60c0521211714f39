"""Allow ``python -m laravel_eol``."""

from .cli.main import main

if __name__ == "__main__":
    main()
