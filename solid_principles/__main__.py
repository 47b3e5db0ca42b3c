"""Allow ``python -m solid_principles``."""

from solid_principles.cli.main import main

if __name__ == "__main__":
    main()
