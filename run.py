"""Entrypoint that reads PORT and NAME from environment, no shell expansion needed."""
import sys

from greeter.server import main

if __name__ == "__main__":
    sys.exit(main())
