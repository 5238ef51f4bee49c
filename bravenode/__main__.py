"""Entry point for running bravenode as a module: python -m bravenode"""

from bravenode.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
