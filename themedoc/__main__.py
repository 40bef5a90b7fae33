"""Entry point for `python -m themedoc`."""

import sys


def main():
    from themedoc.app import run_app
    sys.exit(run_app())


if __name__ == "__main__":
    main()
