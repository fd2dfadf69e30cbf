"""Module entrypoint so that ``python -m webbind ...`` works without the console script."""

from webbind.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
