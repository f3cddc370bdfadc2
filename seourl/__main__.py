"""Module entrypoint for running seourl as ``python -m seourl``."""

from __future__ import annotations

from seourl.cli import main


if __name__ == "__main__":
    main()
