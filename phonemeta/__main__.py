# file: phonemeta/__main__.py
from __future__ import annotations

from phonemeta.cli import main

if __name__ == "__main__":
    main()
