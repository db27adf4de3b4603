from __future__ import annotations

from meetzone.cli import main


if __name__ == "__main__":
    main()
