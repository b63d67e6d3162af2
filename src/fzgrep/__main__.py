"""Allow running fzgrep as ``python -m fzgrep``."""

from fzgrep.cli.app import main

if __name__ == "__main__":
    main()
