"""Entry point for the N-Queens backtracking visualiser.

Run with: ``python src/main.py`` (or the installed ``queens-window``).
"""
from queens.app import main


if __name__ == "__main__":
    main()
