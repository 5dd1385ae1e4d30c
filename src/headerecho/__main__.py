"""``python -m headerecho`` — same as the ``headerecho`` command."""

from headerecho.cli import main

if __name__ == "__main__":
    main()
