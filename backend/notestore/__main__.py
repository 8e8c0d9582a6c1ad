"""Allows `python -m notestore --host ... --port ... --cache ...`."""

from notestore.cli import main

if __name__ == "__main__":
    main()
