"""Allow ``python -m naivehttp``."""

from naivehttp.http.cli import main

if __name__ == "__main__":
    main(prog_name="naivehttp")
