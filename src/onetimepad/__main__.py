"""Run the onetimepad command line, also reachable as `python -m onetimepad`."""
from onetimepad.cli import cli


def main():
    cli(prog_name="onetimepad")


if __name__ == "__main__":
    main()
