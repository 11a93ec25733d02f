"""`python -m caesar_breaker`, same as the `caesar-breaker` script."""
from caesar_breaker.cli import cli


def main():
    """Run the caesar-breaker command line on sys.argv."""
    cli(prog_name="caesar-breaker")


if __name__ == "__main__":
    main()
