import logging
import sys
from typing import Optional

import click
import structlog
from rich.console import Console

from caesar_breaker.breaker import Breaker
from caesar_breaker.cipher import CaesarCipher, KeyOutOfBoundsError
from caesar_breaker.dictionary import DictionaryLoadError
from caesar_breaker.models import BreakerConfig
from caesar_breaker.one_key import OneKeyBreaker
from caesar_breaker.two_key import TwoKeyBreaker
from caesar_breaker.ui import render_result
from caesar_breaker.utils import read_secret

BREAKERS: dict[int, type[Breaker]] = {
    1: OneKeyBreaker,
    2: TwoKeyBreaker,
}


def configure_logging(verbose: bool) -> None:
    """Send structlog output to stderr so stdout only carries results."""
    level = logging.DEBUG if verbose else logging.WARNING
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="%H:%M:%S"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def build_cipher(key: int, key2: Optional[int]) -> CaesarCipher:
    try:
        return CaesarCipher(key, key2)
    except KeyOutOfBoundsError as e:
        raise click.BadParameter(str(e)) from e


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Log search progress to stderr")
def cli(verbose: bool):
    configure_logging(verbose)


@cli.command("break")
@click.argument("secret")
@click.option("--dictionary", "-d", required=True, type=click.Path(exists=True, dir_okay=False))
@click.option("--keys", "-k", type=click.Choice(["1", "2"]), default="1", help="Number of alternating keys")
@click.option("--workers", "-w", type=click.IntRange(min=1), default=1, help="Threads for two-key brute force")
@click.option("--plain", is_flag=True, help="Print only the plaintext")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
def break_secret(secret: str, dictionary: str, keys: str, workers: int, plain: bool, as_json: bool):
    """Recover the key(s) and plaintext of SECRET, a file path or literal text."""
    breaker_cls = BREAKERS[int(keys)]
    try:
        breaker = breaker_cls.from_path(dictionary, BreakerConfig(workers=workers))
    except DictionaryLoadError as e:
        raise click.ClickException(str(e)) from e

    result = breaker.decrypt(secret)

    if as_json:
        click.echo(result.to_report().model_dump_json(indent=2))
    elif plain:
        if result.found:
            click.echo(result.plaintext)
    else:
        Console().print(render_result(result))

    if not result.found:
        sys.exit(1)


@cli.command()
@click.argument("text")
@click.option("--key", "-k", "key", required=True, type=int)
@click.option("--key2", type=int, default=None, help="Key for odd positions")
def encrypt(text: str, key: int, key2: Optional[int]):
    """Encrypt TEXT, a file path or literal text."""
    click.echo(build_cipher(key, key2).encrypt(read_secret(text)))


@cli.command()
@click.argument("text")
@click.option("--key", "-k", "key", required=True, type=int)
@click.option("--key2", type=int, default=None, help="Key for odd positions")
def decrypt(text: str, key: int, key2: Optional[int]):
    """Decrypt TEXT with known encryption key(s)."""
    click.echo(build_cipher(key, key2).decrypt(read_secret(text)))


if __name__ == "__main__":
    cli()
