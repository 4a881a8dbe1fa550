import logging
import sys
from typing import Optional

import click

from .errors import AllocationError, CarryError, DigitCountError
from .limits import array_size, max_digits, platform_array_limit, validate_digit_count
from .pipeline import open_sink, sink_filename
from .spigot import SETTLE_LOOKAHEAD, format_pi, write_pi
from .verify import verify_pi_text


_DIGITS_ARG = {"ignore_unknown_options": True}


def _checked_count(digits: int, lookahead: int) -> int:
    if lookahead < 0:
        raise click.BadParameter("must be >= 0", param_hint="--lookahead")
    try:
        return validate_digit_count(digits, lookahead=lookahead)
    except DigitCountError as e:
        raise click.ClickException(str(e)) from None


def _run(fn, *args, **kwargs):
    try:
        return fn(*args, **kwargs)
    except (AllocationError, CarryError) as e:
        raise click.ClickException(str(e)) from None


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("-v", "--verbose", is_flag=True, help="Log run details to stderr.")
def main(verbose: bool):
    if verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr, format="%(name)s: %(message)s")


@main.command(context_settings=_DIGITS_ARG)
@click.argument("digits", type=int)
@click.option("--chunk", "chunk_size", default=0, show_default=True, type=int, help="Group output into chunks of this many characters (0 writes digits as they settle).")
@click.option("--flush/--no-flush", default=True, show_default=True)
@click.option("--lookahead", default=SETTLE_LOOKAHEAD, show_default=True, type=int, help="Extra passes used to settle the final digits; 0 flushes the tail unsettled.")
def pi(digits: int, chunk_size: int, flush: bool, lookahead: int):
    n = _checked_count(digits, lookahead)
    if chunk_size < 0:
        raise click.ClickException("--chunk must be >= 0")
    _run(write_pi, n, open_sink("-"), chunk_size=chunk_size or None, flush=flush, lookahead=lookahead)


@main.command(context_settings=_DIGITS_ARG)
@click.argument("digits", type=int)
@click.option("--out", "out_path", default="pi.txt", show_default=True)
@click.option("--compression", type=click.Choice(["none", "gzip"], case_sensitive=False), default="none", show_default=True)
@click.option("--chunk", "chunk_size", default=10000, show_default=True, type=int)
@click.option("--newline/--no-newline", default=True, show_default=True)
@click.option("--lookahead", default=SETTLE_LOOKAHEAD, show_default=True, type=int)
def write(digits: int, out_path: str, compression: str, chunk_size: int, newline: bool, lookahead: int):
    n = _checked_count(digits, lookahead)
    if chunk_size < 1:
        raise click.ClickException("--chunk must be >= 1")
    compression = compression.lower().strip()
    filename = sink_filename(out_path, compression)
    with open_sink(filename, compression) as f:
        _run(write_pi, n, f, chunk_size=chunk_size, newline=newline, lookahead=lookahead)
    click.echo(filename)


@main.command(context_settings=_DIGITS_ARG)
@click.argument("digits", type=int)
@click.option("--lookahead", default=SETTLE_LOOKAHEAD, show_default=True, type=int)
def verify(digits: int, lookahead: int):
    n = _checked_count(digits, lookahead)
    text = _run(format_pi, n, lookahead=lookahead)
    ok, idx = verify_pi_text(text)
    if not ok:
        raise click.ClickException(f"verification failed at character {idx}")
    click.echo(f"ok: {n} digits")


@main.command()
@click.option("--array-limit", default=None, type=int, help="Override the platform list-length limit.")
@click.option("--lookahead", default=SETTLE_LOOKAHEAD, show_default=True, type=int)
def limits(array_limit: Optional[int], lookahead: int):
    limit = array_limit if array_limit is not None else platform_array_limit()
    try:
        maximum = max_digits(limit, lookahead)
    except ValueError as e:
        raise click.ClickException(str(e)) from None
    click.echo(f"array limit: {limit}")
    click.echo(f"maximum digits: {maximum}")
    click.echo(f"array size at maximum: {array_size(maximum + lookahead)}")


def run():
    main(auto_envvar_prefix="SPIGOTLOOM")


if __name__ == "__main__":
    run()
