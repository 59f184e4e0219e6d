import math
from typing import NoReturn, Optional

import click
from rich.console import Console
from rich.table import Table

from onetimepad.errors import OneTimePadError
from onetimepad.logs import configure_logging
from onetimepad.pad import OneTimePad
from onetimepad.pad_source import DEFAULT_RANDOM_INDEX
from onetimepad.utils import (
    PadSourceLoadError,
    PadSourceSignatureError,
    load_pad_source,
    load_text,
)

ALPHABET_COLUMNS = 4


@click.group()
@click.option(
    "--alphabet",
    "-a",
    envvar="ONETIMEPAD_ALPHABET",
    help="The alphabet used by this converter. By default, ASCII is used.",
)
@click.option(
    "--pad-source",
    envvar="ONETIMEPAD_PAD_SOURCE",
    type=click.Path(exists=True, dir_okay=False),
    help="Python file defining random_index(size) used to generate pads.",
)
@click.option("--verbose", "-v", envvar="ONETIMEPAD_VERBOSE", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, alphabet: Optional[str], pad_source: Optional[str], verbose: bool):
    configure_logging(verbose)
    ctx.obj = {"alphabet": alphabet, "pad_source": pad_source}


def new_pad(ctx: click.Context, action: str) -> OneTimePad:
    """Build a pad from the global options, aborting with status 1 on bad input."""
    random_index = DEFAULT_RANDOM_INDEX
    try:
        if ctx.obj["pad_source"] is not None:
            random_index = load_pad_source(ctx.obj["pad_source"])
        return OneTimePad(ctx.obj["alphabet"], random_index)
    except (OneTimePadError, PadSourceLoadError, PadSourceSignatureError) as e:
        fail(ctx, action, e)


def fail(ctx: click.Context, action: str, error: Exception) -> NoReturn:
    click.echo(f"Failed to {action}: {error}", err=True)
    ctx.exit(1)


def read_text(
    ctx: click.Context, action: str, value: Optional[str], file_path: Optional[str], name: str
) -> Optional[str]:
    """Take text from an argument or a file, but never both."""
    if value is not None and file_path is not None:
        raise click.UsageError(f"Give the {name} as an argument or a file, not both.", ctx)
    if file_path is None:
        return value
    try:
        return load_text(file_path)
    except UnicodeDecodeError as e:
        fail(ctx, action, e)


@cli.command()
@click.argument("plaintext", required=False)
@click.option("--pad", "-p", help="The pad to use, or if not specified it will be randomly generated.")
@click.option("--input-file", "-i", type=click.Path(exists=True, dir_okay=False), help="Read the plain text from a file.")
@click.option("--pad-file", type=click.Path(exists=True, dir_okay=False), help="Read the pad from a file.")
@click.pass_context
def encode(
    ctx: click.Context,
    plaintext: Optional[str],
    pad: Optional[str],
    input_file: Optional[str],
    pad_file: Optional[str],
):
    """Encode PLAINTEXT with a one time pad."""
    plaintext = read_text(ctx, "encode", plaintext, input_file, "plain text")
    if plaintext is None:
        raise click.UsageError("Missing PLAINTEXT or --input-file.", ctx)
    pad = read_text(ctx, "encode", pad, pad_file, "pad")

    one_time_pad = new_pad(ctx, "encode")
    try:
        if pad is not None:
            one_time_pad.push_to_pad(pad)
        else:
            one_time_pad.generate_pad(len(plaintext))
        result = one_time_pad.encode(plaintext)
    except OneTimePadError as e:
        fail(ctx, "encode", e)

    click.echo(f"       Pad: {result.pad}", err=True)
    click.echo("Ciphertext: ", err=True, nl=False)
    click.echo(result.cipher_text)


@cli.command()
@click.argument("ciphertext", required=False)
@click.argument("pad", required=False)
@click.option("--input-file", "-i", type=click.Path(exists=True, dir_okay=False), help="Read the cipher text from a file.")
@click.option("--pad-file", type=click.Path(exists=True, dir_okay=False), help="Read the pad from a file.")
@click.pass_context
def decode(
    ctx: click.Context,
    ciphertext: Optional[str],
    pad: Optional[str],
    input_file: Optional[str],
    pad_file: Optional[str],
):
    """Decode CIPHERTEXT with PAD. The cipher text and pad are interchangeable."""
    if input_file is not None and ciphertext is not None and pad is None:
        # With the cipher text in a file, the only positional argument is the pad.
        ciphertext, pad = None, ciphertext
    ciphertext = read_text(ctx, "decode", ciphertext, input_file, "cipher text")
    pad = read_text(ctx, "decode", pad, pad_file, "pad")
    if ciphertext is None or pad is None:
        raise click.UsageError("Both the cipher text and the pad are required.", ctx)

    one_time_pad = new_pad(ctx, "decode")
    try:
        one_time_pad.push_to_pad(pad)
        plaintext = one_time_pad.decode(ciphertext)
    except OneTimePadError as e:
        fail(ctx, "decode", e)

    click.echo(plaintext)


@cli.command()
@click.argument("size", type=click.IntRange(min=0))
@click.pass_context
def generate(ctx: click.Context, size: int):
    """Print SIZE random pad characters to share ahead of a conversation."""
    one_time_pad = new_pad(ctx, "generate")
    try:
        one_time_pad.generate_pad(size)
    except OneTimePadError as e:
        fail(ctx, "generate", e)

    click.echo(one_time_pad.peek_pad())


def render_alphabet(one_time_pad: OneTimePad) -> Table:
    """Render the alphabet as a table of index / symbol pairs."""
    alphabet = one_time_pad.alphabet
    table = Table(title=f"Alphabet ({len(alphabet)} symbols)")
    for _ in range(ALPHABET_COLUMNS):
        table.add_column("Index", justify="right", style="cyan")
        table.add_column("Symbol", justify="center", style="green")

    symbols = list(alphabet)
    rows = math.ceil(len(symbols) / ALPHABET_COLUMNS)
    for row in range(rows):
        cells = []
        for column in range(ALPHABET_COLUMNS):
            index = column * rows + row
            if index < len(symbols):
                cells.extend([str(index), repr(symbols[index])])
            else:
                cells.extend(["", ""])
        table.add_row(*cells)

    return table


@cli.command("alphabet")
@click.pass_context
def show_alphabet(ctx: click.Context):
    """Show the active alphabet and the index of every symbol."""
    one_time_pad = new_pad(ctx, "show alphabet")
    Console().print(render_alphabet(one_time_pad))


if __name__ == "__main__":
    cli()
