"""CLI for hexplot."""

import logging
from pathlib import Path

import click


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Log each interpreted command")
def main(verbose: bool):
    """hexplot - Hex plotter instruction streams to readable traces."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@main.command()
@click.argument("data", required=False)
@click.option("--file", "-f", "input_file", type=Path, help="Read the instruction stream from a file")
@click.option("--sample", "-s", help="Use a named sample stream")
@click.option("--config", "-c", "config_path", type=Path, help="JSON config with keywords and work area")
def parse(data: str | None, input_file: Path | None, sample: str | None, config_path: Path | None):
    """Decode an instruction stream into a command trace."""
    from .config import Config
    from .errors import ParseError
    from .interpreter import CommandInterpreter
    from .samples import get_sample

    if sample:
        try:
            data = get_sample(sample).data
        except KeyError as e:
            raise click.BadParameter(e.args[0], param_hint="--sample")
    elif input_file:
        data = input_file.read_text()
    if not data:
        raise click.UsageError("Provide DATA, --file or --sample")

    config = Config.load(config_path) if config_path else Config()
    interpreter = CommandInterpreter(config)
    try:
        click.echo(interpreter.parse(data.strip()))
    except ParseError as e:
        cause = f" ({e.__cause__})" if e.__cause__ else ""
        click.echo(click.style(f"{e}{cause}", fg="red"), err=True)
        raise SystemExit(1)


@main.command(context_settings={"ignore_unknown_options": True})
@click.argument("values", nargs=-1, type=int, required=True)
def encode(values: tuple[int, ...]):
    """Encode signed values into their 4-digit wire form."""
    from .codec import encode as encode_value
    from .errors import RangeError

    for value in values:
        try:
            click.echo(f"{value}: {encode_value(value)}")
        except RangeError as e:
            click.echo(click.style(str(e), fg="red"), err=True)
            raise SystemExit(1)


@main.command()
def samples():
    """List sample instruction streams."""
    from .samples import SAMPLES

    for name, sample in SAMPLES.items():
        click.echo(f"{name}: {sample.description}")
        click.echo(f"  {sample.data}")


if __name__ == "__main__":
    main()
