"""rtfplain CLI - main entry point."""

import click
import json
import logging
from pathlib import Path

from rich.markup import escape

from .ui import ConvertUI, console, print_error, print_warning, print_success, print_info
from .ui import render_tokens
from ..batch.converter import BatchConverter
from ..config import Config
from ..converter.tokenizer import tokenize
from ..extractors.base import ExtractionError, read_text


@click.group()
@click.version_option(package_name="rtfplain")
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
def cli(verbose: bool):
    """rtfplain - Extract plain text from RTF letters."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


@cli.command()
@click.argument("path")
@click.option("--output", "-o", type=click.Path(), help="Directory for converted .txt files")
@click.option(
    "--format",
    "-f",
    "fmt",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
@click.option("--stdout", "to_stdout", is_flag=True, help="Print converted text to stdout")
@click.option("--quiet", "-q", is_flag=True, help="Minimal output")
def convert(path: str, output: str, fmt: str, to_stdout: bool, quiet: bool):
    """Convert RTF documents to plain text.

    PATH is a directory or file to convert.

    Examples:

        rtfplain convert letter.rtf --stdout

        rtfplain convert ./letters --output ./letters-txt

        rtfplain convert ./letters --format json --output batch.json
    """
    path_obj = Path(path).resolve()

    if not path_obj.exists():
        print_error(f"Path not found: {escape(path)}")
        raise SystemExit(1)

    config = Config.load()
    converter = BatchConverter(
        exclude_patterns=config.exclude_patterns,
        max_file_size_mb=config.max_file_size_mb,
        min_text_length=config.min_text_length,
    )

    files = list(converter._iter_files(path_obj))
    total = len(files)

    if total == 0:
        print_warning("No convertible files found.")
        raise SystemExit(0)

    # Live panel would interleave with text on stdout
    ui = ConvertUI(quiet=quiet or to_stdout)

    if not ui.quiet:
        print_info(f"Found {total} files to convert in {escape(str(path_obj))}")
        console.print()

    ui.start(total=total, source_path=str(path_obj))
    result = converter.convert(str(path_obj), on_file=ui.update)
    ui.complete(result)

    if to_stdout:
        for doc in result.documents:
            if doc.ok:
                click.echo(doc.text)
            else:
                click.echo(f"{doc.path}: {doc.error}", err=True)

    if output:
        output_path = Path(output)
        if fmt == "json":
            if output_path.suffix.lower() != ".json":
                output_path = output_path / f"rtfplain-{result.batch_id}.json"
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(json.dumps(result.to_dict(), indent=2), encoding="utf-8")
            if not quiet:
                print_success(f"Results saved to {escape(str(output_path))}")
        else:
            written = converter.write_outputs(result, output_path, suffix=config.output_suffix)
            if not quiet:
                print_success(f"Wrote {len(written)} files to {escape(str(output_path))}")
    elif fmt == "json":
        click.echo(json.dumps(result.to_dict(), indent=2))

    if result.documents_errored == result.total_documents:
        raise SystemExit(1)


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.option("--limit", "-n", type=int, help="Maximum tokens to show")
def tokens(file: str, limit: int):
    """Show the token stream of an RTF file.

    Useful for finding out why a letter converts badly.

    Examples:

        rtfplain tokens letter.rtf --limit 50
    """
    try:
        raw = read_text(Path(file))
    except ExtractionError as e:
        print_error(escape(str(e)))
        raise SystemExit(1)

    token_list = tokenize(raw)
    console.print(render_tokens(token_list, limit=limit))

    if limit is not None and len(token_list) > limit:
        console.print(f"\n[dim]... {len(token_list) - limit:,} more tokens[/dim]")
    console.print(f"\n[dim]{len(token_list):,} tokens[/dim]")


@cli.group()
def config():
    """Manage rtfplain configuration."""
    pass


@config.command("show")
def config_show():
    """Show current configuration.

    Examples:

        rtfplain config show
    """
    from ..config import CONFIG_FILE

    current = Config.load()

    console.print("\n[bold]rtfplain Configuration[/bold]\n")
    console.print(f"  Max file size:    {current.max_file_size_mb} MB")
    console.print(f"  Min text length:  {current.min_text_length} chars")
    console.print(f"  Output suffix:    {current.output_suffix}")
    console.print(f"  Exclude patterns: {', '.join(current.exclude_patterns) or '[dim](none)[/dim]'}")

    console.print(f"\n[dim]Config file: {escape(str(CONFIG_FILE))}[/dim]")


@config.command("set")
@click.argument("key")
@click.argument("value")
def config_set(key: str, value: str):
    """Set a configuration value.

    Keys:

        max_file_size_mb   Skip files larger than this

        min_text_length    Shorter results are reported as failed

        output_suffix      Suffix for files written by --output

    Examples:

        rtfplain config set max_file_size_mb 20

        rtfplain config set output_suffix .txt
    """
    current = Config.load()

    try:
        current.set_value(key, value)
    except KeyError:
        print_error(f"Unknown key: {escape(key)}")
        console.print("\nValid keys: max_file_size_mb, min_text_length, output_suffix")
        raise SystemExit(1)
    except ValueError as e:
        print_error(f"Invalid value for {escape(key)}: {escape(str(e))}")
        raise SystemExit(1)

    current.save()
    print_success(f"{key} set to {getattr(current, key)}")


@config.command("reset")
@click.confirmation_option(prompt="Reset configuration to defaults?")
def config_reset():
    """Delete the configuration file."""
    from ..config import reset_config

    reset_config()
    print_success("Configuration reset.")


if __name__ == "__main__":
    cli()
