"""
llmstxt CLI - Flatten a documentation tree into llms.txt

Run from the root of a documentation repository:
1. Finds every Markdown file under docs/
2. Strips frontmatter and docs-site markup from each file
3. Writes the concatenated plain text to llms.txt
"""

import logging
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from llmstxt.config import GeneratorConfig
from llmstxt.errors import DirectoryReadError, OutputWriteError
from llmstxt.generator import LlmsTxtGenerator

app = typer.Typer(
    name="llmstxt",
    help="Flatten Markdown documentation into a single llms.txt file",
    add_completion=False,
)

console = Console()


def _version_callback(value: bool) -> None:
    if value:
        from llmstxt import __version__
        console.print(f"llmstxt version {__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False, show_time=False)],
        force=True,
    )


@app.command()
def generate(
    docs_dir: Optional[str] = typer.Option(
        None,
        "--docs-dir",
        "-d",
        help="Documentation directory relative to the current directory (default: docs)",
    ),
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output file relative to the current directory (default: llms.txt)",
    ),
    no_sort: bool = typer.Option(
        False,
        "--no-sort",
        help="Keep file system traversal order instead of sorting paths",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show llmstxt version and exit",
    ),
):
    """
    Generate llms.txt from the documentation tree.

    Every run reprocesses the whole tree and overwrites the output file.
    Files that cannot be read are skipped with a warning; a missing docs
    directory or an unwritable output file exits with status 1.

    Example:
        cd my-docs-site && llmstxt
    """
    _configure_logging(verbose)

    config = GeneratorConfig.from_env(
        docs_dir=docs_dir,
        output_filename=output,
        sort_paths=False if no_sort else None,
    )

    console.print(Panel.fit(
        "[bold cyan]llms.txt Generation[/bold cyan]\n\n"
        f"Docs: [yellow]{config.docs_path}[/yellow]\n"
        f"Output: [yellow]{config.output_path}[/yellow]",
        border_style="cyan"
    ))

    generator = LlmsTxtGenerator(config)

    try:
        result = generator.generate()
    except DirectoryReadError as e:
        console.print(f"\n[red]❌ Error: Failed to read documentation directory \"{e.path}\".[/red]")
        console.print("Please ensure you are running this command from the root of the documentation repository.")
        console.print(f"[red]{e.cause}[/red]")
        raise typer.Exit(1)
    except OutputWriteError as e:
        console.print(f"\n[red]❌ Error: Failed to write output file \"{e.path}\".[/red]")
        console.print(f"[red]{e.cause}[/red]")
        raise typer.Exit(1)

    summary_table = Table(show_header=True, header_style="bold cyan")
    summary_table.add_column("Metric")
    summary_table.add_column("Value", justify="right")

    summary_table.add_row("Files Found", str(result.files_found))
    summary_table.add_row("Files Processed", str(result.files_processed))
    summary_table.add_row("Files Skipped", str(len(result.files_skipped)))
    summary_table.add_row("Output Characters", str(result.output_chars))

    console.print()
    console.print(summary_table)

    if result.files_skipped:
        console.print("\n[yellow]Skipped files:[/yellow]")
        for skipped in result.files_skipped:
            console.print(f"  [yellow]{skipped.path}[/yellow]: {skipped.error}")

    console.print(f"\n[bold green]✅ Successfully generated combined file:[/bold green] [cyan]{result.output_path}[/cyan]")


if __name__ == "__main__":
    app()
