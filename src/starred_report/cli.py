"""CLI interface for Starred Report."""

import asyncio
import logging
from dataclasses import replace
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from starred_report import __version__
from starred_report.config import Config, get_config
from starred_report.output.console import Console as OutputConsole

app = typer.Typer(
    name="starred-report",
    help="Report on the repositories a GitHub user has starred",
    add_completion=False,
)

console = Console()


def version_callback(value: bool):
    """Print version and exit."""
    if value:
        console.print(f"starred-report version {__version__}")
        raise typer.Exit()


def setup_logging(verbose: bool = False, debug: bool = False):
    """Configure logging based on verbosity level."""
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """Starred Report - Markdown and JSON reports of starred GitHub repositories."""
    pass


@app.command()
def report(
    username: Optional[str] = typer.Argument(
        None,
        help="GitHub username (defaults to STARRED_REPORT_USERNAME)",
    ),
    markdown_output: Optional[Path] = typer.Option(
        None,
        "--markdown-output",
        "-m",
        help="Markdown report path (default: README.md)",
    ),
    json_output: Optional[Path] = typer.Option(
        None,
        "--json-output",
        "-j",
        help="JSON export path (default: starred-repos.json)",
    ),
    top: Optional[int] = typer.Option(
        None,
        "--top",
        "-n",
        min=0,
        help="Number of repositories in the top section (default: 10)",
    ),
    description_limit: Optional[int] = typer.Option(
        None,
        "--description-limit",
        min=1,
        help="Max description length in the table (default: 80)",
    ),
    print_markdown: bool = typer.Option(
        False,
        "--print/--no-print",
        help="Render the Markdown report in the terminal",
    ),
    no_save: bool = typer.Option(
        False,
        "--no-save",
        help="Don't write the output files",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Verbose output",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Minimal output",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Debug logging",
    ),
):
    """Fetch a user's starred repositories and write the reports.

    Writes a Markdown report (top repositories plus a full table) and a
    JSON export of every starred repository.

    Examples:
        starred-report report octocat
        starred-report report octocat --top 5 --print
        starred-report report octocat -m stars.md -j stars.json
    """
    setup_logging(verbose=verbose, debug=debug)

    config = get_config()
    overrides = {}
    if username:
        overrides["username"] = username
    if markdown_output is not None:
        overrides["markdown_path"] = str(markdown_output)
    if json_output is not None:
        overrides["json_path"] = str(json_output)
    if top is not None:
        overrides["top_n"] = top
    if description_limit is not None:
        overrides["description_limit"] = description_limit
    config = replace(config, **overrides)

    try:
        ok = asyncio.run(
            _run_report(
                config=config,
                print_markdown=print_markdown,
                save=not no_save,
                verbose=verbose,
                quiet=quiet,
            )
        )
    except KeyboardInterrupt:
        console.print("\n[yellow]Report cancelled[/yellow]")
        raise typer.Exit(1)
    except OSError as e:
        console.print(f"[red]Error writing report: {e}[/red]")
        raise typer.Exit(1)

    if not ok:
        raise typer.Exit(1)


async def _run_report(
    config: Config,
    print_markdown: bool,
    save: bool,
    verbose: bool,
    quiet: bool,
) -> bool:
    """Generate, display and save the report. Returns False if fetching failed."""
    from starred_report.sdk import StarredRepos

    output_console = OutputConsole(verbose=verbose, quiet=quiet)
    output_console.print_header(config.username)

    async with StarredRepos(config.username, config=config) as starred:
        output_console.print_verbose(f"[dim]GET {starred.api_url}[/dim]")

        with output_console.create_progress() as progress:
            task = progress.add_task("Fetching starred repositories...", total=None)
            result = await starred.generate_report()
            progress.update(task, completed=True)

        if result is None:
            output_console.print_error("Failed to fetch repositories")
            return False

        output_console.print(f"Found {result.count} starred repositories\n")
        output_console.print_top_repos(result, limit=config.top_n)

        if print_markdown:
            output_console.print_markdown(result.markdown)

        if save:
            markdown_file, json_file = starred.save_report(result)
            output_console.print_output_paths(str(markdown_file), str(json_file))

    output_console.print_success("\nReport complete!")
    return True


if __name__ == "__main__":
    app()
