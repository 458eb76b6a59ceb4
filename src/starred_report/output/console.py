"""Rich console output for starred repository reports."""

from rich.console import Console as RichConsole
from rich.markdown import Markdown
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from starred_report.models.repository import StarredReport
from starred_report.output.markdown_writer import format_count, top_repositories


class Console:
    """Wrapper for rich console output."""

    def __init__(self, verbose: bool = False, quiet: bool = False):
        self.console = RichConsole()
        self.verbose = verbose
        self.quiet = quiet

    def print(self, *args, **kwargs):
        """Print to console (respects quiet mode)."""
        if not self.quiet:
            self.console.print(*args, **kwargs)

    def print_verbose(self, *args, **kwargs):
        """Print only in verbose mode."""
        if self.verbose and not self.quiet:
            self.console.print(*args, **kwargs)

    def print_error(self, message: str):
        """Print error message."""
        self.console.print(f"[red]Error:[/red] {message}")

    def print_success(self, message: str):
        """Print success message."""
        if not self.quiet:
            self.console.print(f"[green]{message}[/green]")

    def create_progress(self) -> Progress:
        """Create a spinner for the fetch."""
        return Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=self.console,
            disable=self.quiet,
            transient=True,
        )

    def print_header(self, username: str):
        """Print report header."""
        if self.quiet:
            return

        self.console.print()
        self.console.print(
            Panel(
                f"[bold blue]Starred Repositories[/bold blue]\n[dim]User: {username}[/dim]",
                expand=False,
            )
        )
        self.console.print()

    def print_top_repos(self, report: StarredReport, limit: int = 10):
        """Print the most starred repositories as a table."""
        if self.quiet:
            return

        table = Table(title=f"Top {limit} Most Starred", expand=False)
        table.add_column("#", justify="right", style="dim")
        table.add_column("Repository")
        table.add_column("Language")
        table.add_column("Stars", justify="right")
        table.add_column("Forks", justify="right")

        for index, repo in enumerate(top_repositories(report.repos, limit), start=1):
            table.add_row(
                str(index),
                repo.full_name or repo.name,
                repo.language or "-",
                format_count(repo.stargazers_count),
                format_count(repo.forks_count),
            )

        self.console.print(table)
        self.console.print(f"[dim]Total repositories: {report.count}[/dim]")
        self.console.print()

    def print_markdown(self, markdown: str):
        """Render the Markdown report."""
        if not self.quiet:
            self.console.print(Markdown(markdown))

    def print_output_paths(self, *paths: str):
        """Print written file paths."""
        if not self.quiet:
            self.console.print(f"\n[green]Files saved:[/green] {' and '.join(paths)}")
