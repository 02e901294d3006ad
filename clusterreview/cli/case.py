"""Commands for inspecting cluster runs in a case."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..case import YamlCase
from ..config import Config
from ..errors import ClusterReviewError
from ..models import cluster_display_id
from ..review import sorted_clusters

console = Console()


def open_case(config: Config, case_path: Optional[Path]) -> YamlCase:
    """Load the case file named on the command line or in the config."""
    try:
        return YamlCase.load(config.get_case_path(case_path))
    except (FileNotFoundError, ValueError, ClusterReviewError) as e:
        console.print(f"[red]❌ {escape(str(e))}[/red]")
        raise typer.Exit(1)


def runs_command(
    case_path: Optional[Path] = typer.Option(None, "--case", help="Case file (YAML)"),
    config_path: Optional[Path] = typer.Option(None, "--config", help="Config file"),
) -> None:
    """List the cluster runs in a case."""
    case = open_case(Config(config_path), case_path)
    cluster_runs = case.cluster_runs()

    if not cluster_runs:
        console.print("[yellow]No cluster runs in case.[/yellow]")
        return

    table = Table(title="Cluster Runs")
    table.add_column("Name", style="cyan")
    table.add_column("Clusters", style="green")
    table.add_column("Items", style="yellow")

    for cluster_run in cluster_runs:
        clusters = cluster_run.clusters()
        table.add_row(
            cluster_run.name,
            str(len(clusters)),
            str(sum(len(c.members()) for c in clusters)),
        )

    console.print(table)


def clusters_command(
    cluster_run: str = typer.Argument(..., help="Cluster run name"),
    case_path: Optional[Path] = typer.Option(None, "--case", help="Case file (YAML)"),
    config_path: Optional[Path] = typer.Option(None, "--config", help="Config file"),
) -> None:
    """List the clusters of a cluster run, sorted by ID."""
    case = open_case(Config(config_path), case_path)

    try:
        run = case.get_cluster_run(cluster_run)
    except ClusterReviewError as e:
        console.print(f"[red]❌ {escape(str(e))}[/red]")
        raise typer.Exit(1)

    table = Table(title=f"Clusters: {run.name}")
    table.add_column("Cluster Run", style="cyan")
    table.add_column("ID", style="magenta")
    table.add_column("Items", style="green")
    table.add_column("Deduplicated Items", style="yellow")

    for cluster in sorted_clusters(run):
        members = cluster.members()
        table.add_row(
            run.name,
            str(cluster_display_id(cluster.id)),
            str(len(members)),
            str(case.deduplicated_count(members)),
        )

    console.print(table)
