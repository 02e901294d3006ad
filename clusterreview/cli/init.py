"""Init command implementation."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel

from ..config import ConfigModel, default_config_path, save_config

console = Console()


def init_command(
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Config file to create (default: ~/.config/clusterreview/config.yaml)",
    ),
    case_path: Optional[Path] = typer.Option(
        None,
        "--case",
        help="Default case file",
    ),
    report_dir: Optional[Path] = typer.Option(
        None,
        "--report-dir",
        help="Directory for JSON run reports",
    ),
    include_pseudo: bool = typer.Option(
        False,
        "--include-pseudo/--exclude-pseudo",
        help="Tag pseudo-clusters when tagging all clusters",
    ),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing config"),
) -> None:
    """Create a cluster review tagging config file."""
    if config_path is None:
        config_path = default_config_path()

    if config_path.exists() and not force:
        console.print(f"[red]Config already exists: {config_path} (use --force to overwrite)[/red]")
        raise typer.Exit(1)

    config = ConfigModel(
        case_path=str(case_path) if case_path else None,
        include_pseudo_clusters=include_pseudo,
        report_dir=str(report_dir) if report_dir else None,
    )
    save_config(config, config_path)

    console.print(
        Panel(
            f"[green]✅ Created config: {config_path}[/green]\n\n"
            f"Next steps:\n"
            f"1. List cluster runs: [bold]clusterreview runs --case CASE.yaml[/bold]\n"
            f"2. Tag clusters: [bold]clusterreview tag RUN --case CASE.yaml[/bold]",
            style="green",
        )
    )
