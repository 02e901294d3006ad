"""Tag command implementation."""

import signal
from pathlib import Path
from typing import List, Optional

import pendulum
import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..config import Config
from ..errors import ClusterReviewError
from ..models import TagRunResult, parse_cluster_id
from ..review import CancellationToken, ClusterTagger, ConsoleProgressReporter, select_clusters
from .case import open_case

console = Console()


def _handle_interrupts(token: CancellationToken):
    """Turn the first Ctrl-C into an abort request; a second one interrupts."""

    def handler(signum, frame):
        if token.is_set():
            raise KeyboardInterrupt
        token.cancel()
        console.print("[yellow]Abort requested, finishing current cluster...[/yellow]")

    return signal.signal(signal.SIGINT, handler)


def _report_path(config: Config, report: Optional[Path], result: TagRunResult) -> Optional[Path]:
    if report is not None:
        return report
    report_dir = config.report_dir
    if report_dir is None:
        return None
    timestamp = pendulum.instance(result.started_at).format("YYYYMMDD-HHmmss")
    return report_dir / f"{result.cluster_run}-{timestamp}.json"


def _save_report(result: TagRunResult, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(result.model_dump_json(indent=2))


def _print_summary(result: TagRunResult) -> None:
    """Print tagging summary."""
    table = Table(title=f"Cluster Review Tagging: {result.cluster_run}")
    table.add_column("Cluster", style="cyan")
    table.add_column("Label", style="magenta")
    table.add_column("Statuses", style="dim")
    table.add_column("Attachments", style="yellow")
    table.add_column("Tagged", style="green")

    for cluster in result.clusters:
        statuses = ", ".join(f"{s}: {n}" for s, n in cluster.status_counts.items())
        table.add_row(
            str(cluster.display_id),
            cluster.label,
            statuses or "-",
            f"{cluster.descendants_added}/{cluster.descendants_found}",
            str(cluster.tagged_items),
        )

    console.print(table)
    console.print(
        f"Clusters: {result.completed_clusters}/{result.total_clusters} • "
        f"Items tagged: {result.tagged_items} • Status: {result.status}"
    )


def tag_command(
    cluster_run: str = typer.Argument(..., help="Cluster run name"),
    clusters: Optional[List[str]] = typer.Option(
        None,
        "--cluster",
        "-k",
        help="Cluster ID to tag (repeatable; 'unclusterable' and 'ignorable' name the pseudo-clusters). Default: all",
    ),
    case_path: Optional[Path] = typer.Option(None, "--case", help="Case file (YAML)"),
    include_pseudo: Optional[bool] = typer.Option(
        None,
        "--include-pseudo/--exclude-pseudo",
        help="Include pseudo-clusters when tagging all clusters",
    ),
    report: Optional[Path] = typer.Option(None, "--report", help="Write a JSON run report"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Find review sets without tagging"),
    config_path: Optional[Path] = typer.Option(None, "--config", help="Config file"),
) -> None:
    """Tag the items for review in each selected cluster of a cluster run."""
    config = Config(config_path)

    try:
        settings = config.config
        case = open_case(config, case_path)
        if include_pseudo is None:
            include_pseudo = settings.include_pseudo_clusters

        run = case.get_cluster_run(cluster_run)
        cluster_ids = [parse_cluster_id(c) for c in clusters] if clusters else None
        selected = select_clusters(run, cluster_ids, include_pseudo=include_pseudo)
    except (ClusterReviewError, ValueError) as e:
        console.print(f"[red]❌ {escape(str(e))}[/red]")
        raise typer.Exit(1)

    token = CancellationToken()
    previous_handler = _handle_interrupts(token)
    try:
        with ConsoleProgressReporter(console, timestamps=settings.log_timestamps) as reporter:
            tagger = ClusterTagger(
                None if dry_run else case,
                case,
                case,
                reporter=reporter,
                cancellation=token,
            )
            result = tagger.tag_all(run.name, selected)
    except KeyboardInterrupt:
        console.print("\n[yellow]Tagging interrupted by user[/yellow]")
        raise typer.Exit(1)
    except Exception as e:
        console.print(f"[red]Tagging failed: {type(e).__name__}: {escape(str(e))}[/red]")
        raise typer.Exit(1)
    finally:
        if previous_handler is not None:
            signal.signal(signal.SIGINT, previous_handler)

    if not dry_run and settings.save_tags and result.completed_clusters:
        saved = case.save()
        console.print(f"✅ Saved tags to {saved}")

    report_path = _report_path(config, report, result)
    if report_path is not None:
        _save_report(result, report_path)
        console.print(f"✅ Wrote report: {report_path}")

    _print_summary(result)

    if result.aborted:
        raise typer.Exit(1)
