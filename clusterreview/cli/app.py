"""Main CLI application."""

import typer
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()

from .case import clusters_command, runs_command
from .init import init_command
from .tag import tag_command

app = typer.Typer(
    name="clusterreview",
    help="Cluster Review Tagging - tag the items to review in near-duplicate clusters",
    no_args_is_help=True,
)

# Register commands
app.command("init")(init_command)
app.command("runs")(runs_command)
app.command("clusters")(clusters_command)
app.command("tag")(tag_command)


if __name__ == "__main__":
    app()
