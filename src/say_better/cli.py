"""CLI interface using typer + rich."""

from __future__ import annotations

import asyncio
import logging

from dotenv import load_dotenv

load_dotenv()

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from say_better.clients.base import create_text_generator
from say_better.config import load_config
from say_better.history.history_store import SQLiteHistoryStore
from say_better.mail.contact_mailer import ContactMailer, submit_contact
from say_better.models.rewrite import VARIANT_LABELS
from say_better.models.tone import Tone
from say_better.pipeline.rewriter import Rewriter

app = typer.Typer(
    name="say-better",
    help="Rewrite mixed-language sentences into polished English.",
    no_args_is_help=True,
)
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logs"),
) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )


@app.command()
def rewrite(
    text: str = typer.Argument(help="Sentence to improve"),
    tone: str = typer.Option("Normal", "--tone", "-t", help="Tone name (see `tones`)"),
    model: str = typer.Option(None, "--model", "-m", help="Model id (defaults to config)"),
    no_save: bool = typer.Option(False, "--no-save", help="Do not store the result in history"),
) -> None:
    """Rewrite TEXT in four registers and the chosen tone."""
    config = load_config()
    history = None if no_save else SQLiteHistoryStore(config.history.resolved_db_path)
    rewriter = Rewriter(
        create_text_generator(config.llm),
        history,
        default_model=config.llm.active_model,
    )

    with console.status("Improving..."):
        outcome = asyncio.run(rewriter.rewrite(text, tone=tone, model_id=model))

    if not outcome.ok:
        console.print(outcome.error, style="red")
        raise typer.Exit(1)

    result = outcome.result
    if not result.has_content:
        console.print("[yellow]The model reply had no recognizable sections.[/yellow]")
        raise typer.Exit(1)

    for field, label in VARIANT_LABELS:
        body = escape(getattr(result, field)) or "[dim]-[/dim]"
        console.print(Panel(body, title=label, border_style="cyan"))
    footer = f"Tone: {outcome.request.tone} | {outcome.elapsed_seconds:.1f}s"
    if outcome.entry is not None:
        footer += f" | saved as #{outcome.entry.id}"
    console.print(f"[dim]{footer}[/dim]")


@app.command()
def tones() -> None:
    """List the available tones."""
    table = Table("Tone", "Description")
    for tone in Tone:
        table.add_row(tone.label, tone.description)
    console.print(table)


@app.command()
def history(
    filter_: str = typer.Option(None, "--filter", "-f", help="Only entries whose input contains this text"),
    limit: int = typer.Option(None, "--limit", "-n", help="Maximum number of entries"),
) -> None:
    """Show past rewrites, newest first."""
    config = load_config()
    store = SQLiteHistoryStore(config.history.resolved_db_path)
    entries = store.list_recent(query=filter_, limit=limit or config.history.list_limit)
    if not entries:
        console.print("[yellow]No history yet.[/yellow]")
        return

    table = Table("#", "When", "Tone", "Input", "Corrected")
    for entry in entries:
        table.add_row(
            str(entry.id),
            entry.created_at.strftime("%Y-%m-%d %H:%M"),
            entry.tone,
            escape(entry.input_text),
            escape(entry.corrected),
        )
    console.print(table)


@app.command("clear-history")
def clear_history(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Delete every stored rewrite."""
    if not yes and not typer.confirm("Delete all history entries?"):
        raise typer.Exit(0)
    config = load_config()
    deleted = SQLiteHistoryStore(config.history.resolved_db_path).clear_all()
    console.print(f"[green]Deleted {deleted} entries.[/green]")


@app.command()
def contact(
    name: str = typer.Option(..., "--name", help="Your name"),
    email: str = typer.Option(..., "--email", help="Address to reply to"),
    message: str = typer.Option(..., "--message", help="Message text"),
) -> None:
    """Send a message to the SayBetter support inbox."""
    config = load_config()
    outcome = submit_contact(
        {"name": name, "email": email, "message": message},
        ContactMailer(config.mail),
    )
    if not outcome.success:
        console.print(outcome.error, style="red")
        raise typer.Exit(1)
    console.print("[green]Message sent.[/green]")


if __name__ == "__main__":
    app()
