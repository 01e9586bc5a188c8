"""megacp CLI - Main commands."""
import asyncio
import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from megacp import setup_logging
from megacp.core.copy import CopyOptions, CopyService
from megacp.core.exceptions import CopyError, MegaException
from megacp.core.session import Session, SQLiteSession

app = typer.Typer(
    name="megacp",
    help="Copy files and folders within a MEGA account without re-uploading them",
    add_completion=False
)
console = Console()


# Session path: ~/.config/mega/session.session
def get_session_path() -> Path:
    config_dir = Path.home() / ".config" / "mega"
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir / "session"


def run_async(coro):
    """Run async function."""
    return asyncio.run(coro)


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)]
    )
    setup_logging(level)


@app.callback()
def callback():
    """Copy files and folders within a MEGA account."""


@app.command()
def cp(
    args: Optional[List[str]] = typer.Argument(None, help="<sources>... <destination>"),
    recursive: bool = typer.Option(False, "--recursive", "-r", help="Copy folders recursively"),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing files"),
    target_folder: Optional[str] = typer.Option(
        None, "--target-folder", "-t", help="Folder to copy <sources> to"
    ),
    no_target_folder: bool = typer.Option(
        False, "--no-target-folder", "-T", help="Treat <destination> as the new path, not a folder"
    ),
    session_path: Optional[Path] = typer.Option(None, "--session", help="Session file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show every copied node"),
):
    """
    Copy files and folders.
    
    The data encryption keys of the copies stay the same as the originals.
    """
    configure_logging(verbose)
    
    options = CopyOptions(
        recursive=recursive,
        force=force,
        target_folder=target_folder,
        no_target_folder=no_target_folder,
    )
    
    async def do_copy():
        storage = SQLiteSession(str(session_path or get_session_path()))
        try:
            async with Session.from_storage(storage) as session:
                await session.load_filesystem()
                return await CopyService(session.context()).copy(args or [], options)
        finally:
            storage.close()
    
    try:
        result = run_async(do_copy())
    except CopyError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)
    except MegaException as e:
        console.print(f"[red]Error: {escape(e.message)}[/red]")
        raise typer.Exit(1)
    
    if result.nothing_to_do:
        console.print("[yellow]Nothing to do![/yellow]")
        return
    
    console.print(f"[green]Copied {len(result.copied)} item(s)[/green]")
    if result.cleanup_failed:
        console.print("[yellow]Failed to remove overwritten files[/yellow]")


def main():
    app()


if __name__ == "__main__":
    main()
