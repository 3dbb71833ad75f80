"""``xorheat serve``: live viewer in the browser."""

import threading
import webbrowser
from typing import Optional

import typer

from ..logging_config import UVICORN_LEVELS, get_logger
from . import app
from ._common import console, resolve_config

logger = get_logger(__name__)


@app.command()
def serve(
    ctx: typer.Context,
    port: Optional[int] = typer.Option(None, help="Port to listen on"),
    host: Optional[str] = typer.Option(None, help="Host to bind to"),
    depth: Optional[int] = typer.Option(None, "--depth", "-d", help="Initial tree depth"),
    no_browser: bool = typer.Option(False, "--no-browser", help="Don't open browser"),
) -> None:
    """Start the live viewer."""
    try:
        from ..server import _check_deps

        _check_deps()
    except ImportError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1)

    import uvicorn

    from ..server.app import create_app
    from ..state import InteractionState

    config = resolve_config(ctx, port=port, host=host, depth=depth)
    state = InteractionState(depth=config.depth, radius=config.radius)
    asgi_app = create_app(state, config)

    url = f"http://{config.host}:{config.port}"
    if not no_browser:
        threading.Timer(1.0, lambda: webbrowser.open(url)).start()

    console.print(f"[bold]Viewer[/bold] → [link={url}]{url}[/link]")
    console.print("[dim]Press Ctrl+C to stop[/dim]")
    logger.debug("Serving depth %d at %s", config.depth, url)

    try:
        uvicorn.run(
            asgi_app,
            host=config.host,
            port=config.port,
            log_level=UVICORN_LEVELS[config.verbosity],
        )
    except KeyboardInterrupt:
        pass
    finally:
        console.print("\n[dim]Stopped.[/dim]")
