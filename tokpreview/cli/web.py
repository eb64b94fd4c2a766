"""Web server command."""

import subprocess
import sys

import rich_click as click

from ._console import console


@click.command()
@click.option("--host", "-h", default="127.0.0.1", help="Host to bind to")
@click.option("--port", "-p", default=8000, help="Port to bind to")
@click.option("--reload/--no-reload", default=False, help="Auto-reload on code changes")
def web(host: str, port: int, reload: bool):
    """Start the metadata proxy server."""
    console.print(f"Starting tokpreview at http://{host}:{port}")
    console.print(f"  POST http://{host}:{port}/api/tiktok")
    console.print("Press Ctrl+C to stop")

    cmd = [
        sys.executable,
        "-m",
        "uvicorn",
        "tokpreview.web:create_app",
        "--host",
        host,
        "--port",
        str(port),
        "--factory",
    ]
    if reload:
        cmd.append("--reload")

    try:
        subprocess.run(cmd, check=True)
    except subprocess.CalledProcessError as e:
        console.print(f"[red]Error: uvicorn exited with code {e.returncode}[/red]")
        sys.exit(e.returncode)
    except KeyboardInterrupt:
        pass
