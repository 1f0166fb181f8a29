# cli/commands/serve.py
import click
from core.config import APP_HOST, APP_PORT, LOG_LEVEL

@click.command()
@click.option('--host', default=APP_HOST, show_default=True, help='Interface to bind')
@click.option('--port', default=APP_PORT, type=int, show_default=True, help='Port to listen on')
@click.option('--reload/--no-reload', default=False, help='Reload on code changes (development)')
def serve(host: str, port: int, reload: bool):
    """Run the HTTP API with uvicorn"""
    import uvicorn
    click.echo(click.style(f"Starting library catalog on {host}:{port}", fg='blue'))
    uvicorn.run("api.main:app", host=host, port=port, reload=reload, log_level=LOG_LEVEL.lower())
