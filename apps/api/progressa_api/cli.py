"""API CLI commands for Progressa API."""

import asyncio
import sys

import click
import uvicorn
from progressa_common.config import get_settings
from progressa_common.exceptions import WorkflowEngineUnavailable
from progressa_common.workflow.temporal_executor import TemporalWorkflowExecutor


@click.group()
def cli():
    """Progressa API CLI - certificate API server."""
    pass


@cli.command()
@click.option("--host", default="0.0.0.0", help="Interface the server listens on")  # noqa: S104
@click.option("--port", default=8000, type=int, help="Port the server listens on")
@click.option("--reload/--no-reload", default=False, help="Restart on code changes")
@click.option("--log-level", default="info", help="Uvicorn log level")
@click.option("--workers", default=1, type=int, help="Number of server processes")
def serve(host: str, port: int, reload: bool, log_level: str, workers: int):
    """Start the API server."""
    if reload and workers > 1:
        click.echo("   --reload runs a single process, ignoring --workers")
        workers = 1

    click.echo(f"Starting Progressa API on http://{host}:{port}")
    uvicorn.run(
        app="progressa_api.main:app",
        host=host,
        port=port,
        reload=reload,
        workers=workers,
        log_level=log_level,
    )


@cli.command()
def status():
    """Show the workflow engine the API talks to."""
    settings = get_settings().workflow

    click.echo("API Configuration:")
    click.echo(f"   Temporal Server: {settings.TEMPORAL_SERVER_URL}")
    click.echo(f"   Namespace: {settings.TEMPORAL_NAMESPACE}")
    click.echo(f"   Task Queue: {settings.TEMPORAL_TASK_QUEUE}")


@cli.command()
def validate():
    """Check that the configured Temporal server is reachable."""
    settings = get_settings().workflow
    executor = TemporalWorkflowExecutor(
        namespace=settings.TEMPORAL_NAMESPACE,
        server_url=settings.TEMPORAL_SERVER_URL,
        task_queue=settings.TEMPORAL_TASK_QUEUE,
    )

    try:
        asyncio.run(executor._ensure_connected())
    except WorkflowEngineUnavailable as e:
        click.echo(f"Validation failed: {e}")
        sys.exit(1)

    click.echo(f"Temporal server {settings.TEMPORAL_SERVER_URL} is reachable")


if __name__ == "__main__":
    cli()
