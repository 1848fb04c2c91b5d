"""Worker CLI commands for Progressa Worker."""

import asyncio
import sys

import click
from progressa_common.config import get_settings

from progressa_worker.main import main


@click.group()
def cli():
    """Progressa Worker CLI - Temporal worker management."""
    pass


@cli.command()
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option("--max-activities", type=int, help="Max concurrent activities")
@click.option("--max-workflows", type=int, help="Max concurrent workflows")
def start(debug: bool, max_activities: int | None, max_workflows: int | None):
    """Start the Temporal worker."""
    settings = get_settings()

    # Override settings if provided
    if debug:
        settings.app.LOG_LEVEL = "DEBUG"
    if max_activities:
        settings.workflow.TEMPORAL_MAX_CONCURRENT_ACTIVITIES = max_activities
    if max_workflows:
        settings.workflow.TEMPORAL_MAX_CONCURRENT_WORKFLOWS = max_workflows

    click.echo("Starting Progressa Temporal Worker...")
    click.echo(f"   Temporal Server: {settings.workflow.TEMPORAL_SERVER_URL}")
    click.echo(f"   Task Queue: {settings.workflow.TEMPORAL_TASK_QUEUE}")
    click.echo(f"   Max Activities: {settings.workflow.TEMPORAL_MAX_CONCURRENT_ACTIVITIES}")
    click.echo(f"   Max Workflows: {settings.workflow.TEMPORAL_MAX_CONCURRENT_WORKFLOWS}")

    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        click.echo("\nWorker stopped by user")
    except Exception as e:
        click.echo(f"\nWorker failed: {e}")
        sys.exit(1)


@cli.command()
def status():
    """Show the worker configuration."""
    settings = get_settings()

    click.echo("Worker Configuration:")
    click.echo(f"   Temporal Server: {settings.workflow.TEMPORAL_SERVER_URL}")
    click.echo(f"   Namespace: {settings.workflow.TEMPORAL_NAMESPACE}")
    click.echo(f"   Task Queue: {settings.workflow.TEMPORAL_TASK_QUEUE}")
    click.echo(f"   Redeem Code Digits: {settings.certificate.REDEEM_CODE_DIGITS}")


if __name__ == "__main__":
    cli()
