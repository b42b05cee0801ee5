"""CLI commands for the broker container and topic registry."""

import click
from pathlib import Path
from tabulate import tabulate

from kafka_scaffold.config import Config
from kafka_scaffold.exceptions import KafkaScaffoldError
from kafka_scaffold.models.container import LifecycleOutcome
from kafka_scaffold.providers.docker_provider import DockerProvider
from kafka_scaffold.services.container_lifecycle import ContainerLifecycleManager
from kafka_scaffold.services.topic_migrator import TopicMigrator
from kafka_scaffold.services.topic_registry import TopicRegistry


def _lifecycle_manager(settings: Config) -> ContainerLifecycleManager:
    return ContainerLifecycleManager(DockerProvider(settings.broker), settings.container)


def _registry(ctx, settings: Config) -> TopicRegistry:
    return TopicRegistry(Path(ctx.obj['base_dir']) / settings.registry.path)


@click.command('kafka:create')
@click.pass_context
def create_container(ctx):
    """Create the local Kafka broker container in Docker."""
    settings = ctx.obj['config']
    name = settings.container.name
    
    try:
        result = _lifecycle_manager(settings).create()
    except KafkaScaffoldError as e:
        click.echo(f"❌ Failed to create container: {e}", err=True)
        raise click.Abort()
    
    if result.outcome == LifecycleOutcome.ALREADY_EXISTS:
        click.echo(f"⚠️  Container '{name}' already exists ({result.previous_state.value})")
    else:
        click.echo(f"✅ Container '{name}' created and running")
        click.echo(f"   Image: {settings.container.image}")
        click.echo(f"   Bootstrap server: {settings.broker.bootstrap_server}")


@click.command('kafka:start')
@click.pass_context
def start_container(ctx):
    """Start the local Kafka broker container."""
    settings = ctx.obj['config']
    name = settings.container.name
    
    try:
        result = _lifecycle_manager(settings).start()
    except KafkaScaffoldError as e:
        click.echo(f"❌ Failed to start container: {e}", err=True)
        raise click.Abort()
    
    if result.outcome == LifecycleOutcome.ALREADY_RUNNING:
        click.echo(f"⚠️  Container '{name}' is already running")
    else:
        click.echo(f"✅ Container '{name}' started")


@click.command('kafka:topics')
@click.option('--topics', '-t', prompt='Topic names (comma-separated)',
              help='Comma-separated topic names to add to the registry')
@click.pass_context
def register_topics(ctx, topics):
    """Add topics to the topic registry file."""
    settings = ctx.obj['config']
    registry = _registry(ctx, settings)
    
    try:
        update = registry.add(topics)
    except KafkaScaffoldError as e:
        click.echo(f"❌ Failed to update topic registry: {e}", err=True)
        raise click.Abort()
    
    rows = [
        [topic, 'new' if topic in update.added else 'existing']
        for topic in update.topics
    ]
    click.echo(f"✅ Topic registry {registry.path} updated")
    click.echo(tabulate(rows, headers=['Topic Name', 'Status'], tablefmt='grid'))
    click.echo(f"\nTotal: {len(update.topics)} topics ({len(update.added)} new)")


@click.command('kafka:migrate')
@click.pass_context
def migrate_topics(ctx):
    """Create the registered topics on the Kafka broker."""
    settings = ctx.obj['config']
    registry = _registry(ctx, settings)
    
    try:
        # Check the registry before touching the runtime
        registry.load_required()
        migrator = TopicMigrator(
            registry,
            DockerProvider(settings.broker),
            settings.container.name,
            settings.broker.bootstrap_server
        )
        result = migrator.migrate()
    except KafkaScaffoldError as e:
        click.echo(f"❌ Failed to migrate topics: {e}", err=True)
        raise click.Abort()
    
    if not result.topics:
        click.echo("⚠️  Topic registry is empty, nothing to migrate")
        return
    
    rows = []
    for topic in result.topics:
        if topic in result.created:
            status = 'created'
        elif topic == result.failed_topic:
            status = 'failed'
        else:
            status = 'skipped'
        rows.append([topic, status])
    click.echo(tabulate(rows, headers=['Topic Name', 'Status'], tablefmt='grid'))
    
    if not result.success:
        click.echo(f"❌ Failed to migrate topics: {result.error_message}", err=True)
        raise click.Abort()
    
    click.echo(f"✅ {len(result.created)} topics created on {settings.broker.bootstrap_server}")
