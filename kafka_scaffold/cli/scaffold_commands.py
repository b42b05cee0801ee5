"""CLI commands that generate source files and tokens."""

import click

from kafka_scaffold.exceptions import KafkaScaffoldError
from kafka_scaffold.scaffold.generator import ScaffoldGenerator, build_component
from kafka_scaffold.services.token_issuer import TokenIssuer


def _generator(ctx) -> ScaffoldGenerator:
    settings = ctx.obj['config']
    return ScaffoldGenerator(settings.scaffold, settings.broker, ctx.obj['base_dir'])


@click.command('kafka:config')
@click.pass_context
def kafka_config(ctx):
    """Create the shared Kafka configuration module."""
    try:
        path = _generator(ctx).write_config()
    except KafkaScaffoldError as e:
        click.echo(f"❌ Failed to create Kafka config: {e}", err=True)
        raise click.Abort()
    
    click.echo(f"✅ Kafka config created at {path}")


@click.command('kafka:consumer')
@click.option('--name', '-n', prompt='Consumer name', help='Consumer name')
@click.option('--topic', '-t', prompt='Topic name', help='Topic to consume from')
@click.pass_context
def make_consumer(ctx, name, topic):
    """Create a new Kafka consumer."""
    try:
        spec = build_component(name, topic)
        path = _generator(ctx).write_consumer(spec)
    except KafkaScaffoldError as e:
        click.echo(f"❌ Failed to create consumer: {e}", err=True)
        raise click.Abort()
    
    click.echo(f"✅ Consumer '{spec.name}' created at {path}")


@click.command('kafka:producer')
@click.option('--name', '-n', prompt='Producer name', help='Producer name')
@click.option('--topic', '-t', prompt='Topic name', help='Topic to produce to')
@click.pass_context
def make_producer(ctx, name, topic):
    """Create a new Kafka producer."""
    try:
        spec = build_component(name, topic)
        path = _generator(ctx).write_producer(spec)
    except KafkaScaffoldError as e:
        click.echo(f"❌ Failed to create producer: {e}", err=True)
        raise click.Abort()
    
    click.echo(f"✅ Producer '{spec.name}' created at {path}")


@click.command('make:token')
@click.pass_context
def make_token(ctx):
    """Generate a bearer token and store its hash in .env."""
    settings = ctx.obj['config']
    issuer = TokenIssuer(settings.token, ctx.obj['base_dir'])
    
    try:
        issued = issuer.issue()
    except OSError as e:
        click.echo(f"❌ Failed to generate token: {e}", err=True)
        raise click.Abort()
    
    click.echo("✅ Token generated and saved")
    click.echo(f"   Token file: {issued.token_path}")
    click.echo(f"   {settings.token.env_key} {'updated' if issued.replaced else 'added'} in {issued.env_path}")
