"""Main CLI entry point for Kafka Scaffold."""

import click
import sys
from pathlib import Path
from typing import Dict

from kafka_scaffold import __version__
from kafka_scaffold.cli.config import load_cli_config, resolve_config
from kafka_scaffold.cli.kafka_commands import (
    create_container,
    start_container,
    register_topics,
    migrate_topics
)
from kafka_scaffold.cli.scaffold_commands import (
    kafka_config,
    make_consumer,
    make_producer,
    make_token
)
from kafka_scaffold.exceptions import ConfigurationError
from kafka_scaffold.logging_config import setup_logging


# Command name -> handler
COMMANDS: Dict[str, click.Command] = {
    'kafka:config': kafka_config,
    'kafka:consumer': make_consumer,
    'kafka:producer': make_producer,
    'kafka:create': create_container,
    'kafka:start': start_container,
    'kafka:topics': register_topics,
    'kafka:migrate': migrate_topics,
    'make:token': make_token,
}


def build_cli(commands: Dict[str, click.Command]) -> click.Group:
    """Build the CLI group dispatching to the given command table."""
    
    @click.group(commands=dict(commands))
    @click.version_option(__version__, prog_name='kafka-scaffold')
    @click.option('--project-dir', '-d', default='.', type=click.Path(file_okay=False),
                  help='Root directory of the host application')
    @click.option('--config-file', '-c', default='kafka-scaffold.json',
                  help='Configuration file path, relative to the project directory')
    @click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
    @click.pass_context
    def cli(ctx, project_dir, config_file, verbose):
        """Kafka Scaffold CLI - Bootstrap a Kafka messaging layer."""
        
        # Ensure context object exists
        ctx.ensure_object(dict)
        
        base_dir = Path(project_dir).expanduser()
        config_path = Path(config_file).expanduser()
        if not config_path.is_absolute():
            config_path = base_dir / config_path
        
        # Load configuration
        try:
            settings = resolve_config(load_cli_config(config_path))
        except ConfigurationError as e:
            click.echo(f"❌ Invalid configuration: {e}", err=True)
            raise click.Abort()
        
        # Setup logging
        if verbose:
            setup_logging(settings.logging)
        
        ctx.obj['config'] = settings
        ctx.obj['config_path'] = config_path
        ctx.obj['base_dir'] = base_dir
    
    return cli


cli = build_cli(COMMANDS)


def main():
    """Main entry point."""
    try:
        cli()
    except KeyboardInterrupt:
        click.echo("\n👋 Operation cancelled by user")
        sys.exit(1)
    except Exception as e:
        click.echo(f"❌ Error: {e}", err=True)
        sys.exit(1)


if __name__ == '__main__':
    main()
