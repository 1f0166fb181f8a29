# cli/main.py
import click
from core.config import configure_logging
from core.sa.database import Database
from .commands import author, book, db, serve

@click.group()
@click.option('--database-url', envvar='DATABASE_URL', default=None, help='Database URL (defaults to the POSTGRES_* settings)')
@click.option('--log-level', default='WARNING', show_default=True, help='Logging level for command output')
@click.pass_context
def cli(ctx, database_url: str, log_level: str):
    """Library catalog CLI"""
    configure_logging(log_level)
    ctx.ensure_object(dict)
    ctx.obj['db'] = Database(database_url)

cli.add_command(author)
cli.add_command(book)
cli.add_command(db)
cli.add_command(serve)

def main():
    """Entry point for the CLI"""
    cli()

if __name__ == '__main__':
    main()
