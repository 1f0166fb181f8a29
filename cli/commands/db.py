# cli/commands/db.py
import click

@click.group()
def db():
    """Database schema commands"""
    pass

@db.command()
@click.pass_context
def init(ctx):
    """Create the author and book tables"""
    ctx.obj['db'].init_db()
    click.echo(click.style("Database initialized", fg='green'))

@db.command()
@click.confirmation_option(prompt='This drops every catalog table. Continue?')
@click.pass_context
def drop(ctx):
    """Drop the author and book tables"""
    ctx.obj['db'].drop_db()
    click.echo(click.style("Database dropped", fg='yellow'))
