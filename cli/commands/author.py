# cli/commands/author.py
import click
from datetime import datetime
from api.schemas.author import AuthorCreate
from core.pagination import resolve_pagination
from core.services import AuthorService
from ..utils import catalog_session, validate_input, print_page

@click.group()
def author():
    """Author management commands"""
    pass

@author.command()
@click.option('--first-name', required=True, help='First name')
@click.option('--last-name', required=True, help='Last name')
@click.option('--bio', default=None, help='Short biography (max 1000 characters)')
@click.option('--birth-date', default=None, type=click.DateTime(formats=['%Y-%m-%d']), help='Birth date (YYYY-MM-DD)')
@click.pass_context
def add(ctx, first_name: str, last_name: str, bio: str, birth_date: datetime):
    """Add an author

    Example:
        library-catalog author add --first-name Tanjin --last-name Alam
    """
    with catalog_session(ctx) as session:
        data = validate_input(AuthorCreate, {
            'firstName': first_name,
            'lastName': last_name,
            'bio': bio,
            'birthDate': birth_date.date() if birth_date else None,
        })
        created = AuthorService(session).create(data)
        click.echo(click.style(f"Created author {created.id}: {created.first_name} {created.last_name}", fg='green'))

@author.command(name='list')
@click.option('--page', default=None, help='Zero-based page number')
@click.option('--limit', default=None, help='Authors per page (max 100)')
@click.option('--first-name', default=None, help='Filter by first name fragment')
@click.option('--last-name', default=None, help='Filter by last name fragment')
@click.pass_context
def list_authors(ctx, page: str, limit: str, first_name: str, last_name: str):
    """List authors, newest first"""
    with catalog_session(ctx) as session:
        result = AuthorService(session).find_all(
            resolve_pagination(page, limit),
            {'first_name': first_name, 'last_name': last_name}
        )
        print_page(result, 'authors', lambda a: f"{a.id}: {a.first_name} {a.last_name}")

@author.command()
@click.argument('author_id', type=int)
@click.pass_context
def remove(ctx, author_id: int):
    """Soft-delete an author and its books"""
    with catalog_session(ctx) as session:
        AuthorService(session).remove(author_id)
        click.echo(click.style(f"Removed author {author_id}", fg='green'))
