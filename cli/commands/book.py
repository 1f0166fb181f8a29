# cli/commands/book.py
import click
from datetime import datetime
from api.schemas.book import BookCreate
from core.pagination import resolve_pagination
from core.services import BookService
from ..utils import catalog_session, validate_input, print_page

@click.group()
def book():
    """Book management commands"""
    pass

@book.command()
@click.option('--title', required=True, help='Book title')
@click.option('--isbn', required=True, help='ISBN-13, hyphens allowed')
@click.option('--author-id', required=True, type=int, help='ID of an existing author')
@click.option('--genre', default=None, help='Genre (max 100 characters)')
@click.option('--published-date', default=None, type=click.DateTime(formats=['%Y-%m-%d']), help='Publication date (YYYY-MM-DD)')
@click.pass_context
def add(ctx, title: str, isbn: str, author_id: int, genre: str, published_date: datetime):
    """Add a book for an existing author

    Example:
        library-catalog book add --title T --isbn 978-3-16-148410-0 --author-id 1
    """
    with catalog_session(ctx) as session:
        data = validate_input(BookCreate, {
            'title': title,
            'isbn': isbn,
            'authorId': author_id,
            'genre': genre,
            'publishedDate': published_date.date() if published_date else None,
        })
        created = BookService(session).create(data)
        click.echo(click.style(f"Created book {created.id}: {created.title} ({created.isbn})", fg='green'))

@book.command(name='list')
@click.option('--page', default=None, help='Zero-based page number')
@click.option('--limit', default=None, help='Books per page (max 100)')
@click.option('--title', default=None, help='Filter by title fragment')
@click.option('--isbn', default=None, help='Filter by ISBN fragment')
@click.option('--author-id', default=None, type=int, help='Only books by this author')
@click.pass_context
def list_books(ctx, page: str, limit: str, title: str, isbn: str, author_id: int):
    """List books, newest first"""
    with catalog_session(ctx) as session:
        result = BookService(session).find_all(
            resolve_pagination(page, limit),
            {'title': title, 'isbn': isbn, 'author_id': author_id}
        )
        print_page(
            result,
            'books',
            lambda b: f"{b.id}: {b.title} ({b.isbn}) by {b.author.first_name} {b.author.last_name}"
        )

@book.command()
@click.argument('book_id', type=int)
@click.pass_context
def remove(ctx, book_id: int):
    """Soft-delete a book"""
    with catalog_session(ctx) as session:
        BookService(session).remove(book_id)
        click.echo(click.style(f"Removed book {book_id}", fg='green'))
