# cli/utils.py
import click
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Type
from pydantic import BaseModel, ValidationError
from sqlalchemy.orm import Session

from core.errors import CatalogError, ErrorKind, classify, validation_messages
from core.sa.database import Database


@contextmanager
def catalog_session(ctx: click.Context) -> Iterator[Session]:
    """Open a session on the CLI's database and report catalog failures.

    Any failure is printed in red and the command exits with status 1.
    """
    db: Database = ctx.obj['db']
    session = db.get_session()
    try:
        yield session
    except click.exceptions.Exit:
        raise
    except Exception as e:
        error = classify(e)
        click.echo(click.style(f"Error: {error.message}", fg='red'), err=True)
        if error.error != error.message:
            click.echo(click.style(f"  {error.error}", fg='red'), err=True)
        ctx.exit(1)
    finally:
        session.close()


def validate_input(schema: Type[BaseModel], values: Dict[str, Any]) -> Dict[str, Any]:
    """Validate CLI options with the same rules as the HTTP API"""
    try:
        model = schema.model_validate({k: v for k, v in values.items() if v is not None})
    except ValidationError as e:
        raise CatalogError(ErrorKind.VALIDATION, "Validation failed", validation_messages(e.errors()))
    return model.model_dump()


def print_page(page: Dict[str, Any], item_type: str, describe) -> None:
    """Print one page of a paginated listing"""
    items = page['item']
    if not items:
        click.echo(click.style(f"No {item_type} found.", fg='yellow'))
        return
    for item in items:
        click.echo(describe(item))
    footer = f"\nPage {page['page']} - showing {len(items)} of {page['total']} {item_type}"
    if page['has_next_page']:
        footer += " (more available)"
    click.echo(click.style(footer, fg='blue'))
