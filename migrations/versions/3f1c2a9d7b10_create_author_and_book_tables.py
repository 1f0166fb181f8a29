"""Create author and book tables

Revision ID: 3f1c2a9d7b10
Revises: 
Create Date: 2026-10-18 09:12:44.118201

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c2a9d7b10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table('author',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('first_name', sa.String(length=255), nullable=False),
        sa.Column('last_name', sa.String(length=255), nullable=False),
        sa.Column('bio', sa.String(length=1000), nullable=True),
        sa.Column('birth_date', sa.Date(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('deleted_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('idx_author_first_name', 'author', ['first_name'])
    op.create_index('idx_author_last_name', 'author', ['last_name'])
    op.create_index('ix_author_deleted_at', 'author', ['deleted_at'])

    op.create_table('book',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('isbn', sa.String(length=255), nullable=False),
        sa.Column('published_date', sa.Date(), nullable=True),
        sa.Column('genre', sa.String(length=100), nullable=True),
        sa.Column('author_id', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('deleted_at', sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(['author_id'], ['author.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('isbn')
    )
    op.create_index('idx_book_title', 'book', ['title'])
    op.create_index('idx_book_author_id', 'book', ['author_id'])
    op.create_index('ix_book_deleted_at', 'book', ['deleted_at'])


def downgrade() -> None:
    op.drop_index('ix_book_deleted_at', table_name='book')
    op.drop_index('idx_book_author_id', table_name='book')
    op.drop_index('idx_book_title', table_name='book')
    op.drop_table('book')

    op.drop_index('ix_author_deleted_at', table_name='author')
    op.drop_index('idx_author_last_name', table_name='author')
    op.drop_index('idx_author_first_name', table_name='author')
    op.drop_table('author')
