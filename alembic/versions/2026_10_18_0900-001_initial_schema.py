"""initial schema

Revision ID: 001
Revises:
Create Date: 2026-10-18 09:00:00

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        'theaters',
        sa.Column('id', sa.String(length=100), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('chain', sa.String(length=100), nullable=False),
        sa.Column('address', sa.Text(), nullable=False, server_default=''),
        sa.Column('latitude', sa.Float(), nullable=False),
        sa.Column('longitude', sa.Float(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_theaters_chain'), 'theaters', ['chain'], unique=False)

    op.create_table(
        'movies',
        sa.Column('id', sa.String(length=100), nullable=False),
        sa.Column('title', sa.String(length=500), nullable=False),
        sa.Column('poster_url', sa.String(length=1000), nullable=True),
        sa.Column('duration', sa.Integer(), nullable=False),
        sa.Column('genre', sa.String(length=100), nullable=False, server_default=''),
        sa.Column('ranking', sa.Integer(), nullable=True),
        sa.Column('rating', sa.Float(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.CheckConstraint('duration > 0', name='ck_movies_duration_positive'),
        sa.CheckConstraint('ranking IS NULL OR ranking > 0', name='ck_movies_ranking_positive'),
        sa.CheckConstraint('rating IS NULL OR (rating >= 0 AND rating <= 5)', name='ck_movies_rating_range')
    )
    op.create_index(op.f('ix_movies_title'), 'movies', ['title'], unique=False)
    op.create_index(op.f('ix_movies_ranking'), 'movies', ['ranking'], unique=False)

    op.create_table(
        'showtimes',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('theater_id', sa.String(length=100), nullable=False),
        sa.Column('movie_id', sa.String(length=100), nullable=False),
        sa.Column('start_time', sa.DateTime(timezone=True), nullable=False),
        sa.Column('screen', sa.String(length=100), nullable=False, server_default=''),
        *_timestamps(),
        sa.ForeignKeyConstraint(['theater_id'], ['theaters.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['movie_id'], ['movies.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('theater_id', 'movie_id', 'start_time', name='uq_theater_movie_time')
    )
    op.create_index(op.f('ix_showtimes_theater_id'), 'showtimes', ['theater_id'], unique=False)
    op.create_index(op.f('ix_showtimes_movie_id'), 'showtimes', ['movie_id'], unique=False)
    op.create_index(op.f('ix_showtimes_start_time'), 'showtimes', ['start_time'], unique=False)

    op.create_table(
        'favorite_theaters',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('theater_id', sa.String(length=100), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['theater_id'], ['theaters.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('theater_id', name='uq_favorite_theater')
    )
    op.create_index(op.f('ix_favorite_theaters_theater_id'), 'favorite_theaters', ['theater_id'], unique=False)

    op.create_table(
        'watched_movies',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('movie_id', sa.String(length=100), nullable=False),
        sa.Column('theater_id', sa.String(length=100), nullable=True),
        sa.Column('watched_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('memo', sa.Text(), nullable=False, server_default=''),
        *_timestamps(),
        sa.ForeignKeyConstraint(['movie_id'], ['movies.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['theater_id'], ['theaters.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_watched_movies_movie_id'), 'watched_movies', ['movie_id'], unique=False)
    op.create_index(op.f('ix_watched_movies_watched_at'), 'watched_movies', ['watched_at'], unique=False)


def downgrade() -> None:
    op.drop_table('watched_movies')
    op.drop_table('favorite_theaters')
    op.drop_table('showtimes')
    op.drop_table('movies')
    op.drop_table('theaters')
