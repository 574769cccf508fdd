"""create_gallery_tables

Revision ID: 5a1d3c9e7b20
Revises:
Create Date: 2026-10-18 09:12:44.318204

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = '5a1d3c9e7b20'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create users, artworks, likes and favorites with their uniqueness guarantees."""
    op.create_table('users',
        sa.Column('id', sa.UUID(), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('display_name', sa.String(length=100), nullable=True),
        sa.Column('photo_url', sa.String(length=500), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('email'),
    )

    op.create_table('artworks',
        sa.Column('id', sa.UUID(), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('category', sa.String(length=100), nullable=True),
        sa.Column('visibility', sa.String(length=20), nullable=False, server_default='Public'),
        sa.Column('image_url', sa.String(length=500), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('created_by', sa.String(length=255), nullable=False),
        sa.Column('artist_name', sa.String(length=100), nullable=True),
        sa.Column('artist_photo', sa.String(length=500), nullable=True),
        sa.Column('likes', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.CheckConstraint("visibility IN ('Public', 'Private')", name='ck_artworks_visibility'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_artworks_created_by', 'artworks', ['created_by'], unique=False)
    op.create_index('ix_artworks_category', 'artworks', ['category'], unique=False)
    op.create_index(
        'ix_artworks_visibility_created_at',
        'artworks',
        ['visibility', 'created_at'],
        unique=False,
    )

    # One like per (artwork, user); the constraint backs INSERT ... ON CONFLICT DO NOTHING
    op.create_table('likes',
        sa.Column('id', sa.UUID(), nullable=False),
        sa.Column('artwork_id', sa.UUID(), nullable=False),
        sa.Column('user_email', sa.String(length=255), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('artwork_id', 'user_email', name='uq_likes_artwork_user'),
    )
    op.create_index('ix_likes_artwork_id', 'likes', ['artwork_id'], unique=False)

    op.create_table('favorites',
        sa.Column('id', sa.UUID(), nullable=False),
        sa.Column('artwork_id', sa.UUID(), nullable=False),
        sa.Column('user_email', sa.String(length=255), nullable=False),
        sa.Column('extra', postgresql.JSONB(astext_type=sa.Text()), server_default='{}', nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('artwork_id', 'user_email', name='uq_favorites_artwork_user'),
    )
    op.create_index('ix_favorites_user_email', 'favorites', ['user_email'], unique=False)


def downgrade() -> None:
    """Drop gallery tables."""
    op.drop_index('ix_favorites_user_email', table_name='favorites')
    op.drop_table('favorites')
    op.drop_index('ix_likes_artwork_id', table_name='likes')
    op.drop_table('likes')
    op.drop_index('ix_artworks_visibility_created_at', table_name='artworks')
    op.drop_index('ix_artworks_category', table_name='artworks')
    op.drop_index('ix_artworks_created_by', table_name='artworks')
    op.drop_table('artworks')
    op.drop_table('users')
