"""Initial gallery schema

Revision ID: 0001_gallery_initial
Revises:
Create Date: 2026-10-19

Compatible with both SQLite and PostgreSQL:
- Uses CURRENT_TIMESTAMP instead of now()
- ElementType stored as VARCHAR (native_enum=False in models)
- Cascades live in the foreign keys; SQLite needs PRAGMA foreign_keys=ON
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001_gallery_initial'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
    ]


def upgrade() -> None:
    """Create all tables."""

    op.create_table('category',
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('name')
    )

    op.create_table('author',
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('nickname', sa.String(length=255), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('email')
    )

    op.create_table('dashboard',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('category_name', sa.String(length=255), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['category_name'], ['category.name'], name='fk_dashboard_category_name'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name', 'category_name', name='uq_dashboard_name_category')
    )
    op.create_index(op.f('ix_dashboard_category_name'), 'dashboard', ['category_name'], unique=False)

    op.create_table('author_dashboards',
        sa.Column('author_email', sa.String(length=255), nullable=False),
        sa.Column('dashboard_id', sa.String(length=36), nullable=False),
        sa.ForeignKeyConstraint(['author_email'], ['author.email'], name='fk_author_dashboards_author', ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['dashboard_id'], ['dashboard.id'], name='fk_author_dashboards_dashboard', ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('author_email', 'dashboard_id')
    )

    op.create_table('template',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('dashboard_id', sa.String(length=36), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('index', sa.Integer(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['dashboard_id'], ['dashboard.id'], name='fk_template_dashboard_id', ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name', 'dashboard_id', name='uq_template_name_dashboard')
    )
    op.create_index(op.f('ix_template_dashboard_id'), 'template', ['dashboard_id'], unique=False)

    op.create_table('element',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('template_id', sa.String(length=36), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        # ENUM as VARCHAR for SQLite compatibility
        sa.Column('type', sa.String(length=9), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('time_series', sa.Boolean(), nullable=False),
        sa.Column('x', sa.Integer(), nullable=False),
        sa.Column('y', sa.Integer(), nullable=False),
        sa.Column('h', sa.Integer(), nullable=False),
        sa.Column('w', sa.Integer(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['template_id'], ['template.id'], name='fk_element_template_id', ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name', 'template_id', name='uq_element_name_template')
    )
    op.create_index(op.f('ix_element_template_id'), 'element', ['template_id'], unique=False)

    op.create_table('content',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('element_id', sa.String(length=36), nullable=False),
        sa.Column('date', sa.DateTime(), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('data', sa.JSON(), nullable=False),
        sa.Column('config', sa.JSON(), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['element_id'], ['element.id'], name='fk_content_element_id', ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('idx_content_element_date', 'content', ['element_id', 'date'], unique=False)

    op.create_table('record',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('author_email', sa.String(length=255), nullable=False),
        sa.Column('dashboard_id', sa.String(length=36), nullable=False),
        sa.Column('template_id', sa.String(length=36), nullable=False),
        sa.Column('element_id', sa.String(length=36), nullable=False),
        sa.Column('note', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.ForeignKeyConstraint(['author_email'], ['author.email'], name='fk_record_author_email', ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['dashboard_id'], ['dashboard.id'], name='fk_record_dashboard_id', ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['template_id'], ['template.id'], name='fk_record_template_id', ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['element_id'], ['element.id'], name='fk_record_element_id', ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_record_author_email'), 'record', ['author_email'], unique=False)
    op.create_index(op.f('ix_record_dashboard_id'), 'record', ['dashboard_id'], unique=False)
    op.create_index(op.f('ix_record_created_at'), 'record', ['created_at'], unique=False)


def downgrade() -> None:
    """Drop all tables in reverse dependency order."""
    op.drop_index(op.f('ix_record_created_at'), table_name='record')
    op.drop_index(op.f('ix_record_dashboard_id'), table_name='record')
    op.drop_index(op.f('ix_record_author_email'), table_name='record')
    op.drop_table('record')
    op.drop_index('idx_content_element_date', table_name='content')
    op.drop_table('content')
    op.drop_index(op.f('ix_element_template_id'), table_name='element')
    op.drop_table('element')
    op.drop_index(op.f('ix_template_dashboard_id'), table_name='template')
    op.drop_table('template')
    op.drop_table('author_dashboards')
    op.drop_index(op.f('ix_dashboard_category_name'), table_name='dashboard')
    op.drop_table('dashboard')
    op.drop_table('author')
    op.drop_table('category')
