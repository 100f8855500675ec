"""initial_careers_schema

Companies, recruiters, careers sections and jobs.

Revision ID: 20260301_0000
Revises:
Create Date: 2026-03-01 00:00:00.000000+00:00

"""
from alembic import op
import sqlalchemy as sa

from app.database_types import GUID


revision = '20260301_0000'
down_revision = None
branch_labels = None
depends_on = None

SECTION_TYPES = ('about', 'mission', 'values', 'culture', 'life', 'benefits', 'custom')
JOB_TYPES = ('full-time', 'part-time', 'contract', 'internship', 'remote')


def upgrade() -> None:
    op.create_table(
        'companies',
        sa.Column('id', GUID(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('slug', sa.String(length=50), nullable=False),
        sa.Column('logo_url', sa.String(length=2048), nullable=True),
        sa.Column('banner_url', sa.String(length=2048), nullable=True),
        sa.Column('culture_video_url', sa.String(length=2048), nullable=True),
        sa.Column('primary_color', sa.String(length=7), nullable=False, server_default='#2563EB'),
        sa.Column('secondary_color', sa.String(length=7), nullable=False, server_default='#1E40AF'),
        sa.Column('sections_version', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_companies_slug'), 'companies', ['slug'], unique=True)

    op.create_table(
        'recruiters',
        sa.Column('id', GUID(), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('password_hash', sa.String(length=128), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=True),
        sa.Column('company_id', GUID(), nullable=False),
        sa.Column('last_login_at', sa.DateTime(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['company_id'], ['companies.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_recruiters_email'), 'recruiters', ['email'], unique=True)
    op.create_index(op.f('ix_recruiters_company_id'), 'recruiters', ['company_id'], unique=False)

    op.create_table(
        'careers_sections',
        sa.Column('id', GUID(), nullable=False),
        sa.Column('company_id', GUID(), nullable=False),
        sa.Column('type', sa.Enum(*SECTION_TYPES, name='section_type'), nullable=False),
        sa.Column('title', sa.String(length=200), nullable=False),
        sa.Column('content', sa.Text(), nullable=False, server_default=''),
        sa.Column('media_url', sa.String(length=2048), nullable=True),
        sa.Column('order_index', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('is_visible', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['company_id'], ['companies.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_careers_sections_company_id'), 'careers_sections', ['company_id'], unique=False)

    op.create_table(
        'jobs',
        sa.Column('id', GUID(), nullable=False),
        sa.Column('company_id', GUID(), nullable=False),
        sa.Column('title', sa.String(length=200), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('location', sa.String(length=200), nullable=True),
        sa.Column('department', sa.String(length=100), nullable=True),
        sa.Column('salary_range', sa.String(length=100), nullable=True),
        sa.Column('requirements', sa.Text(), nullable=True),
        sa.Column('job_type', sa.Enum(*JOB_TYPES, name='job_type'), nullable=False, server_default='full-time'),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['company_id'], ['companies.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_jobs_company_id'), 'jobs', ['company_id'], unique=False)
    op.create_index(op.f('ix_jobs_is_active'), 'jobs', ['is_active'], unique=False)
    op.create_index(op.f('ix_jobs_created_at'), 'jobs', ['created_at'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_jobs_created_at'), table_name='jobs')
    op.drop_index(op.f('ix_jobs_is_active'), table_name='jobs')
    op.drop_index(op.f('ix_jobs_company_id'), table_name='jobs')
    op.drop_table('jobs')

    op.drop_index(op.f('ix_careers_sections_company_id'), table_name='careers_sections')
    op.drop_table('careers_sections')

    op.drop_index(op.f('ix_recruiters_company_id'), table_name='recruiters')
    op.drop_index(op.f('ix_recruiters_email'), table_name='recruiters')
    op.drop_table('recruiters')

    op.drop_index(op.f('ix_companies_slug'), table_name='companies')
    op.drop_table('companies')

    # PostgreSQL keeps enum types after their tables are gone
    sa.Enum(name='job_type').drop(op.get_bind(), checkfirst=True)
    sa.Enum(name='section_type').drop(op.get_bind(), checkfirst=True)
