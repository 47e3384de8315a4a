"""Initial site schema

Revision ID: 001_initial_site_schema
Revises:
Create Date: 2026-10-19 12:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '001_initial_site_schema'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    # Изменения каталога услуг из админки
    op.create_table('service_overrides',
        sa.Column('service_id', sa.String(length=255), nullable=False),
        sa.Column('data', sa.Text(), nullable=False),
        sa.Column('deleted', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.PrimaryKeyConstraint('service_id')
    )
    op.create_index('idx_overrides_deleted', 'service_overrides', ['deleted'], unique=False)

    # Тексты страниц и JSON-конфигурации блоков
    op.create_table('page_texts',
        sa.Column('key', sa.String(length=255), nullable=False),
        sa.Column('value', sa.Text(), nullable=False, server_default=''),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.PrimaryKeyConstraint('key')
    )

    # Служебные настройки (Telegram, учетные данные админа)
    op.create_table('site_settings',
        sa.Column('key', sa.String(length=100), nullable=False),
        sa.Column('value', sa.Text(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.PrimaryKeyConstraint('key')
    )

    op.create_table('system_logs',
        sa.Column('id', sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column('level', sa.String(length=20), nullable=False),
        sa.Column('message', sa.Text(), nullable=False),
        sa.Column('module', sa.String(length=100), nullable=True),
        sa.Column('extra_data', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.CheckConstraint(
            "level IN ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL', 'BUSINESS')",
            name='check_log_level'
        ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('idx_logs_level_created', 'system_logs', ['level', 'created_at'], unique=False)
    op.create_index('idx_logs_created', 'system_logs', ['created_at'], unique=False)


def downgrade() -> None:
    op.drop_index('idx_logs_created', table_name='system_logs')
    op.drop_index('idx_logs_level_created', table_name='system_logs')
    op.drop_table('system_logs')
    op.drop_table('site_settings')
    op.drop_table('page_texts')
    op.drop_index('idx_overrides_deleted', table_name='service_overrides')
    op.drop_table('service_overrides')
