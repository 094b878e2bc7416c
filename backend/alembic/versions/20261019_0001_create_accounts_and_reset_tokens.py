"""Create accounts and password reset tokens.

Revision ID: 0001
Revises:
Create Date: 2026-10-19
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision = '0001'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'accounts',
        sa.Column('username', sa.String(64), primary_key=True),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('password_hash', sa.String(128), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index('ix_accounts_email', 'accounts', ['email'], unique=True)

    # Tokens are keyed by the SHA-256 digest of the raw token
    op.create_table(
        'password_reset_tokens',
        sa.Column('token_hash', sa.String(64), primary_key=True),
        sa.Column(
            'account_id',
            sa.String(64),
            sa.ForeignKey('accounts.username', ondelete='CASCADE'),
            nullable=False,
        ),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('expires_at', sa.DateTime(), nullable=False),
        sa.Column('used', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('used_at', sa.DateTime(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index('ix_password_reset_tokens_account_id', 'password_reset_tokens', ['account_id'])


def downgrade():
    op.drop_index('ix_password_reset_tokens_account_id')
    op.drop_table('password_reset_tokens')
    op.drop_index('ix_accounts_email')
    op.drop_table('accounts')
