"""Initial schema

Revision ID: 001
Revises:
Create Date: 2025-03-10

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

from netpanel.models.types import DecimalText

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

device_status = sa.Enum("online", "offline", "error", name="device_status")
user_status = sa.Enum("active", "idle", "disabled", name="user_status")
radius_user_status = sa.Enum("active", "suspended", "expired", name="radius_user_status")
activity_action = sa.Enum(
    "login", "logout", "session_start", "session_end",
    "account_created", "account_updated", "account_suspended",
    name="activity_action",
)


def upgrade() -> None:
    op.create_table(
        "mikrotik_devices",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("ip_address", sa.String(255), nullable=False),
        sa.Column("username", sa.Text(), nullable=False),
        sa.Column("password", sa.Text(), nullable=False),
        sa.Column("port", sa.Integer(), nullable=False, server_default="8728"),
        sa.Column("status", device_status, nullable=False, server_default="offline"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "mikrotik_monitoring",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("device_id", sa.Integer(), nullable=False),
        sa.Column("cpu_usage", DecimalText(5, 2), nullable=False),
        sa.Column("ram_usage", DecimalText(10, 2), nullable=False),
        sa.Column("total_ram", DecimalText(10, 2), nullable=False),
        sa.Column("uptime", sa.Text(), nullable=False),
        sa.Column("recorded_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_mikrotik_monitoring_device_id"), "mikrotik_monitoring", ["device_id"], unique=False)

    op.create_table(
        "interface_traffic",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("device_id", sa.Integer(), nullable=False),
        sa.Column("interface_name", sa.Text(), nullable=False),
        sa.Column("rx_bytes", DecimalText(20), nullable=False),
        sa.Column("tx_bytes", DecimalText(20), nullable=False),
        sa.Column("rx_packets", DecimalText(20), nullable=False),
        sa.Column("tx_packets", DecimalText(20), nullable=False),
        sa.Column("recorded_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_interface_traffic_device_id"), "interface_traffic", ["device_id"], unique=False)

    op.create_table(
        "active_users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("device_id", sa.Integer(), nullable=False),
        sa.Column("username", sa.Text(), nullable=False),
        sa.Column("ip_address", sa.String(255), nullable=False),
        sa.Column("mac_address", sa.String(64), nullable=True),
        sa.Column("session_time", sa.Text(), nullable=False),
        sa.Column("bytes_in", DecimalText(20), nullable=False),
        sa.Column("bytes_out", DecimalText(20), nullable=False),
        sa.Column("status", user_status, nullable=False, server_default="active"),
        sa.Column("last_seen", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_active_users_device_id"), "active_users", ["device_id"], unique=False)

    op.create_table(
        "radius_profiles",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("upload_speed", sa.Integer(), nullable=False),
        sa.Column("download_speed", sa.Integer(), nullable=False),
        sa.Column("session_timeout", sa.Integer(), nullable=True),
        sa.Column("idle_timeout", sa.Integer(), nullable=True),
        sa.Column("monthly_quota", sa.Integer(), nullable=True),
        sa.Column("price", DecimalText(10, 2), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "radius_users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("username", sa.String(255), nullable=False),
        sa.Column("password", sa.String(255), nullable=False),
        sa.Column("profile_id", sa.Integer(), nullable=False),
        sa.Column("full_name", sa.Text(), nullable=True),
        sa.Column("email", sa.Text(), nullable=True),
        sa.Column("phone", sa.Text(), nullable=True),
        sa.Column("address", sa.Text(), nullable=True),
        sa.Column("status", radius_user_status, nullable=False, server_default="active"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_radius_users_username"), "radius_users", ["username"], unique=True)
    op.create_index(op.f("ix_radius_users_profile_id"), "radius_users", ["profile_id"], unique=False)

    op.create_table(
        "activity_logs",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=True),
        sa.Column("username", sa.Text(), nullable=False),
        sa.Column("action", activity_action, nullable=False),
        sa.Column("ip_address", sa.String(255), nullable=True),
        sa.Column("mac_address", sa.String(64), nullable=True),
        sa.Column("bytes_in", DecimalText(20), nullable=True),
        sa.Column("bytes_out", DecimalText(20), nullable=True),
        sa.Column("session_duration", sa.Integer(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_activity_logs_user_id"), "activity_logs", ["user_id"], unique=False)
    op.create_index(op.f("ix_activity_logs_created_at"), "activity_logs", ["created_at"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_activity_logs_created_at"), table_name="activity_logs")
    op.drop_index(op.f("ix_activity_logs_user_id"), table_name="activity_logs")
    op.drop_table("activity_logs")
    op.drop_index(op.f("ix_radius_users_profile_id"), table_name="radius_users")
    op.drop_index(op.f("ix_radius_users_username"), table_name="radius_users")
    op.drop_table("radius_users")
    op.drop_table("radius_profiles")
    op.drop_index(op.f("ix_active_users_device_id"), table_name="active_users")
    op.drop_table("active_users")
    op.drop_index(op.f("ix_interface_traffic_device_id"), table_name="interface_traffic")
    op.drop_table("interface_traffic")
    op.drop_index(op.f("ix_mikrotik_monitoring_device_id"), table_name="mikrotik_monitoring")
    op.drop_table("mikrotik_monitoring")
    for enum in (activity_action, radius_user_status, user_status, device_status):
        enum.drop(op.get_bind(), checkfirst=True)
