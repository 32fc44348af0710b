"""Create businesses, users, user_profiles, projects and project_assignments

Revision ID: 3c1d9e7a2b40
Revises:
Create Date: 2026-10-19 09:12:44.318204

"""
from alembic import op
import sqlalchemy as sa

revision = '3c1d9e7a2b40'
down_revision = None
branch_labels = None
depends_on = None

PROJECT_STATUS = sa.Enum("todo", "in_progress", "review", "completed", name="project_status")
EFFORT_LEVEL = sa.Enum("low", "medium", "high", name="effort_level")
USER_ROLE = sa.Enum("admin", "manager", "staff", name="user_role")


def upgrade() -> None:
    # 1) Tenants and identities
    op.create_table(
        "businesses",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_businesses_id", "businesses", ["id"])
    op.create_index("ix_businesses_name", "businesses", ["name"])

    op.create_table(
        "users",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("email", sa.String(), nullable=False),
        sa.Column("password_hash", sa.String(), nullable=False),
        sa.Column("display_name", sa.String(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_users_id", "users", ["id"])
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    # 2) Profiles → businesses(id)
    op.create_table(
        "user_profiles",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("user_id", sa.String(), nullable=False),
        sa.Column("business_id", sa.String(64), sa.ForeignKey("businesses.id"), nullable=False),
        sa.Column("role", USER_ROLE, nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_user_profiles_id", "user_profiles", ["id"])
    op.create_index("ix_user_profiles_user_id", "user_profiles", ["user_id"], unique=True)
    op.create_index("ix_user_profiles_business_id", "user_profiles", ["business_id"])

    # 3) Projects → businesses(id)
    op.create_table(
        "projects",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("business_id", sa.String(64), sa.ForeignKey("businesses.id"), nullable=False),
        sa.Column("created_by", sa.String(), nullable=False),
        sa.Column("project_name", sa.String(), nullable=False),
        sa.Column("project_description", sa.Text(), nullable=True),
        sa.Column("start_date", sa.Date(), nullable=True),
        sa.Column("target_completion_date", sa.Date(), nullable=True),
        sa.Column("status", PROJECT_STATUS, nullable=False),
        sa.Column("project_owner", sa.String(), nullable=True),
        sa.Column("support_management_resource", sa.String(), nullable=True),
        sa.Column("support_role", sa.String(), nullable=True),
        sa.Column("effort_level", EFFORT_LEVEL, nullable=False),
        sa.Column("time_commitment_per_week", sa.Integer(), nullable=True),
        sa.Column("project_docs_links", sa.Text(), nullable=True),
        sa.Column("expected_outcomes", sa.Text(), nullable=True),
        sa.Column("training_needed", sa.Text(), nullable=True),
        sa.Column("tool_process_change", sa.Text(), nullable=True),
        sa.Column("meeting_cadence", sa.String(), nullable=True),
        sa.Column("comm_channel", sa.String(), nullable=True),
        sa.Column("escalation_path", sa.Text(), nullable=True),
        sa.Column("dependencies", sa.Text(), nullable=True),
        sa.Column("key_milestones", sa.Text(), nullable=True),
        sa.Column("risks_blockers", sa.Text(), nullable=True),
        sa.Column("action_items", sa.Text(), nullable=True),
        sa.Column("latest_update", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_projects_id", "projects", ["id"])
    op.create_index("ix_projects_business_id", "projects", ["business_id"])
    op.create_index("ix_projects_project_name", "projects", ["project_name"])
    op.create_index("ix_projects_status", "projects", ["status"])
    op.create_index("ix_projects_updated_at", "projects", ["updated_at"])

    # 4) Assignments → projects(id), removed with their project
    op.create_table(
        "project_assignments",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("project_id", sa.String(64), sa.ForeignKey("projects.id", ondelete="CASCADE"), nullable=False),
        sa.Column("user_id", sa.String(), nullable=False),
        sa.Column("role", sa.String(), nullable=True),
        sa.Column("assigned_at", sa.DateTime(timezone=True), nullable=False),
        sa.UniqueConstraint("project_id", "user_id", name="uq_project_assignment"),
    )
    op.create_index("ix_project_assignments_id", "project_assignments", ["id"])
    op.create_index("ix_project_assignments_project_id", "project_assignments", ["project_id"])
    op.create_index("ix_project_assignments_user_id", "project_assignments", ["user_id"])


def downgrade() -> None:
    op.drop_table("project_assignments")
    op.drop_table("projects")
    op.drop_table("user_profiles")
    op.drop_table("users")
    op.drop_table("businesses")
    bind = op.get_bind()
    PROJECT_STATUS.drop(bind, checkfirst=True)
    EFFORT_LEVEL.drop(bind, checkfirst=True)
    USER_ROLE.drop(bind, checkfirst=True)
