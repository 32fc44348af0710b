# scripts/seed_demo_data.py
"""
Populate a database with demo businesses, users and projects.

Usage:
    python scripts/seed_demo_data.py [--migrate]

With --migrate the Alembic migrations are applied first.
"""
from datetime import date, timedelta
import argparse
import random

from tracker.db import SessionLocal
from tracker.auth import create_user
from tracker.enums import EffortLevel, ProjectStatus, UserRole
from tracker.models import User
from tracker.services.bootstrap_service import BootstrapService
from tracker.services.business_service import BusinessService
from tracker.services.profile_service import ProfileService
from tracker.services.project_service import ProjectService

# ----------------------------
# Tunables
# ----------------------------
RANDOM_SEED = 42
PROJECTS_PER_COMPANY = 12
DEMO_PASSWORD = "password123"
COMPANIES = [
    {"name": "Harbour Support Services", "description": "Customer support outsourcing"},
    {"name": "Northwind Field Ops", "description": "Field service and maintenance"},
]
STAFF = [
    ("Priya Patel", UserRole.MANAGER),
    ("Tom Becker", UserRole.STAFF),
    ("Ana Lima", UserRole.STAFF),
]
PROJECT_THEMES = [
    "Onboarding Revamp", "CRM Migration", "Quarterly Reporting", "Help Centre Refresh",
    "Billing Cleanup", "Escalation Playbook", "Chatbot Pilot", "Training Portal",
    "SLA Dashboard", "Vendor Review", "Data Retention Policy", "Release Process",
]
CADENCES = ["Weekly standup", "Bi-weekly review", "Monthly steering", "Daily during launch"]


def run_migrations():
    from alembic import command
    from alembic.config import Config

    print("Running database migrations...")
    command.upgrade(Config("alembic.ini"), "head")
    print("Migrations completed successfully!")


def slug(name: str) -> str:
    return name.lower().replace(" ", ".")


def get_or_create_user(db, email: str, display_name: str) -> User:
    user = db.query(User).filter(User.email == email).first()
    if user:
        return user
    return create_user(db, email=email, password=DEMO_PASSWORD, display_name=display_name)


def random_project(owner: str) -> dict:
    start = date.today() - timedelta(days=random.randint(0, 120))
    return {
        "project_name": random.choice(PROJECT_THEMES),
        "project_description": "Demo project generated by the seeding script.",
        "status": random.choice(list(ProjectStatus)),
        "effort_level": random.choice(list(EffortLevel)),
        "time_commitment_per_week": random.choice([2, 4, 6, 8, 12, 16]),
        "project_owner": owner,
        "start_date": start,
        "target_completion_date": start + timedelta(days=random.randint(14, 180)),
        "meeting_cadence": random.choice(CADENCES),
        "comm_channel": "#" + slug(owner).replace(".", "-"),
    }


def seed_company(db, company: dict) -> None:
    business_id = BusinessService.create(db, name=company["name"], description=company["description"])
    domain = slug(company["name"]).split(".")[0] + ".example.com"

    admin = get_or_create_user(db, f"admin@{domain}", f"{company['name']} Admin")
    ProfileService.create_profile(db, admin.id, business_id, UserRole.ADMIN, admin.display_name)
    BootstrapService.seed_sample_projects(db, admin.id, business_id)

    owners = [admin.display_name]
    for name, role in STAFF:
        user = get_or_create_user(db, f"{slug(name)}@{domain}", name)
        ProfileService.create_profile(db, user.id, business_id, role, name)
        owners.append(name)

    for _ in range(PROJECTS_PER_COMPANY):
        ProjectService.create_project(db, random_project(random.choice(owners)), business_id, admin.id)

    print(f"Seeded {company['name']} ({business_id}); admin login admin@{domain} / {DEMO_PASSWORD}")


def main():
    parser = argparse.ArgumentParser(description="Seed demo data")
    parser.add_argument("--migrate", action="store_true", help="apply migrations before seeding")
    args = parser.parse_args()

    if args.migrate:
        run_migrations()

    random.seed(RANDOM_SEED)
    db = SessionLocal()
    try:
        BootstrapService.initialize_database(db)
        for company in COMPANIES:
            seed_company(db, company)
    finally:
        db.close()


if __name__ == "__main__":
    main()
