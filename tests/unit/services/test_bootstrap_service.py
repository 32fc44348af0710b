"""Unit tests for first sign-in provisioning and sample data seeding."""
from unittest.mock import patch

from fastapi import HTTPException
from sqlalchemy.exc import OperationalError

from tracker import models
from tracker.enums import AuthState, ProjectStatus, UserRole
from tracker.services.bootstrap_service import BootstrapService
from tracker.services.project_service import ProjectService
from tracker.session import SessionContext


class TestSeedSampleProjects:
    def test_seeds_five_projects_for_empty_business(self, db_session, business):
        created = BootstrapService.seed_sample_projects(db_session, "user_1", business.id)

        projects = ProjectService.list_by_business(db_session, business.id)
        assert len(created) == 5
        assert len(set(created)) == 5
        assert {p.id for p in projects} == set(created)
        assert {p.status for p in projects} <= set(ProjectStatus)
        assert all(p.created_by == "user_1" for p in projects)

    def test_seeding_twice_is_a_noop(self, db_session, business):
        """Test that the second seeding run creates no records."""
        BootstrapService.seed_sample_projects(db_session, "user_1", business.id)

        created = BootstrapService.seed_sample_projects(db_session, "user_1", business.id)

        assert created == []
        assert db_session.query(models.Project).count() == 5

    def test_business_with_existing_projects_is_not_seeded(self, db_session, business):
        ProjectService.create_project(db_session, {"project_name": "Real work"}, business.id, "user_1")

        assert BootstrapService.seed_sample_projects(db_session, "user_1", business.id) == []
        assert db_session.query(models.Project).count() == 1

    def test_seeding_one_business_does_not_block_another(self, db_session, business, other_business):
        BootstrapService.seed_sample_projects(db_session, "user_1", business.id)

        created = BootstrapService.seed_sample_projects(db_session, "user_2", other_business.id)

        assert len(created) == 5

    def test_store_failure_is_logged_and_swallowed(self, db_session, business):
        with patch.object(
            ProjectService, "has_projects",
            side_effect=OperationalError("SELECT", {}, Exception("database is locked"))
        ):
            assert BootstrapService.seed_sample_projects(db_session, "user_1", business.id) == []

    def test_insert_conflict_is_logged_and_swallowed(self, db_session, business):
        """Test that a conflicting insert stops seeding without raising, keeping the ids already created."""
        conflict = HTTPException(status_code=409, detail="Project conflicts with existing data")
        with patch.object(
            ProjectService, "create_project",
            side_effect=["project_a", "project_b", conflict]
        ):
            created = BootstrapService.seed_sample_projects(db_session, "user_1", business.id)

        assert created == ["project_a", "project_b"]

    def test_insert_conflict_does_not_break_first_sign_in(self, db_session, settings, make_user):
        user = make_user("first@example.com")
        conflict = HTTPException(status_code=409, detail="Project conflicts with existing data")

        with patch.object(ProjectService, "create_project", side_effect=conflict):
            state = SessionContext(settings).sign_in(db_session, user)

        assert state == AuthState.HAS_PROFILE
        assert db_session.query(models.UserProfile).count() == 1


class TestInitializeDatabase:
    def test_creates_default_business_once(self, db_session, settings):
        first = BootstrapService.initialize_database(db_session, settings)
        second = BootstrapService.initialize_database(db_session, settings)

        assert first.id == "default-business"
        assert first.name == "Default Organization"
        assert second.id == first.id
        assert db_session.query(models.Business).count() == 1

    def test_failure_returns_none(self, db_session, settings):
        with patch(
            "tracker.services.bootstrap_service.BusinessService.ensure_default",
            side_effect=OperationalError("SELECT", {}, Exception("connection refused"))
        ):
            assert BootstrapService.initialize_database(db_session, settings) is None


class TestProvisionNewUser:
    def test_creates_admin_profile_in_default_business_and_seeds(self, db_session, settings, make_user):
        user = make_user("first@example.com", display_name="First User")

        profile = BootstrapService.provision_new_user(db_session, user, settings=settings)

        assert profile.user_id == user.id
        assert profile.role == UserRole.ADMIN
        assert profile.name == "First User"
        assert profile.business_id == "default-business"
        assert len(ProjectService.list_by_business(db_session, "default-business")) == 5

    def test_reuses_existing_default_business(self, db_session, settings, make_user):
        BootstrapService.provision_new_user(db_session, make_user("a@example.com"), settings=settings)

        profile = BootstrapService.provision_new_user(db_session, make_user("b@example.com"), settings=settings)

        assert profile.business_id == "default-business"
        assert profile.name == "b@example.com"
        assert db_session.query(models.Business).count() == 1
        assert db_session.query(models.Project).count() == 5

    def test_seeding_can_be_disabled(self, db_session, settings, make_user):
        settings.seed_sample_data = False

        BootstrapService.provision_new_user(db_session, make_user("a@example.com"), settings=settings)

        assert db_session.query(models.Project).count() == 0

    def test_explicit_business_is_created_when_missing(self, db_session, settings, make_user):
        profile = BootstrapService.provision_new_user(
            db_session, make_user("a@example.com"), settings=settings, business_id="acme"
        )

        assert profile.business_id == "acme"
        assert db_session.query(models.Business).filter_by(id="acme").count() == 1
