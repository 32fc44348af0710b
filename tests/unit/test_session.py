"""Unit tests for the sign-in/sign-out state machine."""
from unittest.mock import patch

from sqlalchemy.exc import OperationalError

from tracker import models
from tracker.core.settings import Settings
from tracker.enums import AuthState, ProjectStatus, UserRole
from tracker.services.profile_service import ProfileService
from tracker.services.project_service import ProjectService
from tracker.session import SessionContext


class TestSessionContext:
    def test_starts_unauthenticated(self, settings):
        session = SessionContext(settings)

        assert session.state == AuthState.UNAUTHENTICATED
        assert session.user is None
        assert session.profile is None
        assert session.is_admin is False

    def test_loading_update_moves_to_auth_checking(self, db_session, settings):
        session = SessionContext(settings)

        assert session.on_auth_state_changed(db_session, True, None) == AuthState.AUTH_CHECKING

    def test_first_sign_in_seeds_five_projects_for_empty_business(self, db_session, business, make_user):
        """Business b1 has zero projects: the first sign-in seeds exactly five."""
        settings = Settings(default_business_id="b1", seed_sample_data=True)
        user = make_user("first@example.com")
        session = SessionContext(settings)

        state = session.on_auth_state_changed(db_session, False, user)

        projects = ProjectService.list_by_business(db_session, "b1")
        assert state == AuthState.HAS_PROFILE
        assert session.provisioned is True
        assert session.profile.role == UserRole.ADMIN
        assert session.business.id == "b1"
        assert len(projects) == 5
        assert len({p.id for p in projects}) == 5
        assert {p.status for p in projects} <= {
            ProjectStatus.TODO, ProjectStatus.IN_PROGRESS, ProjectStatus.REVIEW, ProjectStatus.COMPLETED
        }

    def test_existing_profile_is_loaded_without_seeding(self, db_session, business, admin_user, settings):
        session = SessionContext(settings)

        state = session.sign_in(db_session, admin_user)

        assert state == AuthState.HAS_PROFILE
        assert session.provisioned is False
        assert session.business_id == business.id
        assert session.is_admin is True
        assert db_session.query(models.Project).count() == 0

    def test_second_sign_in_does_not_seed_again(self, db_session, settings, make_user):
        user = make_user("first@example.com")
        SessionContext(settings).sign_in(db_session, user)

        session = SessionContext(settings)
        session.sign_in(db_session, user)

        assert session.provisioned is False
        assert db_session.query(models.Project).count() == 5
        assert db_session.query(models.UserProfile).count() == 1

    def test_sign_out_clears_state(self, db_session, admin_user, settings):
        session = SessionContext(settings)
        session.sign_in(db_session, admin_user)

        state = session.on_auth_state_changed(db_session, False, None)

        assert state == AuthState.UNAUTHENTICATED
        assert session.user is None
        assert session.profile is None
        assert session.business is None
        assert session.business_id is None

    def test_provisioned_profile_is_claimed_on_sign_in(self, db_session, business, settings, make_user):
        ProfileService.create_profile(db_session, "new@example.com", business.id, UserRole.MANAGER, "New Person")
        user = make_user("new@example.com")
        session = SessionContext(settings)

        session.sign_in(db_session, user)

        assert session.provisioned is False
        assert session.profile.user_id == user.id
        assert session.profile.role == UserRole.MANAGER
        assert session.business_id == business.id

    def test_store_failure_leaves_no_profile(self, db_session, settings, make_user):
        user = make_user("first@example.com")
        session = SessionContext(settings)

        with patch.object(
            ProfileService, "find_for_identity",
            side_effect=OperationalError("SELECT", {}, Exception("connection reset"))
        ):
            state = session.sign_in(db_session, user)

        assert state == AuthState.NO_PROFILE
        assert session.user is user
        assert session.profile is None
