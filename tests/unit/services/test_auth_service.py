import pytest
from unittest.mock import Mock, patch
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from fastapi import HTTPException
from datetime import datetime

from tracker.services.auth_service import AuthService
from tracker.schemas import SignupRequest, LoginRequest


class TestAuthService:
    """Test cases for AuthService business logic."""

    def test_check_user_exists_returns_true_when_user_exists(self):
        """Test that check_user_exists returns True when user exists."""
        # Arrange
        mock_db = Mock(spec=Session)
        mock_query = Mock()
        mock_filter = Mock()
        
        mock_db.query.return_value = mock_query
        mock_query.filter.return_value = mock_filter
        mock_filter.first.return_value = Mock()
        
        # Act
        result = AuthService.check_user_exists(mock_db, "test@example.com")
        
        # Assert
        assert result is True
        mock_db.query.assert_called_once()
    
    def test_check_user_exists_returns_false_when_user_does_not_exist(self):
        """Test that check_user_exists returns False when user does not exist."""
        mock_db = Mock(spec=Session)
        mock_db.query.return_value.filter.return_value.first.return_value = None
        
        assert AuthService.check_user_exists(mock_db, "test@example.com") is False
    
    def test_create_access_token_for_user(self):
        """Test that the token carries the email as subject and the user id."""
        mock_user = Mock()
        mock_user.email = "test@example.com"
        mock_user.id = "user_1"
        
        with patch('tracker.services.auth_service.auth_create_access_token') as mock_create_token:
            mock_create_token.return_value = "test_token"
            
            result = AuthService.create_access_token_for_user(mock_user)
            
            assert result == "test_token"
            token_data = mock_create_token.call_args[1]['data']
            assert token_data['sub'] == "test@example.com"
            assert token_data['user_id'] == "user_1"
    
    def test_signup_user_success(self):
        """Test successful signup returns the user and a bearer token."""
        mock_db = Mock(spec=Session)
        mock_user = Mock()
        mock_user.id = "user_1"
        mock_user.email = "test@example.com"
        mock_user.display_name = "Tess"
        mock_user.created_at = datetime.now()
        
        request = SignupRequest(email="test@example.com", password="testpassword", display_name="Tess")
        
        with patch.object(AuthService, 'check_user_exists', return_value=False), \
             patch('tracker.services.auth_service.auth_create_user', return_value=mock_user), \
             patch.object(AuthService, 'create_access_token_for_user', return_value="test_token"):
            
            result = AuthService.signup_user(mock_db, request)
            
            assert result.access_token == "test_token"
            assert result.token_type == "bearer"
            assert result.user.display_name == "Tess"
    
    def test_signup_user_email_already_exists(self):
        """Test signup fails when email already exists."""
        mock_db = Mock(spec=Session)
        request = SignupRequest(email="test@example.com", password="testpassword")
        
        with patch.object(AuthService, 'check_user_exists', return_value=True):
            with pytest.raises(HTTPException) as exc_info:
                AuthService.signup_user(mock_db, request)
            
            assert exc_info.value.status_code == 400
            assert "Email already registered" in exc_info.value.detail
            mock_db.rollback.assert_called_once()
    
    def test_signup_user_integrity_error(self):
        """Test signup handles IntegrityError gracefully."""
        mock_db = Mock(spec=Session)
        request = SignupRequest(email="test@example.com", password="testpassword")
        
        with patch.object(AuthService, 'check_user_exists', return_value=False), \
             patch('tracker.services.auth_service.auth_create_user', side_effect=IntegrityError("", "", "")):
            with pytest.raises(HTTPException) as exc_info:
                AuthService.signup_user(mock_db, request)
            
            assert exc_info.value.status_code == 400
            mock_db.rollback.assert_called_once()
    
    def test_login_user_runs_sign_in(self, db_session, admin_user, business):
        """Test that login returns the profile and business of the signed-in user."""
        request = LoginRequest(email="admin@example.com", password="testpass123")
        
        result = AuthService.login_user(db_session, request)
        
        assert result.token_type == "bearer"
        assert result.user.id == admin_user.id
        assert result.profile.business_id == business.id
        assert result.business.name == "Test Business"
    
    def test_login_user_invalid_credentials(self):
        """Test login fails with invalid credentials."""
        mock_db = Mock(spec=Session)
        request = LoginRequest(email="test@example.com", password="wrongpassword")
        
        with patch('tracker.services.auth_service.auth_authenticate_user', return_value=None):
            with pytest.raises(HTTPException) as exc_info:
                AuthService.login_user(mock_db, request)
            
            assert exc_info.value.status_code == 401
            assert "Incorrect email or password" in exc_info.value.detail
