from typing import List, Optional
from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session
from .. import schemas
from ..dependencies import get_db, require_admin
from ..services.admin_service import AdminService
from ..services.business_service import BusinessService
from ..services.profile_service import ProfileService
from ..session import SessionContext

router = APIRouter(
    prefix="/admin",
    tags=["Admin"],
    responses={403: {"description": "Admin access required"}},
)


@router.get("/businesses", response_model=List[schemas.BusinessSummary])
def list_businesses(
    search: Optional[str] = Query(None),
    db: Session = Depends(get_db),
    session: SessionContext = Depends(require_admin)
):
    """All businesses, newest first, with user counts and project stats"""
    return AdminService.list_business_summaries(db, search)


@router.post("/businesses", response_model=schemas.BusinessResponse, status_code=status.HTTP_201_CREATED)
def create_business(
    request: schemas.BusinessCreate,
    db: Session = Depends(get_db),
    session: SessionContext = Depends(require_admin)
):
    return AdminService.create_business(db, request)


@router.delete("/businesses/{business_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_business(
    business_id: str,
    db: Session = Depends(get_db),
    session: SessionContext = Depends(require_admin)
):
    """Delete an empty business; businesses with users or projects are refused"""
    BusinessService.delete(db, business_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/users", response_model=List[schemas.UserProfileResponse])
def list_users(
    search: Optional[str] = Query(None),
    db: Session = Depends(get_db),
    session: SessionContext = Depends(require_admin)
):
    return AdminService.list_profiles(db, search)


@router.post("/users", response_model=schemas.UserProfileResponse, status_code=status.HTTP_201_CREATED)
def create_user(
    request: schemas.UserProfileCreate,
    db: Session = Depends(get_db),
    session: SessionContext = Depends(require_admin)
):
    """Provision a profile ahead of the person's first sign-in"""
    return AdminService.provision_profile(db, request)


@router.patch("/users/{profile_id}/role", response_model=schemas.UserProfileResponse)
def change_user_role(
    profile_id: str,
    request: schemas.UserProfileRoleUpdate,
    db: Session = Depends(get_db),
    session: SessionContext = Depends(require_admin)
):
    return AdminService.change_role(db, profile_id, request)


@router.delete("/users/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(
    user_id: str,
    db: Session = Depends(get_db),
    session: SessionContext = Depends(require_admin)
):
    """Delete the profile belonging to a user id"""
    ProfileService.delete_by_user_id(db, user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
