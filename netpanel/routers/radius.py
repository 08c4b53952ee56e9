from typing import Annotated

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session

from netpanel.database import get_db
from netpanel.schemas.common import MAX_INT, SuccessResponse
from netpanel.schemas.radius import (
    RadiusProfileCreate,
    RadiusProfileResponse,
    RadiusProfileUpdate,
    RadiusUserCreate,
    RadiusUserResponse,
    RadiusUserUpdate,
)
from netpanel.services import radius_service

router = APIRouter(prefix="/api/radius", tags=["radius"])

EntityId = Annotated[int, Path(ge=1, le=MAX_INT)]


@router.get("/profiles", response_model=list[RadiusProfileResponse])
def list_profiles(db: Session = Depends(get_db)):
    return radius_service.list_profiles(db)


@router.post("/profiles", response_model=RadiusProfileResponse, status_code=status.HTTP_201_CREATED)
def create_profile(body: RadiusProfileCreate, db: Session = Depends(get_db)):
    return radius_service.create_profile(db, body)


@router.put("/profiles/{profile_id}", response_model=RadiusProfileResponse)
def update_profile(profile_id: EntityId, body: RadiusProfileUpdate, db: Session = Depends(get_db)):
    return radius_service.update_profile(db, profile_id, body)


@router.delete("/profiles/{profile_id}", response_model=SuccessResponse)
def delete_profile(profile_id: EntityId, db: Session = Depends(get_db)):
    return SuccessResponse(success=radius_service.delete_profile(db, profile_id))


@router.get("/users", response_model=list[RadiusUserResponse])
def list_users(db: Session = Depends(get_db)):
    return radius_service.list_users(db)


@router.post("/users", response_model=RadiusUserResponse, status_code=status.HTTP_201_CREATED)
def create_user(body: RadiusUserCreate, db: Session = Depends(get_db)):
    return radius_service.create_user(db, body)


@router.put("/users/{user_id}", response_model=RadiusUserResponse)
def update_user(user_id: EntityId, body: RadiusUserUpdate, db: Session = Depends(get_db)):
    return radius_service.update_user(db, user_id, body)


@router.delete("/users/{user_id}", response_model=SuccessResponse)
def delete_user(user_id: EntityId, db: Session = Depends(get_db)):
    return SuccessResponse(success=radius_service.delete_user(db, user_id))
