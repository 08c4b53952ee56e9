"""Subscriber account and bandwidth profile lifecycle."""
import logging

from sqlalchemy import desc
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from netpanel.errors import Conflict, NotFound
from netpanel.models.activity import ActivityAction, ActivityLog
from netpanel.models.radius import RadiusProfile, RadiusUser, RadiusUserStatus
from netpanel.models.types import utcnow
from netpanel.schemas.radius import (
    RadiusProfileCreate,
    RadiusProfileUpdate,
    RadiusUserCreate,
    RadiusUserUpdate,
)
from netpanel.services import activity_log, validators
from netpanel.utils.auth import hash_password

logger = logging.getLogger(__name__)


def _get_profile(db: Session, profile_id: int) -> RadiusProfile:
    profile = db.get(RadiusProfile, profile_id)
    if not profile:
        raise NotFound(f"Radius profile with id {profile_id} not found")
    return profile


def _get_user(db: Session, user_id: int) -> RadiusUser:
    user = db.get(RadiusUser, user_id)
    if not user:
        raise NotFound(f"Radius user with id {user_id} not found")
    return user


# Profiles


def list_profiles(db: Session) -> list[RadiusProfile]:
    return db.query(RadiusProfile).order_by(desc(RadiusProfile.created_at), desc(RadiusProfile.id)).all()


def create_profile(db: Session, payload: RadiusProfileCreate) -> RadiusProfile:
    profile = RadiusProfile(**payload.model_dump(), created_at=utcnow())
    db.add(profile)
    db.commit()
    db.refresh(profile)
    return profile


def update_profile(db: Session, profile_id: int, payload: RadiusProfileUpdate) -> RadiusProfile:
    profile = _get_profile(db, profile_id)
    for key, value in payload.changes().items():
        setattr(profile, key, value)
    db.commit()
    db.refresh(profile)
    return profile


def delete_profile(db: Session, profile_id: int) -> bool:
    profile = _get_profile(db, profile_id)
    in_use = validators.dependent_account_count(db, profile_id)
    if in_use > 0:
        raise Conflict(f"Cannot delete profile: {in_use} users are still using this profile")
    db.delete(profile)
    db.commit()
    logger.info("Radius profile %s deleted", profile_id)
    return True


# Accounts


def list_users(db: Session) -> list[RadiusUser]:
    return db.query(RadiusUser).order_by(RadiusUser.id).all()


def create_user(db: Session, payload: RadiusUserCreate) -> RadiusUser:
    validators.require_profile(db, payload.profile_id)
    validators.require_username_available(db, payload.username)

    data = payload.model_dump()
    data["password"] = hash_password(payload.password)
    user = RadiusUser(**data, status=RadiusUserStatus.active, created_at=utcnow())
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # Lost the race with a concurrent create for the same username.
        db.rollback()
        raise Conflict(f"Username {payload.username} already exists") from None
    db.refresh(user)
    logger.info("Radius user %s created (id=%s)", user.username, user.id)

    activity_log.append(
        db,
        action=ActivityAction.account_created,
        user_id=user.id,
        username=user.username,
    )
    db.refresh(user)
    return user


def update_user(db: Session, user_id: int, payload: RadiusUserUpdate) -> RadiusUser:
    user = _get_user(db, user_id)
    changes = payload.changes()
    if "profile_id" in changes:
        validators.require_profile(db, changes["profile_id"])
    if "password" in changes:
        changes["password"] = hash_password(changes["password"])
    for key, value in changes.items():
        setattr(user, key, value)
    db.commit()
    db.refresh(user)
    logger.info("Radius user %s updated (%s)", user.username, ", ".join(sorted(changes)) or "no fields")

    activity_log.append(
        db,
        action=ActivityAction.account_updated,
        user_id=user.id,
        username=user.username,
    )
    db.refresh(user)
    return user


def delete_user(db: Session, user_id: int) -> bool:
    """Remove the account; its log history stays with the username snapshot.

    The removal entry, the unlinking of older entries and the row delete are
    committed together.
    """
    user = _get_user(db, user_id)
    username = user.username
    # No dedicated deletion action exists in the log enumeration.
    db.add(activity_log.build_entry(action=ActivityAction.account_updated, user_id=user.id, username=username))
    db.flush()
    db.query(ActivityLog).filter(ActivityLog.user_id == user_id).update(
        {ActivityLog.user_id: None}, synchronize_session=False
    )
    db.delete(user)
    db.commit()
    logger.info("Radius user %s deleted (id=%s)", username, user_id)
    return True
