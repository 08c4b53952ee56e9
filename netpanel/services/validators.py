"""Read-only checks run before account and profile mutations.

Passing a check does not guarantee the following write succeeds under
concurrent requests; the unique index on ``radius_users.username`` is the final
guard for usernames.
"""
from sqlalchemy import func
from sqlalchemy.orm import Session

from netpanel.errors import Conflict, ReferenceNotFound
from netpanel.models.radius import RadiusProfile, RadiusUser


def profile_exists(db: Session, profile_id: int) -> bool:
    return db.get(RadiusProfile, profile_id) is not None


def username_available(db: Session, username: str) -> bool:
    """Exact, case-sensitive match against existing accounts."""
    taken = db.query(RadiusUser.id).filter(RadiusUser.username == username).first()
    return taken is None


def dependent_account_count(db: Session, profile_id: int) -> int:
    return (
        db.query(func.count(RadiusUser.id))
        .filter(RadiusUser.profile_id == profile_id)
        .scalar()
    ) or 0


def require_profile(db: Session, profile_id: int) -> None:
    if not profile_exists(db, profile_id):
        raise ReferenceNotFound(f"Radius profile with id {profile_id} not found")


def require_username_available(db: Session, username: str) -> None:
    if not username_available(db, username):
        raise Conflict(f"Username {username} already exists")
