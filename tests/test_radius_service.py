from decimal import Decimal
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError as PydanticValidationError

from netpanel.errors import AuditLogError, Conflict, NotFound, ReferenceNotFound
from netpanel.models.activity import ActivityAction, ActivityLog
from netpanel.models.radius import RadiusProfile, RadiusUser, RadiusUserStatus
from netpanel.schemas.radius import (
    RadiusProfileCreate,
    RadiusProfileUpdate,
    RadiusUserCreate,
    RadiusUserUpdate,
)
from netpanel.services import activity_log, radius_service
from netpanel.utils.auth import verify_password


def _create_user(db, profile, username="u1", password="secret", **extra):
    return radius_service.create_user(
        db,
        RadiusUserCreate(username=username, password=password, profile_id=profile.id, **extra),
    )


def _logs(db):
    return db.query(ActivityLog).order_by(ActivityLog.id).all()


# Profiles


def test_create_profile_keeps_exact_price(db):
    profile = radius_service.create_profile(
        db,
        RadiusProfileCreate(name="Premium", upload_speed=1024, download_speed=2048, price=29.99),
    )
    assert profile.id is not None
    assert profile.price == Decimal("29.99")
    assert profile.upload_speed == 1024
    assert profile.download_speed == 2048
    assert profile.session_timeout is None
    assert profile.created_at is not None

    listed = radius_service.list_profiles(db)
    assert [p.price for p in listed] == [Decimal("29.99")]


def test_create_profile_null_price(db):
    profile = radius_service.create_profile(
        db, RadiusProfileCreate(name="Free", upload_speed=256, download_speed=512)
    )
    assert profile.price is None


def test_list_profiles_newest_first(db):
    first = radius_service.create_profile(db, RadiusProfileCreate(name="A", upload_speed=1, download_speed=1))
    second = radius_service.create_profile(db, RadiusProfileCreate(name="B", upload_speed=1, download_speed=1))
    assert [p.id for p in radius_service.list_profiles(db)] == [second.id, first.id]


def test_update_profile_only_touches_sent_fields(db):
    profile = radius_service.create_profile(
        db,
        RadiusProfileCreate(
            name="Home",
            upload_speed=1024,
            download_speed=2048,
            session_timeout=3600,
            idle_timeout=600,
            monthly_quota=10000,
            price=19.5,
            description="home plan",
        ),
    )
    created_at = profile.created_at

    updated = radius_service.update_profile(
        db, profile.id, RadiusProfileUpdate(download_speed=4096, description=None, price=None)
    )
    assert updated.download_speed == 4096
    assert updated.description is None
    assert updated.price is None
    assert updated.name == "Home"
    assert updated.upload_speed == 1024
    assert updated.session_timeout == 3600
    assert updated.idle_timeout == 600
    assert updated.monthly_quota == 10000
    assert updated.created_at == created_at


def test_update_profile_rejects_null_speed():
    with pytest.raises(PydanticValidationError):
        RadiusProfileUpdate(upload_speed=None)
    with pytest.raises(PydanticValidationError):
        RadiusProfileUpdate(name=None)


def test_update_missing_profile(db):
    with pytest.raises(NotFound, match="Radius profile with id 42 not found"):
        radius_service.update_profile(db, 42, RadiusProfileUpdate(name="x"))


def test_delete_profile(db, profile):
    assert radius_service.delete_profile(db, profile.id) is True
    assert db.get(RadiusProfile, profile.id) is None


def test_delete_missing_profile(db):
    with pytest.raises(NotFound, match="Radius profile with id 9 not found"):
        radius_service.delete_profile(db, 9)


def test_delete_profile_in_use_reports_exact_count(db, profile):
    _create_user(db, profile, "a")
    _create_user(db, profile, "b")
    with pytest.raises(Conflict, match="2 users are still using this profile"):
        radius_service.delete_profile(db, profile.id)
    assert db.get(RadiusProfile, profile.id) is not None


# Accounts


def test_create_user(db, profile):
    expires = datetime(2030, 1, 1, tzinfo=timezone.utc)
    user = _create_user(db, profile, full_name="Jane Doe", email="jane@example.com", expires_at=expires)
    assert user.id is not None
    assert user.username == "u1"
    assert user.profile_id == profile.id
    assert user.status == RadiusUserStatus.active
    assert user.full_name == "Jane Doe"
    assert user.phone is None
    assert user.created_at is not None
    assert user.expires_at.replace(tzinfo=timezone.utc) == expires


def test_create_user_hashes_password(db, profile):
    user = _create_user(db, profile, password="plain")
    stored = db.get(RadiusUser, user.id).password
    assert stored != "plain"
    assert verify_password("plain", stored)


def test_create_user_logs_account_created(db, profile):
    user = _create_user(db, profile)
    logs = _logs(db)
    assert len(logs) == 1
    assert logs[0].action == ActivityAction.account_created
    assert logs[0].user_id == user.id
    assert logs[0].username == "u1"
    assert logs[0].ip_address is None
    assert logs[0].bytes_in is None


def test_create_user_unknown_profile(db):
    with pytest.raises(ReferenceNotFound, match="Radius profile with id 77 not found"):
        radius_service.create_user(db, RadiusUserCreate(username="x", password="p", profile_id=77))
    assert db.query(RadiusUser).count() == 0
    assert _logs(db) == []


def test_create_user_duplicate_username(db, profile):
    _create_user(db, profile, "bob")
    with pytest.raises(Conflict, match="Username bob already exists"):
        _create_user(db, profile, "bob")
    assert db.query(RadiusUser).count() == 1


def test_store_uniqueness_violation_is_a_conflict(db, profile, monkeypatch):
    _create_user(db, profile, "bob")
    # Simulate a concurrent request that passed the pre-check.
    monkeypatch.setattr(radius_service.validators, "require_username_available", lambda db, username: None)
    with pytest.raises(Conflict, match="Username bob already exists"):
        _create_user(db, profile, "bob")
    assert db.query(RadiusUser).count() == 1


def test_account_kept_when_log_write_fails(db, profile, monkeypatch):
    def failing_append(db, **fields):
        raise AuditLogError("Failed to write activity log for u1")

    monkeypatch.setattr(activity_log, "append", failing_append)
    with pytest.raises(AuditLogError):
        _create_user(db, profile)
    assert db.query(RadiusUser).filter(RadiusUser.username == "u1").count() == 1



def test_update_kept_when_log_write_fails(db, profile, monkeypatch):
    user = _create_user(db, profile, full_name="Jane")

    def failing_append(db, **fields):
        raise AuditLogError("Failed to write activity log for u1")

    monkeypatch.setattr(activity_log, "append", failing_append)
    with pytest.raises(AuditLogError):
        radius_service.update_user(db, user.id, RadiusUserUpdate(full_name="Janet"))
    db.expire_all()
    assert db.get(RadiusUser, user.id).full_name == "Janet"

def test_update_user_partial(db, profile):
    user = _create_user(db, profile, full_name="Jane", email="jane@example.com", phone="555")
    before = db.get(RadiusUser, user.id)
    password_before = before.password

    updated = radius_service.update_user(db, user.id, RadiusUserUpdate(phone=None, status="suspended"))
    assert updated.phone is None
    assert updated.status == RadiusUserStatus.suspended
    assert updated.full_name == "Jane"
    assert updated.email == "jane@example.com"
    assert updated.password == password_before
    assert updated.profile_id == profile.id


def test_update_user_new_password(db, profile):
    user = _create_user(db, profile, password="old")
    old_hash = db.get(RadiusUser, user.id).password
    updated = radius_service.update_user(db, user.id, RadiusUserUpdate(password="new"))
    assert updated.password != old_hash
    assert verify_password("new", updated.password)
    assert not verify_password("old", updated.password)


def test_update_user_profile_must_exist(db, profile):
    user = _create_user(db, profile)
    with pytest.raises(ReferenceNotFound, match="Radius profile with id 555 not found"):
        radius_service.update_user(db, user.id, RadiusUserUpdate(profile_id=555))
    assert db.get(RadiusUser, user.id).profile_id == profile.id


def test_update_user_reassigns_profile(db, profile):
    other = radius_service.create_profile(db, RadiusProfileCreate(name="Other", upload_speed=1, download_speed=1))
    user = _create_user(db, profile)
    updated = radius_service.update_user(db, user.id, RadiusUserUpdate(profile_id=other.id))
    assert updated.profile_id == other.id


def test_update_user_logs_account_updated(db, profile):
    user = _create_user(db, profile)
    radius_service.update_user(db, user.id, RadiusUserUpdate(email="new@example.com"))
    logs = _logs(db)
    assert [log.action for log in logs] == [ActivityAction.account_created, ActivityAction.account_updated]
    assert logs[1].user_id == user.id
    assert logs[1].username == "u1"


def test_update_missing_user(db):
    with pytest.raises(NotFound, match="Radius user with id 3 not found"):
        radius_service.update_user(db, 3, RadiusUserUpdate(email="x"))


def test_update_user_rejects_null_password():
    with pytest.raises(PydanticValidationError):
        RadiusUserUpdate(password=None)
    with pytest.raises(PydanticValidationError):
        RadiusUserUpdate(status=None)


def test_delete_user(db, profile):
    user = _create_user(db, profile)
    assert radius_service.delete_user(db, user.id) is True
    assert db.get(RadiusUser, user.id) is None


def test_delete_user_keeps_history_and_unlinks_it(db, profile):
    user = _create_user(db, profile)
    radius_service.update_user(db, user.id, RadiusUserUpdate(full_name="Jane"))
    radius_service.delete_user(db, user.id)

    logs = _logs(db)
    assert len(logs) == 3
    assert logs[-1].action == ActivityAction.account_updated
    assert all(log.username == "u1" for log in logs)
    assert all(log.user_id is None for log in logs)


def test_delete_missing_user(db):
    with pytest.raises(NotFound, match="Radius user with id 5 not found"):
        radius_service.delete_user(db, 5)


def test_username_reusable_after_delete(db, profile):
    user = _create_user(db, profile, "bob")
    radius_service.delete_user(db, user.id)
    again = _create_user(db, profile, "bob")
    assert again.username == "bob"


def test_list_users_in_creation_order(db, profile):
    a = _create_user(db, profile, "a")
    b = _create_user(db, profile, "b")
    assert [u.id for u in radius_service.list_users(db)] == [a.id, b.id]


def test_profile_account_lifecycle(db):
    profile = radius_service.create_profile(
        db, RadiusProfileCreate(name="P", upload_speed=1024, download_speed=2048, price=29.99)
    )
    user = _create_user(db, profile, "u1", password="first")
    assert user.status == RadiusUserStatus.active
    created = activity_log.query(db)
    assert [e.action for e in created] == [ActivityAction.account_created]

    original_hash = user.password
    user = radius_service.update_user(db, user.id, RadiusUserUpdate(password="new"))
    assert user.password != original_hash
    assert verify_password("new", user.password)
    assert not verify_password("first", user.password)

    with pytest.raises(Conflict, match="1 users are still using this profile"):
        radius_service.delete_profile(db, profile.id)

    radius_service.delete_user(db, user.id)
    assert radius_service.delete_profile(db, profile.id) is True
