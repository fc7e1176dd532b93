"""Tests for UserMapper."""

from datetime import datetime

from quizportal.core.domain.entities.user import User, UserRole
from quizportal.domain.utils.datetime_utils import UTC
from quizportal.infrastructure.persistence.sqlalchemy.mappers.user_mapper import UserMapper
from quizportal.infrastructure.persistence.sqlalchemy.models.user import UserModel


def test_to_persistence_leaves_id_unset_for_new_users(make_user):
    model = UserMapper.to_persistence(make_user())

    assert model.user_id is None
    assert model.email == "jane@example.com"
    assert model.role == UserRole.STUDENT
    assert model.is_default_password is False


def test_round_trip_keeps_every_field(make_user):
    user = make_user(user_id=5, is_default_password=True, role=UserRole.ADMIN)

    assert UserMapper.to_domain(UserMapper.to_persistence(user)) == user


def test_to_domain_treats_naive_timestamps_as_utc():
    model = UserModel(
        user_id=1,
        full_name="Sam Lee",
        email="sam@example.com",
        password="hash",
        role=UserRole.TEACHER,
        is_default_password=False,
        created_at=datetime(2025, 10, 26, 14, 6, 29),
    )

    user = UserMapper.to_domain(model)

    assert user.created_at == datetime(2025, 10, 26, 14, 6, 29, tzinfo=UTC)


def test_update_persistence_model_overwrites_all_columns(make_user):
    model = UserMapper.to_persistence(make_user(user_id=2))
    replacement = User(
        user_id=2,
        full_name="New Name",
        email="new@example.com",
        password="other-hash",
        role=UserRole.TEACHER,
        is_default_password=True,
        created_at=datetime(2024, 1, 1, tzinfo=UTC),
    )

    UserMapper.update_persistence_model(model, replacement)

    assert UserMapper.to_domain(model) == replacement
