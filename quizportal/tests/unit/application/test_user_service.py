"""Unit tests for UserService with a mocked repository."""

from unittest.mock import AsyncMock

import pytest

from quizportal.application.services.user_service import UserService, parse_role
from quizportal.core.domain.entities.user import User, UserRole
from quizportal.core.interfaces.repositories.user_repository_interface import IUserRepository
from quizportal.core.schemas.users import (
    AdminCreateUserDTO,
    AdminUpdateUserDTO,
    ChangePasswordDTO,
    UpdateUserDTO,
    UserResponseDTO,
)
from quizportal.domain.exceptions import DuplicateEntityException, InvalidRoleException


@pytest.fixture
def mock_repository() -> AsyncMock:
    repository = AsyncMock(spec=IUserRepository)
    repository.is_user_exists_with_email.return_value = False
    repository.get_user_details_by_id.return_value = None
    repository.find_user_by_id.return_value = None

    async def assign_id(user: User) -> None:
        user.user_id = 1

    repository.create.side_effect = assign_id
    return repository


@pytest.fixture
def service(mock_repository, password_handler) -> UserService:
    return UserService(mock_repository, password_handler)


@pytest.fixture
def stored_user(make_user, password_handler) -> User:
    return make_user(user_id=10, password=password_handler.get_password_hash("current-pass"))


def test_parse_role_wraps_value_error():
    assert parse_role("teacher") == UserRole.TEACHER
    with pytest.raises(InvalidRoleException) as exc_info:
        parse_role("janitor")
    assert exc_info.value.role == "janitor"


@pytest.mark.asyncio
async def test_create_user_hashes_given_password(service, mock_repository, password_handler):
    dto = AdminCreateUserDTO(
        full_name="Jane Doe", email="jane@example.com", role="student", password="pa55word"
    )

    response = await service.create_user(dto)

    created: User = mock_repository.create.await_args.args[0]
    assert created.role == UserRole.STUDENT
    assert created.is_default_password is True
    assert password_handler.verify_password("pa55word", created.password)
    assert response == UserResponseDTO.from_entity(created)
    assert response.user_id == 1


@pytest.mark.asyncio
async def test_create_user_generates_password_when_missing(service, mock_repository):
    dto = AdminCreateUserDTO(full_name="Jane Doe", email="jane@example.com", role="Teacher")

    await service.create_user(dto)

    created: User = mock_repository.create.await_args.args[0]
    assert created.password
    assert created.is_default_password is True


@pytest.mark.asyncio
async def test_create_user_rejects_existing_email(service, mock_repository):
    mock_repository.is_user_exists_with_email.return_value = True
    dto = AdminCreateUserDTO(full_name="Jane Doe", email="jane@example.com", role="Student")

    with pytest.raises(DuplicateEntityException) as exc_info:
        await service.create_user(dto)

    assert exc_info.value.field == "email"
    assert exc_info.value.code == "DUPLICATE_ENTITY"
    assert str(exc_info.value) == "Email already exists"

    mock_repository.create.assert_not_awaited()


@pytest.mark.asyncio
async def test_create_user_rejects_unknown_role(service, mock_repository):
    dto = AdminCreateUserDTO(full_name="Jane Doe", email="jane@example.com", role="Owner")

    with pytest.raises(InvalidRoleException):
        await service.create_user(dto)

    mock_repository.create.assert_not_awaited()


@pytest.mark.asyncio
async def test_create_user_propagates_repository_errors(service, mock_repository):
    mock_repository.create.side_effect = RuntimeError("database unavailable")
    dto = AdminCreateUserDTO(full_name="Jane Doe", email="jane@example.com", role="Student")

    with pytest.raises(RuntimeError, match="database unavailable"):
        await service.create_user(dto)


@pytest.mark.asyncio
async def test_update_user_missing_returns_none(service, mock_repository):
    assert await service.update_user(10, UpdateUserDTO(full_name="X")) is None
    mock_repository.update.assert_not_awaited()


@pytest.mark.asyncio
async def test_update_user_merges_non_empty_fields(service, mock_repository, stored_user):
    mock_repository.get_user_details_by_id.return_value = stored_user

    response = await service.update_user(
        10, UpdateUserDTO(full_name="", email="new@example.com")
    )

    saved: User = mock_repository.update.await_args.args[0]
    assert saved.full_name == "Jane Doe"
    assert saved.email == "new@example.com"
    assert saved.role == UserRole.STUDENT
    assert response.email == "new@example.com"
    mock_repository.is_user_exists_with_email.assert_awaited_once_with("new@example.com")


@pytest.mark.asyncio
async def test_update_user_same_email_skips_uniqueness_check(service, mock_repository, stored_user):
    mock_repository.get_user_details_by_id.return_value = stored_user

    await service.update_user(10, UpdateUserDTO(email="jane@example.com", full_name="Jane Roe"))

    mock_repository.is_user_exists_with_email.assert_not_awaited()
    assert mock_repository.update.await_args.args[0].full_name == "Jane Roe"


@pytest.mark.asyncio
async def test_update_user_rejects_taken_email(service, mock_repository, stored_user):
    mock_repository.get_user_details_by_id.return_value = stored_user
    mock_repository.is_user_exists_with_email.return_value = True

    with pytest.raises(DuplicateEntityException):
        await service.update_user(10, UpdateUserDTO(email="taken@example.com"))

    mock_repository.update.assert_not_awaited()


@pytest.mark.asyncio
async def test_admin_update_changes_role(service, mock_repository, stored_user):
    mock_repository.get_user_details_by_id.return_value = stored_user

    response = await service.admin_update_user(10, AdminUpdateUserDTO(role="ADMIN"))

    assert response.role == "Admin"
    assert mock_repository.update.await_args.args[0].role == UserRole.ADMIN


@pytest.mark.asyncio
async def test_admin_update_rejects_unknown_role(service, mock_repository, stored_user):
    mock_repository.get_user_details_by_id.return_value = stored_user

    with pytest.raises(InvalidRoleException):
        await service.admin_update_user(10, AdminUpdateUserDTO(role="root"))

    mock_repository.update.assert_not_awaited()


@pytest.mark.asyncio
async def test_change_password(service, mock_repository, stored_user, password_handler):
    stored_user.is_default_password = True
    mock_repository.get_user_details_by_id.return_value = stored_user
    dto = ChangePasswordDTO(current_password="current-pass", new_password="brand-new")

    assert await service.change_user_password(10, dto) is True

    saved: User = mock_repository.update.await_args.args[0]
    assert saved.is_default_password is False
    assert password_handler.verify_password("brand-new", saved.password)


@pytest.mark.asyncio
async def test_change_password_wrong_current(service, mock_repository, stored_user):
    mock_repository.get_user_details_by_id.return_value = stored_user
    dto = ChangePasswordDTO(current_password="guess", new_password="brand-new")

    assert await service.change_user_password(10, dto) is False
    mock_repository.update.assert_not_awaited()


@pytest.mark.asyncio
async def test_change_password_missing_user(service):
    dto = ChangePasswordDTO(current_password="x", new_password="brand-new")
    assert await service.change_user_password(10, dto) is False


@pytest.mark.asyncio
async def test_delete_user_passes_result_through(service, mock_repository):
    mock_repository.delete.return_value = False
    assert await service.delete_user(5) is False

    mock_repository.delete.return_value = True
    assert await service.delete_user(5) is True


@pytest.mark.asyncio
async def test_can_update_role(service, mock_repository, make_user):
    admin = make_user(user_id=1, role=UserRole.ADMIN)
    teacher = make_user(user_id=2, role=UserRole.TEACHER)
    users = {1: admin, 2: teacher}
    mock_repository.find_user_by_id.side_effect = users.get

    assert await service.can_update_role(1, 2) is True
    assert await service.can_update_role(1, 1) is False
    assert await service.can_update_role(2, 1) is False
    assert await service.can_update_role(1, 99) is False
    assert await service.can_update_role(99, 2) is False


@pytest.mark.asyncio
async def test_mark_password_as_default(service, mock_repository, stored_user):
    await service.mark_password_as_default(10)
    mock_repository.update.assert_not_awaited()

    mock_repository.get_user_details_by_id.return_value = stored_user
    await service.mark_password_as_default(10)

    assert mock_repository.update.await_args.args[0].is_default_password is True


@pytest.mark.asyncio
async def test_verify_password(service, mock_repository, stored_user):
    assert await service.verify_password(10, "current-pass") is False

    mock_repository.get_user_details_by_id.return_value = stored_user
    assert await service.verify_password(10, "current-pass") is True
    assert await service.verify_password(10, "other") is False


@pytest.mark.asyncio
async def test_lookups_project_to_response_dtos(service, mock_repository, stored_user):
    mock_repository.get_all_users.return_value = [stored_user]
    mock_repository.find_user_by_email.return_value = None
    mock_repository.get_user_role.return_value = UserRole.STUDENT

    assert await service.get_all_users() == [UserResponseDTO.from_entity(stored_user)]
    assert await service.get_user_by_id(10) is None
    assert await service.get_user_by_email("nobody@example.com") is None
    assert await service.get_user_role(10) == UserRole.STUDENT
    assert await service.user_exists_by_email("jane@example.com") is False
