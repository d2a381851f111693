from __future__ import annotations

import pytest

from taskassign.app.errors import DuplicateIdentityError, InvalidCredentialsError, NotFoundError
from taskassign.app.models import Admin, User
from taskassign.app.services import CredentialStore

pytestmark = pytest.mark.asyncio


async def test_register_user_stores_only_a_hash(credentials: CredentialStore) -> None:
    user = await credentials.register_user(
        name="Alice",
        email="Alice@Example.com ",
        password="plain-password",
        designation="Designer",
    )

    assert user.id is not None
    assert user.email == "alice@example.com"
    assert user.hashed_password != "plain-password"
    stored = await User.get(user.id)
    assert stored is not None
    assert stored.designation == "Designer"


async def test_duplicate_registration_leaves_single_record(credentials: CredentialStore) -> None:
    await credentials.register_admin(name="Root", email="root@example.com", password="one")

    with pytest.raises(DuplicateIdentityError) as excinfo:
        await credentials.register_admin(name="Root Two", email="ROOT@example.com", password="two")

    assert excinfo.value.message == "Admin already exists"
    assert await Admin.find(Admin.email == "root@example.com").count() == 1


async def test_admin_and_user_namespaces_are_independent(credentials: CredentialStore) -> None:
    await credentials.register_admin(name="Shared", email="shared@example.com", password="pw")
    user = await credentials.register_user(name="Shared", email="shared@example.com", password="pw")

    assert user.email == "shared@example.com"


async def test_verify_credentials(credentials: CredentialStore) -> None:
    registered = await credentials.register_user(name="Bob", email="bob@example.com", password="pw-1")

    verified = await credentials.verify_user_credentials("bob@example.com", "pw-1")
    assert verified.id == registered.id

    with pytest.raises(InvalidCredentialsError):
        await credentials.verify_user_credentials("bob@example.com", "pw-2")

    with pytest.raises(NotFoundError) as excinfo:
        await credentials.verify_user_credentials("nobody@example.com", "pw-1")
    assert excinfo.value.message == "User not found"

    with pytest.raises(NotFoundError) as admin_excinfo:
        await credentials.verify_admin_credentials("bob@example.com", "pw-1")
    assert admin_excinfo.value.message == "Admin not found"


async def test_get_user_with_malformed_id_is_not_found(credentials: CredentialStore) -> None:
    with pytest.raises(NotFoundError):
        await credentials.get_user("not-an-object-id")


async def test_list_users_by_ids_skips_unknown_and_malformed(credentials: CredentialStore) -> None:
    user = await credentials.register_user(name="Carol", email="carol@example.com", password="pw")

    found = await credentials.list_users_by_ids([user.id, str(user.id), "bogus", None])

    assert [item.id for item in found] == [user.id]
