"""AccountRules tests: registration and authentication against an in-memory store.

Tests cover:
    - register: blank username, short password, duplicate username, success
    - authenticate: unknown username, wrong password, success
    - Password stored hashed; failures indistinguishable to the caller
"""

import pytest

from social_api.core.domain_types import Account
from social_api.core.passwords import verify_password
from social_api.services import account_rules as account_rules_module
from social_api.core.errors import ConflictError, InvalidCredentialsError, ValidationError


async def test_register_assigns_id(account_rules):
    account = await account_rules.register(Account(username="alice", password="pw123"))
    assert account.id is not None
    assert account.username == "alice"


async def test_register_stores_hashed_password(account_rules, account_repo):
    account = await account_rules.register(Account(username="alice", password="pw123"))
    stored = account_repo.accounts[account.id]
    assert stored.password != "pw123"
    assert stored.password.startswith("pbkdf2_sha256$")


async def test_register_ignores_client_supplied_id(account_rules):
    account = await account_rules.register(Account(username="alice", password="pw123", id=99))
    assert account.id == 1


@pytest.mark.parametrize("username", [None, "", "   "])
async def test_register_blank_username_fails(account_rules, account_repo, username):
    with pytest.raises(ValidationError) as info:
        await account_rules.register(Account(username=username, password="pw123"))
    assert info.value.field == "username"
    assert account_repo.accounts == {}


@pytest.mark.parametrize("password", [None, "", "abc"])
async def test_register_short_password_fails(account_rules, password):
    with pytest.raises(ValidationError) as info:
        await account_rules.register(Account(username="alice", password=password))
    assert info.value.field == "password"


async def test_register_duplicate_username_conflicts(account_rules, account_repo):
    await account_rules.register(Account(username="alice", password="pw123"))
    with pytest.raises(ConflictError):
        await account_rules.register(Account(username="alice", password="other1"))
    assert len(account_repo.accounts) == 1


async def test_register_duplicate_with_invalid_password_is_validation_error(account_rules):
    await account_rules.register(Account(username="alice", password="pw123"))
    with pytest.raises(ValidationError):
        await account_rules.register(Account(username="alice", password="x"))


async def test_authenticate_after_register_returns_same_id(account_rules):
    registered = await account_rules.register(Account(username="alice", password="pw123"))
    account = await account_rules.authenticate("alice", "pw123")
    assert account.id == registered.id


async def test_authenticate_unknown_username_fails(account_rules):
    with pytest.raises(InvalidCredentialsError):
        await account_rules.authenticate("nobody", "pw123")


async def test_authenticate_wrong_password_fails(account_rules):
    await account_rules.register(Account(username="alice", password="pw123"))
    with pytest.raises(ValidationError):
        await account_rules.authenticate("alice", "wrong")


async def test_authenticate_failures_are_indistinguishable(account_rules):
    await account_rules.register(Account(username="alice", password="pw123"))
    with pytest.raises(InvalidCredentialsError) as unknown:
        await account_rules.authenticate("bob", "pw123")
    with pytest.raises(InvalidCredentialsError) as wrong:
        await account_rules.authenticate("alice", "nope")
    assert unknown.value.message == wrong.value.message
    assert unknown.value.code == wrong.value.code


async def test_authenticate_missing_fields_fails(account_rules):
    await account_rules.register(Account(username="alice", password="pw123"))
    with pytest.raises(InvalidCredentialsError):
        await account_rules.authenticate(None, "pw123")
    with pytest.raises(InvalidCredentialsError):
        await account_rules.authenticate("alice", None)


async def test_authenticate_with_stored_hash_as_password_fails(account_rules, account_repo):
    account = await account_rules.register(Account(username="alice", password="pw123"))
    with pytest.raises(InvalidCredentialsError):
        await account_rules.authenticate("alice", account_repo.accounts[account.id].password)


@pytest.fixture
def verify_calls(monkeypatch):
    calls = []

    def counting_verify(password, encoded):
        calls.append(encoded)
        return verify_password(password, encoded)

    monkeypatch.setattr(account_rules_module, "verify_password", counting_verify)
    return calls


async def test_unknown_username_still_pays_hashing_cost(account_rules, verify_calls):
    with pytest.raises(InvalidCredentialsError):
        await account_rules.authenticate("nobody", "pw123")
    assert len(verify_calls) == 1
    assert verify_calls[0].startswith("pbkdf2_sha256$1000$")


async def test_missing_fields_still_pay_hashing_cost(account_rules, verify_calls):
    await account_rules.register(Account(username="alice", password="pw123"))
    for username, password in [(None, "pw123"), ("alice", None)]:
        with pytest.raises(InvalidCredentialsError):
            await account_rules.authenticate(username, password)
    assert len(verify_calls) == 2


async def test_wrong_password_hashes_once(account_rules, verify_calls):
    await account_rules.register(Account(username="alice", password="pw123"))
    with pytest.raises(InvalidCredentialsError):
        await account_rules.authenticate("alice", "wrong")
    assert len(verify_calls) == 1
