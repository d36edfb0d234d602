"""Account Schemas: registration/login payloads and the public account view."""

from pydantic import BaseModel, ConfigDict, Field

from social_api.core.domain_types import Account


class AccountCredentials(BaseModel):
    """Body of POST /register and POST /login."""
    model_config = ConfigDict(populate_by_name=True)

    account_id: int | None = Field(None, alias="accountId")
    username: str | None = None
    password: str | None = None

    def to_record(self) -> Account:
        return Account(username=self.username, password=self.password)


class AccountResponse(BaseModel):
    """Account as returned to clients."""
    model_config = ConfigDict(populate_by_name=True)

    account_id: int = Field(alias="accountId")
    username: str

    @classmethod
    def from_record(cls, account: Account) -> "AccountResponse":
        return cls(account_id=account.id, username=account.username)
