import pytest
from pydantic import Field

from activeresource.resource import ActiveResource, ResourceRegistry


class User(ActiveResource):
    __resource_name__ = "users"

    first_name: str = ""
    last_name: str = ""
    email: str = Field(default="", title="E-mail")
    createdAt: str | None = None

    @classmethod
    def attribute_labels(cls) -> dict[str, str]:
        return {"first_name": "Given name"}


class Invoice(ActiveResource):
    number: str = ""
    total_cents: int = 0


@pytest.fixture
def registry():
    registry = ResourceRegistry()
    registry.register(User)
    registry.register(Invoice)
    return registry


@pytest.fixture
def user_model():
    return User


@pytest.fixture
def invoice_model():
    return Invoice
