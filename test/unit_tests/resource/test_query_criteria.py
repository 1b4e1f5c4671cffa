import pytest
from pydantic import ValidationError

from activeresource.resource import QueryCriteria


def test_defaults():
    criteria = QueryCriteria()
    assert criteria.order == ""
    assert criteria.alias is None
    assert criteria.to_query_params() == {}


def test_to_query_params():
    criteria = QueryCriteria(order="name, created_at.DESC", condition={"status": "active"}, limit=10, offset=20)
    assert criteria.to_query_params() == {
        "status": "active",
        "order": "name, created_at.DESC",
        "limit": 10,
        "offset": 20,
    }
    assert criteria.to_query_params(order_param="sort")["sort"] == "name, created_at.DESC"


def test_assignment_is_validated():
    criteria = QueryCriteria()
    with pytest.raises(ValidationError):
        criteria.limit = -1
    with pytest.raises(ValidationError):
        criteria.order = None
