from activeresource.resource import ResourceModel


def test_attribute_names(user_model, invoice_model):
    assert user_model.attribute_names() == ["first_name", "last_name", "email", "createdAt"]
    assert invoice_model.attribute_names() == ["number", "total_cents"]


def test_has_attribute(user_model):
    assert user_model.has_attribute("email")
    assert not user_model.has_attribute("password")
    assert not user_model.has_attribute("attribute_names")


def test_attribute_labels(user_model, invoice_model):
    assert user_model.get_attribute_label("first_name") == "Given name"
    assert user_model.get_attribute_label("email") == "E-mail"
    assert user_model.get_attribute_label("createdAt") == "Created At"
    assert invoice_model.get_attribute_label("total_cents") == "Total Cents"
    assert invoice_model.get_attribute_label("customer.name") == "Customer Name"


def test_resource_model_protocol(user_model):
    assert isinstance(user_model, ResourceModel)


def test_resource_instances_keep_remote_fields(user_model):
    user = user_model(first_name="Ada", email="ada@example.com", role="admin")
    assert user.first_name == "Ada"
    assert user.model_extra == {"role": "admin"}
