"""Integration tests for the CreateProduct and GetProduct use cases."""

import pytest

from supermarket.application.dto import ProductDefinition
from supermarket.application.product_service import ProductService
from supermarket.application.responses import HttpStatus
from supermarket.domain.model.value_objects import Email
from tests.fakes import FakeProductRepository, FakeSupplierService, make_product


def _definition(**overrides) -> ProductDefinition:
    fields = dict(
        product_id=1,
        category="Dairy",
        name="Milk",
        manufacturer="Dairy Co",
        importer_email=None,
        quantity=10,
    )
    fields.update(overrides)
    return ProductDefinition(**fields)


def _setup(products=None, fail_on_commit=False):
    repo = FakeProductRepository(products, fail_on_commit=fail_on_commit)
    service = ProductService(repo, FakeSupplierService())
    return repo, service


class TestCreateProductHappyPath:

    def test_create_then_get_round_trip(self):
        repo, service = _setup()

        response = service.create_product(_definition())
        assert response.status is HttpStatus.OK
        assert response.body is None

        fetched = service.get_product(1)
        assert fetched.status is HttpStatus.OK
        assert fetched.body == _definition()
        assert fetched.body.importer_email is None

    def test_create_commits_once(self):
        repo, service = _setup()
        service.create_product(_definition())
        assert repo.commit_count == 1
        assert 1 in repo.committed

    def test_importer_email_is_stored_as_value_object(self):
        repo, service = _setup()
        service.create_product(_definition(importer_email="imports@dairy.example"))

        assert repo.find(1).importer_email == Email("imports@dairy.example")
        assert service.get_product(1).body.importer_email == "imports@dairy.example"

    def test_names_are_stripped(self):
        repo, service = _setup()
        service.create_product(_definition(name="  Milk  "))
        assert service.get_product(1).body.name == "Milk"


class TestCreateProductValidation:

    def test_empty_name_rejected_and_not_added(self):
        repo, service = _setup()

        response = service.create_product(_definition(name=""))

        assert response.status is HttpStatus.BAD_REQUEST
        assert response.message == "Product name should not be empty"
        assert repo.find(1) is None
        assert repo.commit_count == 0

    def test_empty_manufacturer_rejected(self):
        _, service = _setup()
        response = service.create_product(_definition(manufacturer=" "))
        assert response.status is HttpStatus.BAD_REQUEST
        assert response.message == "Manufacturer name should not be empty"

    def test_invalid_email_rejected(self):
        _, service = _setup()
        response = service.create_product(_definition(importer_email="not-an-email"))
        assert response.status is HttpStatus.BAD_REQUEST
        assert response.message == "Email is invalid"

    def test_negative_quantity_rejected(self):
        _, service = _setup()
        response = service.create_product(_definition(quantity=-1))
        assert response.status is HttpStatus.BAD_REQUEST
        assert response.message == "Quantity should not be negative"

    def test_only_first_error_is_reported(self):
        _, service = _setup()
        response = service.create_product(
            _definition(name="", manufacturer="", importer_email="bad")
        )
        assert response.message == "Product name should not be empty"

    def test_duplicate_id_rejected(self):
        repo, service = _setup([make_product(product_id=1)])
        response = service.create_product(_definition())
        assert response.status is HttpStatus.BAD_REQUEST
        assert response.message == "Product with id 1 already exists"
        assert repo.commit_count == 0


class TestCreateProductInfrastructure:

    def test_commit_failure_is_internal_error(self):
        _, service = _setup(fail_on_commit=True)
        response = service.create_product(_definition())
        assert response.status is HttpStatus.INTERNAL_SERVER_ERROR
        assert response.message == "Database is unavailable"

    def test_create_can_be_retried_after_commit_failure(self):
        repo, service = _setup(fail_on_commit=True)
        assert service.create_product(_definition()).status is HttpStatus.INTERNAL_SERVER_ERROR
        assert service.get_product(1).status is HttpStatus.BAD_REQUEST

        repo.fail_on_commit = False
        assert service.create_product(_definition()).is_ok
        assert repo.committed[1].name.value == "Milk"


class TestGetProduct:

    def test_unknown_id_is_bad_request(self):
        _, service = _setup()
        response = service.get_product(42)
        assert response.status is HttpStatus.BAD_REQUEST
        assert response.message == "Product with id 42 was not found"

    @pytest.mark.parametrize("quantity", [0, 7])
    def test_projects_product_to_definition(self, quantity):
        _, service = _setup([make_product(product_id=3, quantity=quantity)])
        body = service.get_product(3).body
        assert body == ProductDefinition(
            product_id=3,
            category="Dairy",
            name="Milk",
            manufacturer="Dairy Co",
            importer_email=None,
            quantity=quantity,
        )
