"""Shared BDD fixtures and step definitions for warehouse placement."""

import pytest
from fulfilment.warehouse.management import CreateWarehouse
from fulfilment.warehouse.warehouse import Warehouse
from protean import current_domain
from pytest_bdd import given, parsers, then


@pytest.fixture()
def outcome():
    """Holds the rejection raised by the last When step, if any."""
    return {"error": None}


def _create(code, location, capacity, stock):
    current_domain.process(
        CreateWarehouse(business_unit_code=code, location=location, capacity=capacity, stock=stock),
        asynchronous=False,
    )


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given("no warehouses exist")
def _():
    assert current_domain.repository_for(Warehouse).list_all() == []


@given(parsers.parse('warehouse "{code}" exists at "{location}" with capacity {capacity:d} and stock {stock:d}'))
def _(code, location, capacity, stock):
    _create(code, location, capacity, stock)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.parse('the warehouse "{code}" is active at "{location}"'))
def _(outcome, code, location):
    assert outcome["error"] is None
    warehouse = current_domain.repository_for(Warehouse).find_by_business_unit_code(code)
    assert warehouse.location == location
    assert warehouse.archived_at is None


@then(parsers.parse('the placement is rejected with "{message}"'))
def _(outcome, message):
    assert outcome["error"] is not None
    assert outcome["error"].message == message


