import pytest
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def fulfilment_bed():
    from fulfilment.domain import fulfilment

    bed = DomainFixture(fulfilment)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(fulfilment_bed):
    with fulfilment_bed.domain_context():
        yield


@pytest.fixture(autouse=True)
def _adapters():
    """Each test starts from the default location directory and a fresh fake legacy manager."""
    from fulfilment.location import reset_location_directory
    from fulfilment.stores.legacy import reset_legacy_store_manager

    reset_location_directory()
    reset_legacy_store_manager()
    yield
    reset_location_directory()
    reset_legacy_store_manager()


@pytest.fixture()
def legacy_manager():
    from fulfilment.stores.legacy import set_legacy_store_manager
    from fulfilment.stores.legacy.fake_adapter import FakeLegacyStoreManager

    manager = FakeLegacyStoreManager()
    set_legacy_store_manager(manager)
    return manager
