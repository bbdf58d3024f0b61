"""Fulfilment load test scenarios.

Two stateful SequentialTaskSet journeys: a warehouse going through
placement, replacement and archival, and a store going through CRUD with
the legacy sync running after each commit.
"""

import random

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import LOCATIONS, replacement_data, store_data, warehouse_data
from loadtests.helpers.response import extract_error_detail
from loadtests.helpers.state import StoreState, WarehouseState


class WarehouseLifecycleJourney(SequentialTaskSet):
    """Create Warehouse -> Read -> Replace -> Archive -> Read.

    Locations fill up quickly under load, so rejected placements (400) are
    expected and end the journey without counting as failures.
    """

    def on_start(self):
        self.state = WarehouseState()

    @task
    def create_warehouse(self):
        payload = warehouse_data(location=random.choice(["AMSTERDAM-001", "AMSTERDAM-002", "ZWOLLE-002"]))
        with self.client.post("/warehouse", json=payload, catch_response=True, name="POST /warehouse") as resp:
            if resp.status_code == 201:
                body = resp.json()
                self.state.business_unit_code = body["business_unit_code"]
                self.state.location = body["location"]
                self.state.stock = body["stock"] or 0
            elif resp.status_code == 400:
                resp.success()
                self.interrupt()
            else:
                resp.failure(f"Create warehouse failed: {resp.status_code}: {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def get_warehouse(self):
        with self.client.get(
            f"/warehouse/{self.state.business_unit_code}",
            catch_response=True,
            name="GET /warehouse/{code}",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Get warehouse failed: {resp.status_code}: {extract_error_detail(resp)}")

    @task
    def replace_warehouse(self):
        code = self.state.business_unit_code
        payload = replacement_data(code, self.state.stock, location=random.choice(list(LOCATIONS)))
        with self.client.post(
            f"/warehouse/{code}/replacement",
            json=payload,
            catch_response=True,
            name="POST /warehouse/{code}/replacement",
        ) as resp:
            if resp.status_code == 200:
                self.state.location = resp.json()["location"]
            else:
                resp.failure(f"Replace warehouse failed: {resp.status_code}: {extract_error_detail(resp)}")

    @task
    def archive_warehouse(self):
        with self.client.delete(
            f"/warehouse/{self.state.business_unit_code}",
            catch_response=True,
            name="DELETE /warehouse/{code}",
        ) as resp:
            if resp.status_code == 204:
                self.state.archived = True
            else:
                resp.failure(f"Archive warehouse failed: {resp.status_code}: {extract_error_detail(resp)}")

    @task
    def list_warehouses(self):
        self.client.get("/warehouse", name="GET /warehouse")
        self.interrupt()


class StoreCrudJourney(SequentialTaskSet):
    """Create Store -> Patch -> Put -> Get -> Delete."""

    def on_start(self):
        self.state = StoreState()

    @task
    def create_store(self):
        payload = store_data()
        with self.client.post("/store", json=payload, catch_response=True, name="POST /store") as resp:
            if resp.status_code == 201:
                self.state.store_id = resp.json()["id"]
                self.state.name = payload["name"]
            else:
                resp.failure(f"Create store failed: {resp.status_code}: {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def patch_store(self):
        with self.client.patch(
            f"/store/{self.state.store_id}",
            json={"quantity_products_in_stock": random.randint(0, 500)},
            catch_response=True,
            name="PATCH /store/{id}",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Patch store failed: {resp.status_code}: {extract_error_detail(resp)}")

    @task
    def put_store(self):
        payload = store_data()
        with self.client.put(
            f"/store/{self.state.store_id}",
            json=payload,
            catch_response=True,
            name="PUT /store/{id}",
        ) as resp:
            if resp.status_code == 200:
                self.state.name = payload["name"]
            else:
                resp.failure(f"Update store failed: {resp.status_code}: {extract_error_detail(resp)}")

    @task
    def get_store(self):
        self.client.get(f"/store/{self.state.store_id}", name="GET /store/{id}")

    @task
    def delete_store(self):
        with self.client.delete(
            f"/store/{self.state.store_id}",
            catch_response=True,
            name="DELETE /store/{id}",
        ) as resp:
            if resp.status_code != 204:
                resp.failure(f"Delete store failed: {resp.status_code}: {extract_error_detail(resp)}")
        self.interrupt()


class FulfilmentUser(HttpUser):
    """Back-office user mixing warehouse placement with store maintenance."""

    wait_time = between(0.5, 2)
    tasks = {WarehouseLifecycleJourney: 3, StoreCrudJourney: 2}
