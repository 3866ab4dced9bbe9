import json
import os
from typing import Optional

import pytest
from chalice.test import Client

import app as app_module
from chalicelib import orders
from chalicelib.utils.db import OrderStore


def make_request(client: Client, endpoint: str = '/', method: str = 'GET', json_body=None):
    """Request to the in-process chalice app, json_body is sent as is (any JSON value)"""
    return client.http.request(
        method=method,
        path=endpoint,
        headers={'Content-Type': 'application/json', 'Host': 'test-domain.com'},
        body=json.dumps(json_body) if json_body is not None else ''
    )


def get_order_record(id_: str, status: str = 'pending', **kwargs):
    return {
        'id': id_,
        'deliverTo': kwargs.get('deliverTo', '308 Negra Arroyo Lane, Albuquerque, NM'),
        'mobileNumber': kwargs.get('mobileNumber', '(505) 143-3369'),
        'status': status,
        'dishes': kwargs.get('dishes', [{
            'id': 'd351db2b49b69679504652ea1cf38241',
            'name': 'Dolcelatte and chickpea spaghetti',
            'description': 'Spaghetti topped with a blend of dolcelatte and fresh chickpeas',
            'price': 19,
            'quantity': 2
        }])
    }


@pytest.fixture
def orders_store(monkeypatch) -> OrderStore:
    store = orders.init_store()
    monkeypatch.setattr(app_module, 'orders_store', store)
    return store


@pytest.fixture
def seed_orders(orders_store):
    """Puts orders into the injected store: seed_orders(('abc', 'pending'), ...)"""
    def _seed(*id_status_pairs):
        for id_, status in id_status_pairs:
            orders_store.put(orders.Order.init_by_record(get_order_record(id_, status)))
        return orders_store
    return _seed


@pytest.fixture
def client(orders_store) -> Client:
    with Client(app_module.app, stage_name=os.environ.get('stage', 'test')) as client:
        yield client


@pytest.fixture
def request_order(client):
    def _request(endpoint: str = '/orders', method: str = 'GET', json_body: Optional[dict] = None):
        return make_request(client, endpoint=endpoint, method=method, json_body=json_body)
    return _request
