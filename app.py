import os

from chalice import Chalice

from chalicelib import orders
from chalicelib.utils import db as utils_db

app = Chalice(app_name='orders-api')

app.debug = os.environ.get('DEBUG', 'false').lower() == 'true'


def get_orders_store():
    data_file = utils_db.get_orders_data_file()
    records = utils_db.load_records(data_file) if data_file else []
    return orders.init_store(records)


orders_store = get_orders_store()


@app.route('/health-check', methods=['GET'], cors=True)
def health_check():
    return {'health': 'check'}


# ORDERS
@app.route('/orders', methods=['GET'], cors=True)
def list_orders():
    return orders.endpoint_list_orders(app.current_request, orders_store)


@app.route('/orders', methods=['POST'], cors=True)
def create_order():
    return orders.endpoint_create_order(app.current_request, orders_store)


@app.route('/orders/{order_id}', methods=['GET'], cors=True)
def get_order(order_id):
    return orders.endpoint_get_order(app.current_request, orders_store, order_id)


@app.route('/orders/{order_id}', methods=['PUT'], cors=True)
def update_order(order_id):
    """
    status is required, delivered orders can't be changed
    """
    return orders.endpoint_update_order(app.current_request, orders_store, order_id)


@app.route('/orders/{order_id}', methods=['DELETE'], cors=True)
def delete_order(order_id):
    """
    only pending orders can be deleted
    """
    return orders.endpoint_delete_order(app.current_request, orders_store, order_id)
