from typing import Dict, List

from chalice import Response
from chalice.app import Request

from chalicelib import validation
from chalicelib.base_class_entity import EntityBase
from chalicelib.constants.constants import ORDER_STATUSES, STATUS_PENDING
from chalicelib.constants.status_codes import http200, http201, http204
from chalicelib.constants.substitute_keys import to_db
from chalicelib.utils import app as utils_app, data as utils_data
from chalicelib.utils.db import OrderStore
from chalicelib.utils.logger import logger


class Order(EntityBase):

    required_immutable_fields_validation = {
        'id_': lambda x: isinstance(x, str) and len(x) > 0
    }

    required_mutable_fields_validation = {
        'deliver_to': lambda x: isinstance(x, str) and len(x) > 0,
        'mobile_number': lambda x: isinstance(x, str) and len(x) > 0,
        'status': lambda x: x in ORDER_STATUSES,
        'dishes': lambda x: isinstance(x, list) and len(x) > 0
    }

    def __init__(self, id_=None, **kwargs):
        EntityBase.__init__(self, id_)

        self.deliver_to: str = kwargs.get('deliver_to')
        self.mobile_number: str = kwargs.get('mobile_number')
        self.dishes: List[Dict] = kwargs.get('dishes', [])
        self.status: str = kwargs.get('status') or STATUS_PENDING
        self.quantity = kwargs.get('quantity')
        self.record_type = 'order'

    @classmethod
    def init_by_record(cls, record: Dict):
        """
        Builds an order from a wire-format record (camelCase keys)
        """
        record = dict(record)
        utils_data.substitute_keys(dict_to_process=record, base_keys=to_db)
        order = cls(**record)
        order._validate_mandatory_fields()
        return order

    def update(self, payload: Dict) -> None:
        update_body = dict(payload)
        utils_data.substitute_keys(dict_to_process=update_body, base_keys=to_db)
        self._update_record(update_body)

    def _to_dict(self):
        item = {
            'id_': self.id_,
            'deliver_to': self.deliver_to,
            'mobile_number': self.mobile_number,
            'status': self.status,
            'dishes': self.dishes
        }
        if self.quantity is not None:
            item['quantity'] = self.quantity
        return item

    def to_ui(self):
        return self._to_ui()


def order_response(order: Order, status_code: int = http200) -> Response:
    return Response(status_code=status_code, body={'data': order.to_ui()})


def get_order_request(request: Request, store: OrderStore, order_id: str = None) -> validation.OrderRequest:
    payload = utils_data.get_request_data(utils_data.parse_raw_body(request))
    return validation.OrderRequest(store=store, payload=payload, order_id=order_id)


@utils_app.log_start_finish
@utils_app.request_exception_handler
@utils_app.track_request
def endpoint_list_orders(request: Request, store: OrderStore) -> Response:
    with store.transaction():
        orders = [order.to_ui() for order in store.list_all()]
    logger.info(f"endpoint_list_orders ::: returning orders={[order['id'] for order in orders]}")
    return Response(status_code=http200, body={'data': orders})


@utils_app.log_start_finish
@utils_app.request_exception_handler
@utils_app.track_request
def endpoint_create_order(request: Request, store: OrderStore) -> Response:
    order_request = get_order_request(request, store)
    with store.transaction():
        validation.run_checks(validation.CREATE_CHECKS, order_request)
        payload = order_request.payload
        record = {
            'id': store.new_id(),
            'deliverTo': payload.get('deliverTo'),
            'mobileNumber': payload.get('mobileNumber'),
            'dishes': payload.get('dishes'),
            'status': payload.get('status') or STATUS_PENDING,
            'quantity': payload.get('quantity')
        }
        order = Order.init_by_record(record)
        store.put(order)
    logger.info(f"endpoint_create_order ::: order {order.id_} successfully created")
    return order_response(order, status_code=http201)


@utils_app.log_start_finish
@utils_app.request_exception_handler
@utils_app.track_request
def endpoint_get_order(request: Request, store: OrderStore, order_id: str) -> Response:
    order_request = validation.OrderRequest(store=store, order_id=order_id)
    with store.transaction():
        validation.run_checks(validation.READ_CHECKS, order_request)
        return order_response(order_request.order)


@utils_app.log_start_finish
@utils_app.request_exception_handler
@utils_app.track_request
def endpoint_update_order(request: Request, store: OrderStore, order_id: str) -> Response:
    order_request = get_order_request(request, store, order_id)
    with store.transaction():
        validation.run_checks(validation.UPDATE_CHECKS, order_request)
        order: Order = order_request.order
        order.update(order_request.payload)
        return order_response(order)


@utils_app.log_start_finish
@utils_app.request_exception_handler
@utils_app.track_request
def endpoint_delete_order(request: Request, store: OrderStore, order_id: str) -> Response:
    order_request = validation.OrderRequest(store=store, order_id=order_id)
    with store.transaction():
        validation.run_checks(validation.DELETE_CHECKS, order_request)
        store.delete(order_request.order)
    logger.info(f"endpoint_delete_order ::: order {order_id} successfully deleted")
    return Response(status_code=http204, body='')


def init_store(records: List[Dict] = None, **kwargs) -> OrderStore:
    """
    Store pre-populated with wire-format records, e.g. the ORDERS_DATA_FILE contents
    """
    return OrderStore([Order.init_by_record(record) for record in records or []], **kwargs)
