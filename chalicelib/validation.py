from typing import Callable, Dict, List, Any

from chalicelib.constants.constants import ORDER_STATUSES, STATUS_DELIVERED, STATUS_PENDING, INVALID_STATUS_MESSAGE
from chalicelib.utils import exceptions
from chalicelib.utils.data import has_value, is_integer
from chalicelib.utils.db import OrderStore
from chalicelib.utils.logger import logger


class OrderRequest:
    """
    State handed from one check to the next: the store, the route id,
    the request payload and the order resolved by the identity checks.
    """

    def __init__(self, store: OrderStore, payload: Dict = None, order_id: str = None):
        self.store = store
        self.payload: Dict = payload if payload is not None else {}
        self.order_id: str = order_id
        self.order: Any = None


def body_data_has(property_name: str) -> Callable[[OrderRequest], None]:
    def check(order_request: OrderRequest):
        if not has_value(order_request.payload.get(property_name)):
            raise exceptions.ValidationException(f'Order must include a {property_name}')
    check.__name__ = f'body_data_has_{property_name}'
    return check


def dishes_is_valid(order_request: OrderRequest):
    dishes = order_request.payload.get('dishes')
    if not isinstance(dishes, list) or len(dishes) == 0:
        raise exceptions.ValidationException('Order must include at least one dish')


def dish_quantity_is_valid(order_request: OrderRequest):
    # the first invalid dish is reported
    for index, dish in enumerate(order_request.payload['dishes']):
        quantity = dish.get('quantity') if isinstance(dish, dict) else None
        if quantity is None or not is_integer(quantity) or quantity <= 0:
            raise exceptions.ValidationException(
                f'Dish {index} must have a quantity that is an integer greater than 0')


def status_is_valid(order_request: OrderRequest):
    status = order_request.payload.get('status')
    if status is not None and status not in ORDER_STATUSES:
        raise exceptions.ValidationException(INVALID_STATUS_MESSAGE)


def order_exists(order_request: OrderRequest):
    try:
        order_request.order = order_request.store.get(order_request.order_id)
    except exceptions.RecordNotFound:
        raise exceptions.OrderNotFound(f'Order id not found: {order_request.order_id}')


def _id_mismatch_error(id_, order_id) -> exceptions.ValidationException:
    return exceptions.ValidationException(f'Order id does not match route id. Order: {id_}, Route: {order_id}.')


def order_id_matches_data_id(order_request: OrderRequest):
    id_ = order_request.payload.get('id')
    if id_ not in ('', None) and id_ != order_request.order_id:
        raise _id_mismatch_error(id_, order_request.order_id)


def update_validation(order_request: OrderRequest):
    id_ = order_request.payload.get('id')
    status = order_request.payload.get('status')
    if not status or status not in ORDER_STATUSES:
        raise exceptions.ValidationException(INVALID_STATUS_MESSAGE)
    if id_ and id_ != order_request.order_id:
        raise _id_mismatch_error(id_, order_request.order_id)
    if order_request.order.status == STATUS_DELIVERED:
        raise exceptions.ValidationException('A delivered order cannot be changed')


def delete_not_found(order_request: OrderRequest):
    order_request.order = order_request.store.find(order_request.order_id)
    if order_request.order is None:
        raise exceptions.OrderNotFound(f'Order {order_request.order_id} not found')


def destroy_validation(order_request: OrderRequest):
    if order_request.order.status != STATUS_PENDING:
        raise exceptions.ValidationException('An order cannot be deleted unless it is pending')


ORDER_PAYLOAD_CHECKS = [
    body_data_has('deliverTo'),
    body_data_has('mobileNumber'),
    body_data_has('dishes'),
    dishes_is_valid,
    dish_quantity_is_valid
]

CREATE_CHECKS = [*ORDER_PAYLOAD_CHECKS, status_is_valid]
READ_CHECKS = [order_exists]
UPDATE_CHECKS = [order_exists, order_id_matches_data_id, *ORDER_PAYLOAD_CHECKS, update_validation]
DELETE_CHECKS = [delete_not_found, destroy_validation]


def run_checks(checks: List[Callable[[OrderRequest], None]], order_request: OrderRequest) -> OrderRequest:
    """
    Runs checks in the declared order, the first failing check raises and stops the chain
    """
    for check in checks:
        logger.debug(f'run_checks ::: {check.__name__} order_id={order_request.order_id}')
        check(order_request)
    return order_request
