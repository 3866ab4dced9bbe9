import json
from decimal import Decimal
from uuid import uuid4

from chalicelib.utils import exceptions


def replace_dict_key(item, orig_key, new_key):
    if orig_key in item:
        if new_key not in item:
            item[new_key] = item[orig_key]
        del item[orig_key]


def substitute_keys(dict_to_process: dict, base_keys: dict, opt_dict=None):
    if opt_dict is None:
        opt_dict = {}
    all_keys = {**base_keys, **opt_dict}
    for key, val in all_keys.items():
        if val:
            replace_dict_key(dict_to_process, key, val)
        elif key in dict_to_process.keys():
            dict_to_process.pop(key, None)


def parse_raw_body(chalice_request) -> dict:
    request_raw_body = chalice_request.raw_body
    if not request_raw_body:
        return {}
    try:
        body = json.loads(request_raw_body)
    except ValueError:
        raise exceptions.ValidationException('Request body must be a JSON object')
    if not isinstance(body, dict):
        raise exceptions.ValidationException('Request body must be a JSON object')
    return body


def get_request_data(body: dict) -> dict:
    """
    Orders travel in a {"data": {...}} envelope, anything else counts as an empty payload
    """
    data = body.get('data')
    return data if isinstance(data, dict) else {}


def has_value(value) -> bool:
    """ JSON truthiness: null, "", 0 and false are absent, empty arrays and objects are present """
    if value is None or value is False or value == '':
        return False
    if isinstance(value, (int, float, Decimal)):
        return value == value and value != 0
    return True


def is_integer(value) -> bool:
    """ JSON has one number type, so 2.0 is as much an integer as 2 """
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return value.is_integer()
    if isinstance(value, Decimal):
        return value.is_finite() and value == value.to_integral_value()
    return False


def next_id() -> str:
    return uuid4().hex
