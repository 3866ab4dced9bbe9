import json
import os
import threading
from copy import deepcopy
from datetime import datetime, date
from decimal import Decimal
from logging import setLoggerClass, Logger, NOTSET, getLogger, StreamHandler, Formatter

from chalice.app import Request


class CustomLogger(Logger):

    def __init__(self, name, level=NOTSET):
        # chalice local serves requests on threads, each keeps its own request id
        self._request_context = threading.local()
        super(CustomLogger, self).__init__(name, level)

    @property
    def current_request_id(self):
        return getattr(self._request_context, 'request_id', None)

    @current_request_id.setter
    def current_request_id(self, request_id):
        self._request_context.request_id = request_id

    def __change_msg(self, msg):
        return f'[{self.current_request_id}] : {msg}'

    def debug(self, msg, *args, **kwargs):
        super(CustomLogger, self).debug(self.__change_msg(msg), *args, **kwargs)

    def info(self, msg, *args, **kwargs):
        super(CustomLogger, self).info(self.__change_msg(msg), *args, **kwargs)

    def warning(self, msg, *args, **kwargs):
        super(CustomLogger, self).warning(self.__change_msg(msg), *args, **kwargs)

    def error(self, msg, *args, **kwargs):
        super(CustomLogger, self).error(self.__change_msg(msg), *args, **kwargs)

    def log(self, level, msg, *args, **kwargs):
        super(CustomLogger, self).log(level, self.__change_msg(msg), *args, **kwargs)

    def exception(self, msg, *args, exc_info=True, **kwargs):
        super(CustomLogger, self).exception(self.__change_msg(msg), *args, exc_info=exc_info, **kwargs)


def conf_logger(level):
    setLoggerClass(CustomLogger)
    logger_ = getLogger(__name__)
    console_handler = StreamHandler()
    console_handler.setLevel(level)
    formatter = Formatter('%(asctime)s - %(levelname)s - %(message)s')
    console_handler.setFormatter(formatter)
    if logger_.hasHandlers():
        logger_.handlers.clear()
    logger_.addHandler(console_handler)
    logger_.setLevel(level)
    return logger_


logger = conf_logger(os.environ.get('LOG_LEVEL', 'DEBUG').upper())


def set_request_id(request: Request):
    """
    Binds log lines to the lambda request id (its last uuid segment)
    """
    aws_request_id = getattr(request.lambda_context, 'aws_request_id', None)
    logger.current_request_id = str(aws_request_id).split('-')[-1] if aws_request_id else None


def log_request(request: Request):
    headers = deepcopy(dict(request.headers or {}))
    headers.pop('authorization', None)
    request_dict = {
        'method': request.method,
        'path': (request.context or {}).get('resourcePath'),
        'uri_params': request.uri_params,
        'query_params': dict(request.query_params or {}),
        'headers': headers
    }
    logger.info(f"Request: {json.dumps(request_dict, cls=CustomJSONEncoder)}")
    if headers.get('content-type', '') == 'application/json':
        logger.debug(f"Request body: {str(request.raw_body)}")


class CustomJSONEncoder(json.JSONEncoder):
    def default(self, value):
        if isinstance(value, (datetime, date)):
            return str(value)
        if isinstance(value, Decimal):
            return float(value)
        if isinstance(value, bytes):
            return value.decode('utf-8', errors='replace')
        return str(value)


def log_exception(error: Exception, status_code: int = 400, msg: str = "", *args, **kwargs):
    allowed_log_levels = {
        'info': logger.info,
        'warning': logger.warning,
        'debug': logger.debug,
        'error': logger.error,
        'exception': logger.exception,
    }
    level = getattr(error, 'LEVEL', 'exception')
    log_level = 'exception' if level not in allowed_log_levels.keys() else level
    allowed_log_levels[log_level](msg=json.dumps({
        'error': str(error),
        'exception': error.__class__.__name__,
        'message': str(msg),
        'level': log_level,
        'status_code': status_code,
        'args': args,
        'kwargs': kwargs
    }, cls=CustomJSONEncoder))
