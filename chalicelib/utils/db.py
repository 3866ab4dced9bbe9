import json
import os
import threading
from contextlib import contextmanager
from typing import Callable, List, Optional

from chalicelib.utils import exceptions
from chalicelib.utils.data import next_id
from chalicelib.utils.logger import logger


class OrderStore:
    """
    In-memory, insertion ordered collection of orders.
    The list is owned by the store; handlers receive the store explicitly.
    """

    def __init__(self, records: Optional[List] = None, id_generator: Callable[[], str] = next_id):
        self.records: List = records if records is not None else []
        self.id_generator = id_generator
        self._lock = threading.RLock()

    @contextmanager
    def transaction(self):
        """
        Serializes find-then-mutate sequences between request threads
        """
        with self._lock:
            yield self

    def new_id(self) -> str:
        id_ = self.id_generator()
        while self.find(id_) is not None:
            logger.warning(f'new_id ::: generated id={id_} already exists, generating another one')
            id_ = self.id_generator()
        return id_

    def list_all(self) -> List:
        return list(self.records)

    def find(self, id_):
        return next((record for record in self.records if record.id_ == id_), None)

    def get(self, id_):
        record = self.find(id_)
        if record is None:
            logger.error(f"get ::: record id={id_} not found")
            raise exceptions.RecordNotFound(f'record id={id_} not found')
        return record

    def put(self, record) -> None:
        self.records.append(record)
        logger.info(f"put ::: record id={record.id_} stored, total={len(self.records)}")

    def delete(self, record) -> None:
        index = next(i for i, item in enumerate(self.records) if item is record)
        del self.records[index]
        logger.info(f"delete ::: record id={record.id_} removed, total={len(self.records)}")

    def __len__(self):
        return len(self.records)


def load_records(path: str) -> List[dict]:
    """
    Reads a JSON array of order records (wire format) used to pre-populate the store
    """
    with open(path, encoding='utf-8') as file:
        records = json.load(file)
    if not isinstance(records, list):
        raise ValueError(f'{path} must contain a JSON array of orders')
    logger.info(f"load_records ::: {len(records)} records loaded from {path}")
    return records


def get_orders_data_file() -> Optional[str]:
    return os.environ.get('ORDERS_DATA_FILE') or None
