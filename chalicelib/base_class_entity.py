from typing import Dict, List

from chalicelib.constants.substitute_keys import from_db
from chalicelib.utils import exceptions
from chalicelib.utils.data import substitute_keys
from chalicelib.utils.logger import logger


class EntityBase:
    required_immutable_fields_validation = {}
    required_mutable_fields_validation = {}

    def __init__(self, id_):
        self.id_: str = id_
        self.record_type: str = ''

    def _to_dict(self) -> Dict:
        """
        Should be re-implemented in each child class
        :return:
        dict of item's attributes
        """
        return {
            'id_': self.id_
        }

    @staticmethod
    def raise_validation_error(key):
        field = from_db.get(key, key)
        message = f'Validation error occurred while validating the field={field}'
        logger.error(f"raise_validation_error ::: {message}")
        raise exceptions.ValidationException(message)

    def _validate_mandatory_fields(self, record: Dict = None):
        """
        Validates mandatory fields of the record (entity's own dict by default)
        Raise ValidationException in case if a field is not valid
        :return:
        None
        """
        record = self._to_dict() if record is None else record
        for key, validator_func in {
            **self.required_immutable_fields_validation,
            **self.required_mutable_fields_validation
        }.items():
            if validator_func(record.get(key)) is False:
                self.raise_validation_error(key)

    def _update_fields_whitelist(self) -> List:
        return [*self.required_mutable_fields_validation.keys()]

    def _get_validated_update_dict(self, update_body: Dict) -> Dict:
        """
        Builds the record as it would look after the update and validates it
        Only whitelisted (mutable) fields are taken from update_body
        :return:
        Clean dict for update
        """
        clean_dict = {key: update_body.get(key) for key in self._update_fields_whitelist()}
        self._validate_mandatory_fields({**self._to_dict(), **clean_dict})
        return clean_dict

    def _update_record(self, update_body: Dict) -> None:
        """
        Overwrites mutable fields in place, immutable ones (id_) are never touched
        :return:
        None
        """
        for key, value in self._get_validated_update_dict(update_body).items():
            setattr(self, key, value)
        logger.info(f"_update_record ::: {self.record_type=} {self.id_=} successfully updated")

    def _to_ui(self) -> Dict:
        item = self._to_dict()
        substitute_keys(dict_to_process=item, base_keys=from_db)
        return item
