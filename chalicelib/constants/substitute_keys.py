# wire (camelCase) -> entity attribute
to_db = {
    'id': 'id_',
    'deliverTo': 'deliver_to',
    'mobileNumber': 'mobile_number'
}

# entity attribute -> wire
from_db = {value: key for key, value in to_db.items()}
