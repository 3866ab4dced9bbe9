STATUS_PENDING = 'pending'
STATUS_PREPARING = 'preparing'
STATUS_OUT_FOR_DELIVERY = 'out-for-delivery'
STATUS_DELIVERED = 'delivered'

ORDER_STATUSES = (STATUS_PENDING, STATUS_PREPARING, STATUS_OUT_FOR_DELIVERY, STATUS_DELIVERED)

INVALID_STATUS_MESSAGE = f'Order must have a status of {", ".join(ORDER_STATUSES)}'
