"""Constants for Order model field names"""


class OrderFields:
    """Field name constants for Order model"""
    ID = "id"
    VALUE = "value"
    CUSTOMER_ID = "customer_id"
    ORDER_DATE = "order_date"

    # MongoDB specific
    MONGO_ID = "_id"
