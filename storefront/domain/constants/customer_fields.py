"""Constants for Customer model field names"""


class CustomerFields:
    """Field name constants for Customer model"""
    ID = "id"
    NAME = "name"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
