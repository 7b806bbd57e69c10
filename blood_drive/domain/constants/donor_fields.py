"""Constants for Donor model field names"""


class DonorFields:
    """Field name constants for Donor documents"""
    ID = "id"
    FULL_NAME = "full_name"
    BLOOD_GROUP = "blood_group"
    AGE = "age"
    YEAR = "year"
    DONATED_AT = "donated_at"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field, breaks donated_at ties
