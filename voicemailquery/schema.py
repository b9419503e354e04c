"""
Table and column names of the voicemail content provider.

The provider owns this schema; filters only refer to it by name.
"""

TABLE_NAME = "voicemails"


class Columns:
    """Column names of the voicemails table"""
    ID = "_id"
    NUMBER = "number"
    DATE = "date"
    DURATION = "duration"
    PROVIDER = "provider"
    PROVIDER_DATA = "provider_data"
    READ_STATUS = "read_status"
    STATE = "state"


ALL_COLUMNS = [
    Columns.ID,
    Columns.NUMBER,
    Columns.DATE,
    Columns.DURATION,
    Columns.PROVIDER,
    Columns.PROVIDER_DATA,
    Columns.READ_STATUS,
    Columns.STATE,
]
