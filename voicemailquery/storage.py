import sqlite3
from typing import List, Optional

from .filters import VoicemailFilter
from .schema import TABLE_NAME, Columns
from .voicemail import Voicemail


class VoicemailStore:
    """
    SQLite table laid out like the provider's voicemails table.

    Filters are applied as the literal WHERE clause of the query, the same
    way the content provider consumes them.
    """

    # Record fields in column order, excluding _id
    _FIELD_COLUMNS = [
        ("number", Columns.NUMBER),
        ("timestamp_millis", Columns.DATE),
        ("duration", Columns.DURATION),
        ("source", Columns.PROVIDER),
        ("provider_data", Columns.PROVIDER_DATA),
        ("is_read", Columns.READ_STATUS),
        ("mailbox", Columns.STATE),
    ]

    def __init__(self, db_path: str = ":memory:", verbose: bool = False):
        """
        Args:
            db_path: SQLite database file, in memory by default
            verbose: Print each query and insert
        """
        self.db_path = db_path
        self.verbose = verbose
        self.conn = sqlite3.connect(self.db_path)
        self._init_database()

    def _init_database(self):
        self.conn.execute(f"""
            CREATE TABLE IF NOT EXISTS {TABLE_NAME} (
                {Columns.ID} INTEGER PRIMARY KEY AUTOINCREMENT,
                {Columns.NUMBER} TEXT,
                {Columns.DATE} INTEGER,
                {Columns.DURATION} INTEGER,
                {Columns.PROVIDER} TEXT,
                {Columns.PROVIDER_DATA} TEXT,
                {Columns.READ_STATUS} INTEGER,
                {Columns.STATE} INTEGER
            )
        """)
        self.conn.commit()

    def insert(self, voicemail: Voicemail) -> bool:
        """Store a voicemail. Unset fields are stored as NULL."""
        if not isinstance(voicemail, Voicemail):
            raise ValueError(f"Expected a Voicemail, got {voicemail!r}")

        values = []
        for field, _ in self._FIELD_COLUMNS:
            value = getattr(voicemail, field)
            if field == "is_read" and value is not None:
                value = 1 if value else 0
            elif field == "mailbox" and value is not None:
                value = value.value
            values.append(value)

        columns = [column for _, column in self._FIELD_COLUMNS]
        placeholders = ', '.join(['?' for _ in columns])
        insert_sql = f"INSERT INTO {TABLE_NAME} ({', '.join(columns)}) VALUES ({placeholders})"

        try:
            self.conn.execute(insert_sql, values)
            self.conn.commit()
        except sqlite3.Error as e:
            print(f"VoicemailStore: error storing {voicemail!r}: {e}")
            self.conn.rollback()
            return False

        if self.verbose:
            print(f"VoicemailStore: stored {voicemail!r}")
        return True

    def query(self, voicemail_filter: Optional[VoicemailFilter] = None) -> List[Voicemail]:
        """Return the voicemails matching the filter, in insertion order"""
        columns = [column for _, column in self._FIELD_COLUMNS]
        sql = f"SELECT {', '.join(columns)} FROM {TABLE_NAME}{self._where(voicemail_filter)} ORDER BY {Columns.ID}"
        if self.verbose:
            print(f"VoicemailStore: {sql}")
        rows = self.conn.execute(sql).fetchall()
        return [self._to_voicemail(row) for row in rows]

    def count(self, voicemail_filter: Optional[VoicemailFilter] = None) -> int:
        sql = f"SELECT COUNT(*) FROM {TABLE_NAME}{self._where(voicemail_filter)}"
        if self.verbose:
            print(f"VoicemailStore: {sql}")
        return self.conn.execute(sql).fetchone()[0]

    def _where(self, voicemail_filter: Optional[VoicemailFilter]) -> str:
        if voicemail_filter is None or voicemail_filter.where_clause is None:
            return ""
        return f" WHERE {voicemail_filter.where_clause}"

    def _to_voicemail(self, row) -> Voicemail:
        kwargs = {}
        for (field, _), value in zip(self._FIELD_COLUMNS, row):
            kwargs[field] = value
        return Voicemail(**kwargs)

    def describe(self) -> str:
        return f"SQLite voicemail store at {self.db_path}"

    def close(self):
        if self.conn:
            self.conn.close()
            self.conn = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
