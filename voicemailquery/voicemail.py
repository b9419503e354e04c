from enum import Enum
from typing import Optional


class Mailbox(Enum):
    """Lifecycle bucket of a voicemail, stored in the state column"""
    INBOX = 0
    DELETED = 1
    UNDELETED = 2


class Voicemail:
    """
    Immutable voicemail record.

    Every field is optional. A field left as None is "not set" and
    has_<field>() returns False for it.
    """

    FIELDS = (
        "is_read",
        "mailbox",
        "number",
        "source",
        "provider_data",
        "duration",
        "timestamp_millis",
    )

    def __init__(self, is_read: Optional[bool] = None, mailbox: Optional[Mailbox] = None,
                 number: Optional[str] = None, source: Optional[str] = None,
                 provider_data: Optional[str] = None, duration: Optional[int] = None,
                 timestamp_millis: Optional[int] = None):
        """
        Args:
            is_read: Whether the voicemail has been listened to
            mailbox: Mailbox state, a Mailbox member or its integer code
            number: Caller's phone number
            source: Package name of the source that inserted the voicemail
            provider_data: Opaque data owned by the source
            duration: Length of the message in seconds
            timestamp_millis: Time the message was received, in epoch millis
        """
        if mailbox is not None and not isinstance(mailbox, Mailbox):
            mailbox = Mailbox(mailbox)
        values = {
            "is_read": None if is_read is None else bool(is_read),
            "mailbox": mailbox,
            "number": number,
            "source": source,
            "provider_data": provider_data,
            "duration": duration,
            "timestamp_millis": timestamp_millis,
        }
        for name, value in values.items():
            object.__setattr__(self, "_" + name, value)

    @classmethod
    def empty(cls) -> "Voicemail":
        """A record with no field set"""
        return cls()

    def __setattr__(self, name, value):
        raise AttributeError(f"Voicemail is immutable, cannot set '{name}'")

    def __delattr__(self, name):
        raise AttributeError(f"Voicemail is immutable, cannot delete '{name}'")

    @property
    def is_read(self) -> Optional[bool]:
        return self._is_read

    @property
    def mailbox(self) -> Optional[Mailbox]:
        return self._mailbox

    @property
    def number(self) -> Optional[str]:
        return self._number

    @property
    def source(self) -> Optional[str]:
        return self._source

    @property
    def provider_data(self) -> Optional[str]:
        return self._provider_data

    @property
    def duration(self) -> Optional[int]:
        return self._duration

    @property
    def timestamp_millis(self) -> Optional[int]:
        return self._timestamp_millis

    def has_read(self) -> bool:
        return self._is_read is not None

    def has_mailbox(self) -> bool:
        return self._mailbox is not None

    def has_number(self) -> bool:
        return self._number is not None

    def has_source(self) -> bool:
        return self._source is not None

    def has_provider_data(self) -> bool:
        return self._provider_data is not None

    def has_duration(self) -> bool:
        return self._duration is not None

    def has_timestamp_millis(self) -> bool:
        return self._timestamp_millis is not None

    def _values(self):
        return tuple(getattr(self, name) for name in self.FIELDS)

    def __eq__(self, other):
        if not isinstance(other, Voicemail):
            return NotImplemented
        return self._values() == other._values()

    def __hash__(self):
        return hash(self._values())

    def __repr__(self):
        set_fields = [
            f"{name}={getattr(self, name)!r}"
            for name in self.FIELDS
            if getattr(self, name) is not None
        ]
        return f"Voicemail({', '.join(set_fields)})"
