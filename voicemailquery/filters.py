"""
Voicemail filters for querying the voicemail content provider.

A VoicemailFilter wraps the WHERE clause the provider is queried with.
The factory functions below build filters that match individual fields of a
Voicemail, and combine filters with AND or OR:

    from_all_of(from_read_status(False), INBOX_MESSAGES)

from_where_clause() takes a raw clause over the provider's column names and
is only needed when the other factories don't cover a query.
"""

from typing import Optional

from .query_utils import (
    equality_clause,
    concatenate_clauses_with_and,
    concatenate_clauses_with_or,
)
from .schema import TABLE_NAME, Columns
from .voicemail import Mailbox, Voicemail


class OR:
    def __init__(self, *xs):
        self.xs = xs


class VoicemailFilter:
    """Immutable holder of a WHERE clause. A clause of None matches everything."""

    def __init__(self, where_clause: Optional[str] = None):
        object.__setattr__(self, "_where_clause", where_clause or None)

    @property
    def where_clause(self) -> Optional[str]:
        return self._where_clause

    def is_unconstrained(self) -> bool:
        return self._where_clause is None

    def __setattr__(self, name, value):
        raise AttributeError(f"VoicemailFilter is immutable, cannot set '{name}'")

    def __eq__(self, other):
        if not isinstance(other, VoicemailFilter):
            return NotImplemented
        return self._where_clause == other._where_clause

    def __hash__(self):
        return hash(self._where_clause)

    def __str__(self):
        return self._where_clause or ""

    def __repr__(self):
        if self._where_clause is None:
            return "VoicemailFilter(None)"
        return f"VoicemailFilter('{self._where_clause}')"


def from_where_clause(where_clause: Optional[str]) -> VoicemailFilter:
    """
    Wrap a raw WHERE clause. The clause is not validated; it must use the
    provider's table and column names. None or "" gives a filter that
    matches everything.
    """
    return VoicemailFilter(where_clause)


def from_matching_fields(field_match: Voicemail) -> VoicemailFilter:
    """Filter matching every field that is set on field_match"""
    if field_match is None:
        raise ValueError("Cannot create filter from a None field_match")
    return from_where_clause(_where_clause_for_matching_fields(field_match))


def from_mailbox(mailbox) -> VoicemailFilter:
    """
    Filter on mailbox state.

    Args:
        mailbox: A Mailbox member, or an OR object of Mailbox members to
                 match any of them
    """
    if isinstance(mailbox, OR):
        return from_any_of(*[from_mailbox(m) for m in mailbox.xs])
    if not isinstance(mailbox, Mailbox):
        raise ValueError(f"Expected a Mailbox, got {mailbox!r}")
    return from_matching_fields(Voicemail(mailbox=mailbox))


def from_read_status(is_read: bool) -> VoicemailFilter:
    return from_matching_fields(Voicemail(is_read=is_read))


def from_all_of(*filters: VoicemailFilter) -> VoicemailFilter:
    """Combine filters with AND. Filters without a clause are skipped."""
    return from_where_clause(concatenate_clauses_with_and(*_clauses(filters)))


def from_any_of(*filters: VoicemailFilter) -> VoicemailFilter:
    """
    Combine filters with OR.

    Filters without a clause are skipped like in from_all_of, so an
    unconstrained filter does not make the result match everything.
    """
    return from_where_clause(concatenate_clauses_with_or(*_clauses(filters)))


def _clauses(filters):
    return [f.where_clause for f in filters]


def _where_clause_for_matching_fields(field_match: Voicemail) -> Optional[str]:
    clauses = []
    if field_match.has_read():
        clauses.append(_equality_clause(Columns.READ_STATUS, "1" if field_match.is_read else "0"))
    if field_match.has_mailbox():
        clauses.append(_equality_clause(Columns.STATE, str(field_match.mailbox.value)))
    if field_match.has_number():
        clauses.append(_equality_clause(Columns.NUMBER, field_match.number))
    if field_match.has_source():
        clauses.append(_equality_clause(Columns.PROVIDER, field_match.source))
    if field_match.has_provider_data():
        clauses.append(_equality_clause(Columns.PROVIDER_DATA, field_match.provider_data))
    if field_match.has_duration():
        clauses.append(_equality_clause(Columns.DURATION, str(field_match.duration)))
    if field_match.has_timestamp_millis():
        clauses.append(_equality_clause(Columns.DATE, str(field_match.timestamp_millis)))
    # Empty filter
    if not clauses:
        return None
    return concatenate_clauses_with_and(*clauses)


def _equality_clause(column: str, value: str) -> str:
    return equality_clause(TABLE_NAME, column, value)


# Predefined filter for inbox only messages
INBOX_MESSAGES = from_any_of(from_mailbox(Mailbox.INBOX), from_mailbox(Mailbox.UNDELETED))

# Predefined filter for trashed messages
TRASHED_MESSAGES = from_mailbox(Mailbox.DELETED)
