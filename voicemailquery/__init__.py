#!/usr/bin/env python3
"""
VoicemailQuery - WHERE clause filters for a voicemail content provider

Builds the SQL filters a voicemail content provider is queried with, from
the fields of a Voicemail record, and combines them with AND / OR.

Main Components:
- Voicemail, Mailbox: Record type and mailbox states
- Filters: Factory functions and predefined filters
- Storage: SQLite table in the provider's schema for running filters

Usage:
    from voicemailquery import Mailbox, from_all_of, from_mailbox, from_read_status

    unread_trash = from_all_of(from_read_status(False), from_mailbox(Mailbox.DELETED))
    unread_trash.where_clause
    # "(voicemails.read_status = '0') AND (voicemails.state = '1')"
"""

from .voicemail import Voicemail, Mailbox
from .filters import (
    OR,
    VoicemailFilter,
    from_where_clause,
    from_matching_fields,
    from_mailbox,
    from_read_status,
    from_all_of,
    from_any_of,
    INBOX_MESSAGES,
    TRASHED_MESSAGES,
)
from .storage import VoicemailStore

__all__ = [
    # Records
    'Voicemail',
    'Mailbox',

    # Filters
    'OR',
    'VoicemailFilter',
    'from_where_clause',
    'from_matching_fields',
    'from_mailbox',
    'from_read_status',
    'from_all_of',
    'from_any_of',
    'INBOX_MESSAGES',
    'TRASHED_MESSAGES',

    # Storage
    'VoicemailStore',
]
