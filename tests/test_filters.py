import unittest
from voicemailquery import (
    Voicemail, Mailbox, OR, VoicemailFilter,
    from_where_clause, from_matching_fields, from_mailbox, from_read_status,
    from_all_of, from_any_of, INBOX_MESSAGES, TRASHED_MESSAGES,
)


class TestWhereClause(unittest.TestCase):
    def test_empty_clause_is_unconstrained(self):
        """Test that None and "" both give a filter without a clause"""
        self.assertIsNone(from_where_clause("").where_clause)
        self.assertIsNone(from_where_clause(None).where_clause)
        self.assertTrue(from_where_clause(None).is_unconstrained())

    def test_clause_kept_verbatim(self):
        """Test that the raw clause is not validated or rewritten"""
        self.assertEqual(from_where_clause("x=1").where_clause, "x=1")
        self.assertEqual(from_where_clause("not valid sql (").where_clause, "not valid sql (")

    def test_str_and_repr(self):
        self.assertEqual(str(from_where_clause("x=1")), "x=1")
        self.assertEqual(str(from_where_clause(None)), "")
        self.assertEqual(repr(from_where_clause("x=1")), "VoicemailFilter('x=1')")
        self.assertEqual(repr(from_where_clause(None)), "VoicemailFilter(None)")

    def test_value_equality(self):
        self.assertEqual(from_where_clause("x=1"), VoicemailFilter("x=1"))
        self.assertEqual(hash(from_where_clause("x=1")), hash(VoicemailFilter("x=1")))
        self.assertNotEqual(from_where_clause("x=1"), from_where_clause("x=2"))

    def test_filter_is_immutable(self):
        f = from_where_clause("x=1")
        with self.assertRaises(AttributeError):
            f.where_clause = "x=2"
        with self.assertRaises(AttributeError):
            f._where_clause = "x=2"
        self.assertEqual(f.where_clause, "x=1")


class TestMatchingFields(unittest.TestCase):
    def test_none_record_raises(self):
        with self.assertRaises(ValueError):
            from_matching_fields(None)

    def test_no_fields_set_is_unconstrained(self):
        self.assertIsNone(from_matching_fields(Voicemail()).where_clause)
        self.assertIsNone(from_matching_fields(Voicemail.empty()).where_clause)

    def test_each_field_gives_one_term(self):
        """Test that a record with a single field set gives one equality term on its column"""
        cases = [
            (Voicemail(is_read=True), "voicemails.read_status = '1'"),
            (Voicemail(is_read=False), "voicemails.read_status = '0'"),
            (Voicemail(mailbox=Mailbox.DELETED), "voicemails.state = '1'"),
            (Voicemail(number="5551234"), "voicemails.number = '5551234'"),
            (Voicemail(source="com.example.voicemail"), "voicemails.provider = 'com.example.voicemail'"),
            (Voicemail(provider_data="msg-42"), "voicemails.provider_data = 'msg-42'"),
            (Voicemail(duration=37), "voicemails.duration = '37'"),
            (Voicemail(timestamp_millis=1300000000000), "voicemails.date = '1300000000000'"),
        ]
        for record, expected in cases:
            with self.subTest(record=record):
                clause = from_matching_fields(record).where_clause
                self.assertEqual(clause, expected)
                self.assertEqual(clause.count(" = "), 1)

    def test_falsy_values_still_count_as_set(self):
        """Test that zero and empty string values produce a clause"""
        self.assertEqual(from_matching_fields(Voicemail(duration=0)).where_clause,
                         "voicemails.duration = '0'")
        self.assertEqual(from_matching_fields(Voicemail(number="")).where_clause,
                         "voicemails.number = ''")

    def test_multiple_fields_joined_with_and_in_field_order(self):
        record = Voicemail(timestamp_millis=1000, number="5551234", is_read=False)
        self.assertEqual(
            from_matching_fields(record).where_clause,
            "(voicemails.read_status = '0') AND (voicemails.number = '5551234') AND (voicemails.date = '1000')"
        )

    def test_quotes_in_values_are_escaped(self):
        record = Voicemail(provider_data="it's")
        self.assertEqual(from_matching_fields(record).where_clause,
                         "voicemails.provider_data = 'it''s'")


class TestConvenienceFilters(unittest.TestCase):
    def test_read_status(self):
        self.assertEqual(from_read_status(True).where_clause, "voicemails.read_status = '1'")
        self.assertEqual(from_read_status(False).where_clause, "voicemails.read_status = '0'")

    def test_mailbox(self):
        self.assertEqual(from_mailbox(Mailbox.INBOX).where_clause, "voicemails.state = '0'")
        self.assertEqual(from_mailbox(Mailbox.UNDELETED).where_clause, "voicemails.state = '2'")

    def test_mailbox_rejects_non_mailbox(self):
        with self.assertRaises(ValueError):
            from_mailbox(0)
        with self.assertRaises(ValueError):
            from_mailbox(None)

    def test_mailbox_or(self):
        """Test that an OR of mailboxes matches any of them"""
        self.assertEqual(from_mailbox(OR(Mailbox.INBOX, Mailbox.UNDELETED)), INBOX_MESSAGES)
        self.assertEqual(from_mailbox(OR(Mailbox.DELETED)), TRASHED_MESSAGES)
        self.assertTrue(from_mailbox(OR()).is_unconstrained())

    def test_predefined_filters(self):
        self.assertEqual(INBOX_MESSAGES.where_clause,
                         "(voicemails.state = '0') OR (voicemails.state = '2')")
        self.assertEqual(TRASHED_MESSAGES.where_clause, "voicemails.state = '1'")


class TestCombiningFilters(unittest.TestCase):
    def setUp(self):
        self.a = from_where_clause("a = 1")
        self.b = from_where_clause("b = 2")
        self.everything = from_where_clause(None)

    def test_no_filters_is_unconstrained(self):
        self.assertIsNone(from_all_of().where_clause)
        self.assertIsNone(from_any_of().where_clause)

    def test_single_filter_is_not_wrapped(self):
        self.assertEqual(from_all_of(self.a).where_clause, "a = 1")
        self.assertEqual(from_any_of(self.a).where_clause, "a = 1")

    def test_two_filters(self):
        self.assertEqual(from_all_of(self.a, self.b).where_clause, "(a = 1) AND (b = 2)")
        self.assertEqual(from_any_of(self.a, self.b).where_clause, "(a = 1) OR (b = 2)")

    def test_unconstrained_filters_are_skipped(self):
        """Test that filters without a clause are dropped in both AND and OR"""
        self.assertEqual(from_all_of(self.everything, self.a).where_clause, "a = 1")
        self.assertEqual(from_any_of(self.a, self.everything, self.b).where_clause,
                         "(a = 1) OR (b = 2)")
        self.assertIsNone(from_all_of(self.everything, self.everything).where_clause)
        self.assertIsNone(from_any_of(self.everything).where_clause)

    def test_nested_combination(self):
        unread_inbox = from_all_of(from_read_status(False), INBOX_MESSAGES)
        self.assertEqual(
            unread_inbox.where_clause,
            "(voicemails.read_status = '0') AND "
            "((voicemails.state = '0') OR (voicemails.state = '2'))"
        )


if __name__ == '__main__':
    unittest.main()
