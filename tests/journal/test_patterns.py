"""Tests for daybook.journal.patterns."""

from datetime import date, datetime

import pytest

from daybook.journal.keywords import JournalKeywordSet
from daybook.journal.patterns import date_pattern, identifier_fragment
from daybook.notes.filename import ComponentOrder, NoteFileName

KEYWORDS = JournalKeywordSet.from_config("journal")
IDENTIFIER_FIRST = ComponentOrder()
KEYWORDS_FIRST = ComponentOrder.from_names(["keywords", "title", "identifier"])


def _name(identifier, order, keywords=("journal",), title="thursday-19-october-2023"):
    return NoteFileName(identifier=identifier, title=title, keywords=keywords).format(order)


class TestIdentifierFragment:
    def test_wildcard_time(self):
        assert identifier_fragment(date(2023, 10, 19)) == "20231019T[0-9]{6}"

    def test_ignores_time_of_day(self):
        assert identifier_fragment(datetime(2023, 10, 19, 23, 59)) == "20231019T[0-9]{6}"

    def test_defaults_to_today(self):
        assert identifier_fragment().startswith(datetime.now().strftime("%Y%m%d"))


class TestDatePattern:
    def test_identifier_first_layout(self):
        pattern = date_pattern(date(2023, 10, 19), KEYWORDS, IDENTIFIER_FIRST)
        assert pattern.pattern == "20231019T[0-9]{6}.*?_journal(?=[_.@=-]|$)"

    def test_keywords_first_layout(self):
        pattern = date_pattern(date(2023, 10, 19), KEYWORDS, KEYWORDS_FIRST)
        assert pattern.pattern == "_journal(?=[_.@=-]|$).*?@@20231019T[0-9]{6}"

    @pytest.mark.parametrize("order", [IDENTIFIER_FIRST, KEYWORDS_FIRST])
    def test_matches_same_day_any_time(self, order):
        pattern = date_pattern(date(2023, 10, 19), KEYWORDS, order)
        assert pattern.search(_name("20231019T000000", order))
        assert pattern.search(_name("20231019T235959", order))

    @pytest.mark.parametrize("order", [IDENTIFIER_FIRST, KEYWORDS_FIRST])
    def test_rejects_other_day(self, order):
        pattern = date_pattern(date(2023, 10, 19), KEYWORDS, order)
        assert not pattern.search(_name("20231018T204900", order))
        assert not pattern.search(_name("20231020T000000", order))

    @pytest.mark.parametrize("order", [IDENTIFIER_FIRST, KEYWORDS_FIRST])
    def test_rejects_other_keywords(self, order):
        pattern = date_pattern(date(2023, 10, 19), KEYWORDS, order)
        assert not pattern.search(_name("20231019T204900", order, keywords=("work",)))

    @pytest.mark.parametrize("order", [IDENTIFIER_FIRST, KEYWORDS_FIRST])
    def test_extra_trailing_keywords_allowed(self, order):
        pattern = date_pattern(date(2023, 10, 19), KEYWORDS, order)
        assert pattern.search(_name("20231019T204900", order, keywords=("journal", "work")))

    def test_keywords_first_with_title_between(self):
        order = ComponentOrder.from_names(["keywords", "title", "signature", "identifier"])
        name = NoteFileName(
            identifier="20231019T204900", title="x", keywords=("journal",), signature="2"
        ).format(order)
        assert date_pattern(date(2023, 10, 19), KEYWORDS, order).search(name)

    def test_multiple_keywords(self):
        keywords = JournalKeywordSet.from_config(["work", "journal"])
        pattern = date_pattern(date(2023, 10, 19), keywords, IDENTIFIER_FIRST)
        assert pattern.search(_name("20231019T204900", IDENTIFIER_FIRST, keywords=("journal", "work")))
        assert not pattern.search("20231019T204900--x__work_journal.org")

    def test_default_date_is_today(self):
        pattern = date_pattern(None, KEYWORDS, IDENTIFIER_FIRST)
        today = datetime.now().strftime("%Y%m%d")
        assert pattern.search(f"{today}T120000--x__journal.org")

    @pytest.mark.parametrize("order", [IDENTIFIER_FIRST, KEYWORDS_FIRST])
    def test_journal_keyword_after_other_keywords(self, order):
        pattern = date_pattern(date(2023, 10, 19), KEYWORDS, order)
        assert pattern.search(_name("20231019T090000", order, keywords=("daily", "journal")))

    @pytest.mark.parametrize("order", [IDENTIFIER_FIRST, KEYWORDS_FIRST])
    def test_longer_keyword_sharing_prefix_rejected(self, order):
        pattern = date_pattern(date(2023, 10, 19), KEYWORDS, order)
        assert not pattern.search(_name("20231019T090000", order, keywords=("journalism",)))
