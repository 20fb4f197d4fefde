"""Tests for daybook.journal.templates."""

from daybook.journal.templates import TemplateRegistry


class TestTemplateRegistry:
    def test_journal_key(self):
        registry = TemplateRegistry({"journal": "* Today\n", "meeting": "* Agenda\n"})
        assert registry.lookup("journal") == "* Today\n"

    def test_no_templates(self):
        assert TemplateRegistry().lookup("journal") is None

    def test_chooses_when_journal_key_missing(self):
        offered = []

        def _choose(names):
            offered.extend(names)
            return "meeting"

        registry = TemplateRegistry({"meeting": "* Agenda\n", "book": "* Notes\n"}, choose=_choose)
        assert registry.lookup("journal") == "* Agenda\n"
        assert offered == ["book", "meeting"]

    def test_no_chooser_means_no_template(self):
        assert TemplateRegistry({"meeting": "* Agenda\n"}).lookup("journal") is None

    def test_unknown_choice_ignored(self):
        registry = TemplateRegistry({"meeting": "* Agenda\n"}, choose=lambda names: "other")
        assert registry.lookup("journal") is None

    def test_chooser_not_called_when_key_present(self):
        def _choose(names):
            raise AssertionError("should not prompt")

        registry = TemplateRegistry({"journal": "x"}, choose=_choose)
        assert registry.lookup("journal") == "x"
