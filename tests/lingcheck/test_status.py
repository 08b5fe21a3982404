"""
Tests for Integration Status
============================
Tests for the lazy package attributes and the status reports of the
tagging, spelling and LanguageTool integrations.
"""

import pytest

import lingcheck
from lingcheck import languagetool, spelling, tagging


class TestPackageStatus:
    """Tests for lingcheck.get_status and lazy attributes."""

    def test_lazy_exports(self):
        from lingcheck.pipeline import Pipeline
        assert lingcheck.Pipeline is Pipeline
        assert 'Pipeline' in dir(lingcheck)

    def test_unknown_attribute(self):
        with pytest.raises(AttributeError, match="NoSuchThing"):
            lingcheck.NoSuchThing

    def test_status_covers_every_integration(self):
        status = lingcheck.get_status()
        assert status['version'] == lingcheck.__version__
        assert set(status['modules']) == {'tagging', 'spelling', 'languagetool'}
        for module_status in status['modules'].values():
            assert isinstance(module_status['available'], bool)


class TestIntegrationStatus:
    """Tests for the per-integration status helpers."""

    def test_is_available_returns_bool(self):
        for module in (tagging, spelling, languagetool):
            assert isinstance(module.is_available(), bool)

    def test_no_clients_before_first_use(self):
        languagetool.close_clients()
        assert languagetool.get_status()['clients'] == {}

    def test_spelling_status_names_word_list(self, word_list):
        spelling.open_dictionary("en_US", word_list)
        names = list(spelling.get_status()['dictionaries'])
        assert names == [f"en_US ({word_list})"]
