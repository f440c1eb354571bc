"""Tests for the Tempo billing account lookups."""

from tests.fixtures.http import http_error
from tests.fixtures.tempo_mocks import MOCK_ACCOUNT_LINKS_RESPONSE


class TestAccountsMixin:
    def test_default_link_wins_and_key_is_fetched(self, tempo_fetcher, mock_rest_api):
        mock_rest_api.get.side_effect = [
            MOCK_ACCOUNT_LINKS_RESPONSE,
            {"id": 8, "key": "ACME-EXT"},
        ]

        link = tempo_fetcher.get_default_account_for_project(10000)

        assert link.account_id == 8
        assert link.account_key == "ACME-EXT"
        first, second = mock_rest_api.get.call_args_list
        assert first.args == ("4/account-links/project/10000",)
        assert first.kwargs == {"params": {"limit": 100}}
        assert second.args == ("4/accounts/8",)

    def test_first_link_wins_without_default(self, tempo_fetcher, mock_rest_api):
        mock_rest_api.get.return_value = {
            "results": [
                {"id": 1, "account": {"id": 7, "key": "FIRST"}, "default": False},
                {"id": 2, "account": {"id": 9, "key": "SECOND"}, "default": False},
            ]
        }

        link = tempo_fetcher.get_default_account_for_project(10000)

        assert link.account_key == "FIRST"
        assert mock_rest_api.get.call_count == 1

    def test_no_links(self, tempo_fetcher, mock_rest_api):
        mock_rest_api.get.return_value = {"results": []}

        assert tempo_fetcher.get_default_account_for_project(10000) is None

    def test_link_without_account(self, tempo_fetcher, mock_rest_api):
        mock_rest_api.get.return_value = {"results": [{"id": 1, "account": {}}]}

        assert tempo_fetcher.get_default_account_for_project(10000) is None

    def test_lookup_failure_is_swallowed(self, tempo_fetcher, mock_rest_api):
        mock_rest_api.get.side_effect = http_error(403, "forbidden")

        assert tempo_fetcher.get_default_account_for_project(10000) is None
