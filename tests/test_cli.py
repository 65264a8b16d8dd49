"""
Tests for the CLI entrypoint.
"""
import json

from fantasysfc import cli
from fantasysfc.fetch import FetchError
from fantasysfc.models import SearchResult
from fantasysfc.scraper import PipelineError

URL = 'https://www.finalwhistle.ie/gaelic/donegal-fixtures-results'


class _Scraper:
    outcome = None

    def __init__(self, fetcher, fixtures_url, results_url):
        self.fixtures_url = fixtures_url

    def scrape(self):
        if isinstance(self.outcome, Exception):
            raise self.outcome
        return self.fixtures_url, self.outcome


def test_prints_results(monkeypatch, capsys):
    _Scraper.outcome = [
        SearchResult(result_url=f'{URL}/a', result_title='Donegal v Tyrone (Donegal 1-14 - Tyrone 0-11)'),
    ]
    monkeypatch.setattr(cli, 'FixtureScraper', _Scraper)

    assert cli.main(['--url', URL]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == URL
    assert out[1] == f'Donegal v Tyrone (Donegal 1-14 - Tyrone 0-11)  {URL}/a'


def test_json_output(monkeypatch, capsys):
    _Scraper.outcome = [SearchResult(result_url=f'{URL}/a', result_title='Derry v Donegal')]
    monkeypatch.setattr(cli, 'FixtureScraper', _Scraper)

    assert cli.main(['--url', URL, '--json']) == 0
    doc = json.loads(capsys.readouterr().out)
    assert doc['source_url'] == URL
    assert doc['results'] == [{'result_url': f'{URL}/a', 'result_title': 'Derry v Donegal'}]


def test_failure_exit_code(monkeypatch, capsys):
    cause = FetchError(FetchError.NON_2XX, URL, status_code=404)
    _Scraper.outcome = PipelineError('fetch', cause, URL)
    monkeypatch.setattr(cli, 'FixtureScraper', _Scraper)

    assert cli.main(['--url', URL, '--json']) == 1
    doc = json.loads(capsys.readouterr().out)
    assert doc['results'] == []
    assert 'status 404' in doc['error']
