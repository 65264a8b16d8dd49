"""
fantasysfc - fixtures/results pipeline.

fetch -> extract fixtures and results -> correlate -> project.

Source: https://www.finalwhistle.ie/gaelic/donegal-fixtures-results
"""
from fantasysfc.config import settings
from fantasysfc.correlate import correlate
from fantasysfc.events import log_event, logger
from fantasysfc.extract import iter_fixtures, iter_results
from fantasysfc.fetch import DocumentFetcher, FetchError, parse_document
from fantasysfc.models import MatchData, SearchResult


class PipelineError(Exception):
    """Pipeline aborted; no partial results are produced."""

    def __init__(self, stage: str, cause: Exception, source_url: str):
        self.stage = stage
        self.cause = cause
        self.source_url = source_url
        self.results: list[SearchResult] = []
        super().__init__(f'{stage} failed for {source_url}: {cause}')


def project(match: MatchData) -> SearchResult:
    """Caller-facing view: fixture title plus score summary when played."""
    title = match.fixture.title
    if match.result is not None:
        title = f'{title} ({match.result.summary})'
    return SearchResult(result_url=match.fixture.url, result_title=title)


class FixtureScraper:
    """
    Fixtures and results scraper for a single finalwhistle.ie page.

    When ``results_url`` names a different page, results are read from it;
    otherwise fixtures and results share one document. Use as a context
    manager to close a fetcher it created.
    """

    def __init__(
        self,
        fetcher: DocumentFetcher | None = None,
        fixtures_url: str = settings.fixtures_url,
        results_url: str = settings.results_url,
    ):
        self._owns_fetcher = fetcher is None
        self.fetcher = fetcher or DocumentFetcher()
        self.fixtures_url = fixtures_url
        self.results_url = results_url or fixtures_url

    def _fetch(self, url: str):
        try:
            return parse_document(self.fetcher.fetch(url))
        except FetchError as e:
            logger.error(f'Fetch failed: {e}')
            raise PipelineError('fetch', e, url) from e

    def scrape_matches(self) -> tuple[str, list[MatchData]]:
        """
        Fetch and correlate fixtures with results.

        Returns:
            (source url, matches in fixture order)

        Raises:
            PipelineError: if any fetch fails
        """
        fixtures_doc = self._fetch(self.fixtures_url)
        if self.results_url == self.fixtures_url:
            results_doc = fixtures_doc
        else:
            results_doc = self._fetch(self.results_url)

        matches = correlate(iter_fixtures(fixtures_doc), iter_results(results_doc))

        played = sum(1 for m in matches if m.has_result)
        logger.info(f'Correlated {len(matches)} fixtures ({played} with results)')
        log_event(event='scrape', url=self.fixtures_url, fixtures=len(matches), results=played)
        return self.fixtures_url, matches

    def scrape(self) -> tuple[str, list[SearchResult]]:
        """
        Run the pipeline and project each match for display.

        Raises:
            PipelineError: if any fetch fails
        """
        url, matches = self.scrape_matches()
        return url, [project(m) for m in matches]

    def close(self):
        if self._owns_fetcher:
            self.fetcher.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()


def scrape() -> tuple[str, list[SearchResult]]:
    """Scrape the configured page with default settings."""
    with FixtureScraper() as scraper:
        return scraper.scrape()
