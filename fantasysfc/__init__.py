"""
fantasysfc - Gaelic football fixtures and results scraper.

- Source: finalwhistle.ie fixtures/results listing
- Joins fixtures to results by match url
- Outputs: SearchResult records for the fantasy-team assembler
"""

__version__ = '1.0.0'

from fantasysfc.correlate import correlate
from fantasysfc.extract import (
    ExtractError,
    extract_fixture_from_fragment,
    extract_fixtures,
    extract_match_from_fragment,
    extract_result_from_fragment,
    extract_results,
)
from fantasysfc.fetch import DocumentFetcher, FetchError
from fantasysfc.models import Fixture, MatchData, Result, SearchResult
from fantasysfc.scraper import FixtureScraper, PipelineError, scrape

__all__ = [
    'DocumentFetcher',
    'ExtractError',
    'FetchError',
    'Fixture',
    'FixtureScraper',
    'MatchData',
    'PipelineError',
    'Result',
    'SearchResult',
    'correlate',
    'extract_fixture_from_fragment',
    'extract_fixtures',
    'extract_match_from_fragment',
    'extract_result_from_fragment',
    'extract_results',
    'scrape',
]
