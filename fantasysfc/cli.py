"""
CLI entrypoint for fantasysfc.

Usage:
    fantasysfc
    fantasysfc --json
    fantasysfc --url https://www.finalwhistle.ie/gaelic/donegal-fixtures-results
"""
import argparse
import json
import sys

from fantasysfc.config import settings
from fantasysfc.events import logger, setup_logging
from fantasysfc.fetch import DocumentFetcher
from fantasysfc.scraper import FixtureScraper, PipelineError


def _print_results(source_url: str, results: list, as_json: bool, error: str = ''):
    if as_json:
        doc = {
            'source_url': source_url,
            'results': [r.model_dump() for r in results],
        }
        if error:
            doc['error'] = error
        print(json.dumps(doc, indent=2))
        return

    print(source_url)
    for r in results:
        print(f'{r.result_title}  {r.result_url}')
    if error:
        print(f'Error: {error}', file=sys.stderr)


def main(argv=None) -> int:
    """Main CLI entrypoint."""
    parser = argparse.ArgumentParser(
        prog='fantasysfc',
        description='Gaelic football fixtures and results scraper',
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Verbose output')
    parser.add_argument('--url', default=settings.fixtures_url, help='Fixtures page')
    parser.add_argument('--results-url', default=settings.results_url, help='Results page, if separate')
    parser.add_argument('--json', action='store_true', help='Print JSON')

    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    with DocumentFetcher() as fetcher:
        scraper = FixtureScraper(fetcher, fixtures_url=args.url, results_url=args.results_url)
        try:
            source_url, results = scraper.scrape()
        except PipelineError as e:
            _print_results(e.source_url, e.results, args.json, error=str(e))
            return 1

    logger.info(f'Scraped {len(results)} matches from {source_url}')
    _print_results(source_url, results, args.json)
    return 0


if __name__ == '__main__':
    sys.exit(main())
