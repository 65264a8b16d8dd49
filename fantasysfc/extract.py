"""
Fixture and result extraction from finalwhistle.ie event markup.

Listing extractors (iter_fixtures/iter_results) skip cells they cannot use.
Fragment extractors expect exactly one match and raise ExtractError instead.

Markup (SportsPress event blocks):

    <td>
      <time class="sp-event-date">March 23, 2025</time>
      <h5 class="sp-event-results">
        <span class="sp-result">1-14</span> - <span class="sp-result">0-11</span>
      </h5>
      <h4 class="sp-event-title"><a href="https://www.finalwhistle.ie/...">Donegal v Tyrone</a></h4>
    </td>
"""
from collections.abc import Iterator

from bs4 import BeautifulSoup, Tag
from pydantic import ValidationError

from fantasysfc.config import settings
from fantasysfc.events import logger
from fantasysfc.fetch import parse_document
from fantasysfc.models import Fixture, MatchExtraction, Result

TITLE_SELECTOR = '.sp-event-title'
RESULTS_SELECTOR = '.sp-event-results'
SCORE_SELECTOR = '.sp-result'
DATE_SELECTOR = '.sp-event-date'
RESULT_CELL_SELECTOR = f'td:has({TITLE_SELECTOR}):has({RESULTS_SELECTOR})'

TEAM_SEPARATOR = ' v '


class ExtractError(Exception):
    """Single-match fragment could not be extracted."""

    MISSING_TITLE = 'missing_title'
    MISSING_URL = 'missing_url'
    MISSING_RESULTS_BLOCK = 'missing_results_block'
    MISSING_SCORES = 'missing_scores'

    def __init__(self, reason: str, detail: str = ''):
        self.reason = reason
        super().__init__(f'{reason}: {detail}' if detail else reason)


def _as_document(doc: BeautifulSoup | Tag | str) -> BeautifulSoup | Tag:
    return parse_document(doc) if isinstance(doc, str) else doc


def on_site(url: str, domain: str = settings.site_domain) -> bool:
    """True if url is non-empty and belongs to the target site."""
    return bool(url) and domain in url


def split_teams(title: str) -> tuple[str, str]:
    """
    Split 'Home v Away' into team names.

    Returns ('', '') unless the title splits into exactly two parts.
    """
    parts = title.split(TEAM_SEPARATOR)
    if len(parts) != 2:
        return '', ''
    return parts[0].strip(), parts[1].strip()


def _read_title(title_el: Tag) -> tuple[str, str]:
    """Anchor text and href of a title element (either may be empty)."""
    anchor = title_el if title_el.name == 'a' else title_el.find('a')
    if anchor is None:
        return '', ''
    return anchor.get_text(' ', strip=True), (anchor.get('href') or '').strip()


def _read_scores(results_el: Tag) -> tuple[str, str]:
    scores = [s.get_text(strip=True) for s in results_el.select(SCORE_SELECTOR)[:2]]
    if len(scores) < 2:
        return '', ''
    return scores[0], scores[1]


def _read_date(cell: Tag) -> str:
    date_el = cell.select_one(DATE_SELECTOR)
    return date_el.get_text(' ', strip=True) if date_el is not None else ''


# =============================================================================
# LISTING EXTRACTION
# =============================================================================

def iter_fixtures(doc: BeautifulSoup | Tag | str) -> Iterator[Fixture]:
    """Yield fixtures in document order, skipping off-site or unlinked titles."""
    for title_el in _as_document(doc).select(TITLE_SELECTOR):
        title, url = _read_title(title_el)
        if not on_site(url):
            continue
        yield Fixture(title=title, url=url)


def iter_results(doc: BeautifulSoup | Tag | str) -> Iterator[Result]:
    """
    Yield completed-match results in document order.

    A cell is a result only if it holds both a title and a results block.
    Cells without two non-empty scores are dropped.
    """
    for cell in _as_document(doc).select(RESULT_CELL_SELECTOR):
        title, url = _read_title(cell.select_one(TITLE_SELECTOR))
        if not on_site(url):
            continue
        home_team, away_team = split_teams(title)
        home_score, away_score = _read_scores(cell.select_one(RESULTS_SELECTOR))
        try:
            yield Result(
                title=title,
                url=url,
                home_team=home_team,
                away_team=away_team,
                home_score=home_score,
                away_score=away_score,
                completed_at=_read_date(cell),
            )
        except ValidationError as e:
            logger.debug(f'Skipping result cell {url}: {e.error_count()} invalid field(s)')


def extract_fixtures(doc: BeautifulSoup | Tag | str) -> list[Fixture]:
    return list(iter_fixtures(doc))


def extract_results(doc: BeautifulSoup | Tag | str) -> list[Result]:
    return list(iter_results(doc))


# =============================================================================
# FRAGMENT EXTRACTION
# =============================================================================

def _fragment_title(fragment: BeautifulSoup) -> tuple[str, str]:
    title_el = fragment.select_one(TITLE_SELECTOR)
    if title_el is None:
        raise ExtractError(ExtractError.MISSING_TITLE, f'no {TITLE_SELECTOR} element')
    title, url = _read_title(title_el)
    if not title:
        raise ExtractError(ExtractError.MISSING_TITLE, 'title anchor is empty')
    if not url:
        raise ExtractError(ExtractError.MISSING_URL, 'title anchor has no href')
    if not on_site(url):
        raise ExtractError(ExtractError.MISSING_URL, f'{url} is not on {settings.site_domain}')
    return title, url


def extract_fixture_from_fragment(html: str) -> Fixture:
    """
    Extract the single fixture described by an HTML fragment.

    Raises:
        ExtractError: MISSING_TITLE or MISSING_URL
    """
    title, url = _fragment_title(parse_document(html))
    return Fixture(title=title, url=url)


def extract_result_from_fragment(html: str) -> Result:
    """
    Extract the single result described by an HTML fragment.

    Raises:
        ExtractError: MISSING_TITLE, MISSING_URL, MISSING_RESULTS_BLOCK
            or MISSING_SCORES
    """
    fragment = parse_document(html)
    title, url = _fragment_title(fragment)

    results_el = fragment.select_one(RESULTS_SELECTOR)
    if results_el is None:
        raise ExtractError(ExtractError.MISSING_RESULTS_BLOCK, f'no {RESULTS_SELECTOR} element')

    home_score, away_score = _read_scores(results_el)
    if not home_score or not away_score:
        raise ExtractError(ExtractError.MISSING_SCORES, f'{url} has no complete score pair')

    home_team, away_team = split_teams(title)
    return Result(
        title=title,
        url=url,
        home_team=home_team,
        away_team=away_team,
        home_score=home_score,
        away_score=away_score,
        completed_at=_read_date(fragment),
    )


def extract_match_from_fragment(html: str) -> MatchExtraction:
    """
    Extract a fixture and, if the match has been played, its result.

    A missing result is normal for upcoming fixtures and is only logged.

    Raises:
        ExtractError: if the fixture itself cannot be extracted
    """
    fixture = extract_fixture_from_fragment(html)
    try:
        result = extract_result_from_fragment(html)
    except ExtractError as e:
        logger.info(f'No result for {fixture.url}: {e}')
        result = None
    return MatchExtraction(fixture=fixture, result=result)
