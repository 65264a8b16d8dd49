"""
Join fixtures to results by match url.
"""
from collections.abc import Iterable

from fantasysfc.models import Fixture, MatchData, Result


def correlate(fixtures: Iterable[Fixture], results: Iterable[Result]) -> list[MatchData]:
    """
    Attach each fixture's result, if any.

    Every fixture yields exactly one MatchData, in fixture order. Results
    sharing a url are resolved last-wins; results without a fixture are unused.
    """
    by_url = {result.url: result for result in results}
    return [MatchData(fixture=f, result=by_url.get(f.url)) for f in fixtures]
