"""
Tests for Pydantic models.
"""
import pytest

from fantasysfc.models import Fixture, MatchData, Result


class TestModels:
    """Validation rules on match records."""

    def test_fixture_strips(self):
        fixture = Fixture(title='  Donegal v Tyrone ', url=' https://www.finalwhistle.ie/x ')
        assert fixture.title == 'Donegal v Tyrone'
        assert fixture.url == 'https://www.finalwhistle.ie/x'

    def test_fixture_requires_url(self):
        with pytest.raises(ValueError):
            Fixture(title='Donegal v Tyrone', url='  ')

    def test_result_requires_both_scores(self):
        with pytest.raises(ValueError):
            Result(title='t', url='https://www.finalwhistle.ie/x', home_score='1-14', away_score=' ')
        with pytest.raises(ValueError):
            Result(title='t', url='https://www.finalwhistle.ie/x', home_score='', away_score='0-11')

    def test_result_scores_free_text(self):
        result = Result(
            title='Donegal v Tyrone',
            url='https://www.finalwhistle.ie/x',
            home_team='Donegal',
            away_team='Tyrone',
            home_score='W/O',
            away_score='-',
        )
        assert result.summary == 'Donegal W/O - Tyrone -'

    def test_match_data_defaults_empty(self):
        match = MatchData(fixture=Fixture(title='t', url='https://www.finalwhistle.ie/x'))
        assert match.result is None
        assert match.has_result is False
