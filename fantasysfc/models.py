"""
Pydantic models for fixture and result records.
"""

from pydantic import BaseModel, ConfigDict, field_validator


class Fixture(BaseModel):
    """A scheduled match, identified by its url."""

    model_config = ConfigDict(frozen=True)

    title: str
    url: str

    @field_validator('title', 'url')
    @classmethod
    def strip(cls, v: str) -> str:
        return v.strip()

    @field_validator('url')
    @classmethod
    def url_nonempty(cls, v: str) -> str:
        if not v:
            raise ValueError('url must be non-empty')
        return v


class Result(BaseModel):
    """Outcome of a completed match. Scores are free text, e.g. '1-14'."""

    model_config = ConfigDict(frozen=True)

    title: str
    url: str
    home_team: str = ''
    away_team: str = ''
    home_score: str
    away_score: str
    completed_at: str = ''

    @field_validator('*', mode='before')
    @classmethod
    def strip(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator('url')
    @classmethod
    def url_nonempty(cls, v: str) -> str:
        if not v:
            raise ValueError('url must be non-empty')
        return v

    @field_validator('home_score', 'away_score')
    @classmethod
    def score_nonempty(cls, v: str) -> str:
        if not v:
            raise ValueError('score must be non-empty')
        return v

    @property
    def summary(self) -> str:
        """Score line, e.g. 'Donegal 1-14 - Tyrone 0-11'."""
        return f'{self.home_team} {self.home_score} - {self.away_team} {self.away_score}'


class MatchData(BaseModel):
    """A fixture joined with its result, if one has been played."""

    model_config = ConfigDict(frozen=True)

    fixture: Fixture
    result: Result | None = None

    @property
    def has_result(self) -> bool:
        return self.result is not None


class MatchExtraction(BaseModel):
    """Fixture and best-effort result read from a single-match fragment."""

    fixture: Fixture
    result: Result | None = None


class SearchResult(BaseModel):
    """Caller-facing projection of a match."""

    result_url: str
    result_title: str
