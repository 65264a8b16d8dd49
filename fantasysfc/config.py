"""
Configuration for fantasysfc.

Fixed constants: no configuration file or environment lookup. Callers pick
other pages through FixtureScraper arguments or the CLI flags.
"""
from dataclasses import dataclass

BASE_URL = 'https://www.finalwhistle.ie'
FIXTURES_URL = f'{BASE_URL}/gaelic/donegal-fixtures-results'
SITE_DOMAIN = 'finalwhistle.ie'
REQ_TIMEOUT_S = 30.0

USER_AGENTS: tuple[str, ...] = (
    'Mozilla/5.0 (Windows NT 6.1; WOW64)',
    'AppleWebKit/537.36 (KHTML, like Gecko)',
    'Chrome/44.0.2403.157 Safari/537.36',
)


@dataclass(frozen=True)
class Settings:
    """Immutable process-wide settings."""

    fixtures_url: str = FIXTURES_URL
    results_url: str = ''
    site_domain: str = SITE_DOMAIN
    user_agents: tuple[str, ...] = USER_AGENTS
    req_timeout_s: float = REQ_TIMEOUT_S


settings = Settings()
