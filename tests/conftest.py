"""
Shared fixtures: finalwhistle.ie style listing markup.
"""
import pytest

BASE = 'https://www.finalwhistle.ie/gaelic'

LISTING_HTML = f"""
<html><head><title>Donegal Fixtures &amp; Results</title></head>
<body>
<nav><h4 class="sp-event-title"><a href="https://ads.example.com/promo">Win a trip</a></h4></nav>
<table class="sp-event-blocks">
  <tbody>
    <tr><td>
      <time class="sp-event-date" datetime="2025-03-23 15:45:00">March 23, 2025</time>
      <h5 class="sp-event-results">
        <span class="sp-result">1-14</span> - <span class="sp-result">0-11</span>
      </h5>
      <h4 class="sp-event-title"><a href="{BASE}/donegal-v-tyrone">Donegal v Tyrone</a></h4>
    </td></tr>
    <tr><td>
      <time class="sp-event-date">March 30, 2025</time>
      <h5 class="sp-event-results">
        <span class="sp-result">2-10</span> - <span class="sp-result"> </span>
      </h5>
      <h4 class="sp-event-title"><a href="{BASE}/donegal-v-armagh">Donegal v Armagh</a></h4>
    </td></tr>
    <tr><td>
      <time class="sp-event-date">April 6, 2025</time>
      <h4 class="sp-event-title"><a href="{BASE}/derry-v-donegal">Derry v Donegal</a></h4>
    </td></tr>
    <tr><td>
      <h5 class="sp-event-results">
        <span class="sp-result">3-09</span> - <span class="sp-result">1-12</span>
      </h5>
      <h4 class="sp-event-title"><a href="{BASE}/ulster-final">Donegal Senior Football Final</a></h4>
    </td></tr>
  </tbody>
</table>
</body></html>
"""

RESULT_FRAGMENT = f"""
<td>
  <time class="sp-event-date">March 23, 2025</time>
  <h5 class="sp-event-results">
    <span class="sp-result">1-14</span> - <span class="sp-result">0-11</span>
  </h5>
  <h4 class="sp-event-title"><a href="{BASE}/donegal-v-tyrone">Donegal v Tyrone</a></h4>
</td>
"""

FIXTURE_FRAGMENT = f"""
<td>
  <time class="sp-event-date">April 6, 2025</time>
  <h4 class="sp-event-title"><a href="{BASE}/derry-v-donegal">Derry v Donegal</a></h4>
</td>
"""


def pytest_configure(config):
    config.addinivalue_line('markers', 'integration: hits the live finalwhistle.ie site')


@pytest.fixture
def listing_html():
    return LISTING_HTML


@pytest.fixture
def result_fragment():
    return RESULT_FRAGMENT


@pytest.fixture
def fixture_fragment():
    return FIXTURE_FRAGMENT
