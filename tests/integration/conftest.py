"""
In-memory copy of the guidelines site for integration tests.

Every request to SITE is answered by ``serve_site`` through Playwright
request routing, so the tests need a Chromium install but no network.

Markup mirrors what the journeys depend on:
- desktop navbar (#navbar) hidden below 768px, expand button shown instead
- collapsed menu whose Favourites link goes through an intermediate hub page
- search results that echo the query in a hidden element before the result
- favourites persisted in localStorage and toggled by a star button
- favourites list entries and its tab rendered a moment after the page loads
"""

import html
import json
from contextlib import asynccontextmanager
from urllib.parse import parse_qs, urlparse

import pytest
import pytest_asyncio

from ui_journeys.browser import BrowserConfig, BrowserController, BrowserSession
from ui_journeys.config import Deadlines, SuiteConfig
from ui_journeys.runner import ScenarioContext

SITE = "https://guidelines.test"

TOPIC = "Principles of management of diabetes"
TOPIC_PATH = "/topics/diabetes/principles-of-management"

STYLE = """
#mobile-menu { display: none; }
#mobile-menu.open { display: block; }
[data-testid="expand-button"] { display: none; }
@media (max-width: 767px) {
  #navbar { display: none; }
  [data-testid="expand-button"] { display: inline-block; }
}
"""

SCRIPT = """
function favourites() {
  return JSON.parse(localStorage.getItem('favourites') || '[]');
}
function toggleFavourite(name, href) {
  if (window.brokenToggle === 'inert') { return; }
  const items = favourites();
  const index = items.findIndex(item => item.name === name);
  if (index >= 0) {
    if (window.brokenToggle === 'add-only') { return; }
    items.splice(index, 1);
  } else {
    items.push({name, href});
  }
  localStorage.setItem('favourites', JSON.stringify(items));
}
function renderFavourites() {
  const list = document.getElementById('favourites-list');
  if (!list) { return; }
  for (const item of favourites()) {
    const li = document.createElement('li');
    const a = document.createElement('a');
    a.href = item.href;
    a.textContent = item.name;
    li.appendChild(a);
    list.appendChild(li);
  }
  const tab = document.createElement('button');
  tab.setAttribute('role', 'tab');
  tab.textContent = 'Favourites';
  document.getElementById('favourites-tabs').appendChild(tab);
}
// Entries arrive after the page itself, as on the real site
setTimeout(renderFavourites, 300);
"""


def render(title: str, body: str) -> str:
    return f"""<!DOCTYPE html>
<html>
<head><title>{html.escape(title)}</title><style>{STYLE}</style></head>
<body>
<header>
  <nav id="navbar"><a href="/">Home</a> <a href="/favourites">Favourites</a></nav>
  <button data-testid="expand-button" aria-label="Open menu"
          onclick="document.getElementById('mobile-menu').classList.add('open')">Menu</button>
  <nav id="mobile-menu"><a href="/menu/saved">Favourites</a></nav>
  <form action="/search" method="get">
    <input type="text" name="q" aria-label="Search">
  </form>
</header>
<main>{body}</main>
<script>{SCRIPT}</script>
</body>
</html>"""


def page_for(path: str, query: dict) -> tuple[int, str]:
    if path == "/":
        return 200, render(
            "Home | Therapeutic Guidelines",
            """<h1>Therapeutic Guidelines</h1>
            <button aria-label="Diabetes-breadcrumb"
                    onclick="location.href='/topics/diabetes'">Diabetes</button>""",
        )
    if path == "/search":
        term = query.get("q", [""])[0]
        results = ""
        if term.lower() == "diabetes":
            results = '<li><a href="/topics/diabetes">Diabetes</a></li>'
        return 200, render(
            "Search",
            f"""<span class="query-echo" style="display:none">{html.escape(term)}</span>
            <ul id="results">{results}</ul>""",
        )
    if path == "/topics/diabetes":
        return 200, render(
            "Diabetes",
            f"""<h1>Diabetes</h1>
            <div role="button" tabindex="0" aria-label="Navigate to {TOPIC}"
                 onclick="location.href='{TOPIC_PATH}'">Principles of management</div>""",
        )
    if path == TOPIC_PATH:
        args = html.escape(json.dumps(TOPIC) + ", " + json.dumps(TOPIC_PATH))
        return 200, render(
            TOPIC,
            f"""<h1>{TOPIC}</h1>
            <button aria-label="Favourite {TOPIC}" onclick="toggleFavourite({args})">Star</button>""",
        )
    if path == "/menu/saved":
        return 200, render(
            "Saved",
            """<div role="button" tabindex="0" aria-label="Navigate to My favourites page"
                 onclick="location.href='/favourites'">My favourites</div>""",
        )
    if path == "/favourites":
        return 200, render(
            "My favourites",
            '<h1>My favourites</h1><div role="tablist" id="favourites-tabs"></div>'
            '<ul id="favourites-list"></ul>',
        )
    return 404, render("Not found", "<h1>Not found</h1>")


async def serve_site(route, request) -> None:
    url = urlparse(request.url)
    status, body = page_for(url.path, parse_qs(url.query))
    await route.fulfill(status=status, content_type="text/html", body=body)


@asynccontextmanager
async def fake_site_session(config: SuiteConfig):
    """Session factory for the runner: a real browser routed to the fake site."""
    async with BrowserController(config.browser) as browser:
        await browser.context.route(f"{SITE}/**", serve_site)
        yield BrowserSession(browser.current_page, base_url=config.browser.base_url)


@pytest.fixture
def suite_config() -> SuiteConfig:
    return SuiteConfig(
        browser=BrowserConfig(headless=True, base_url=SITE),
        deadlines=Deadlines.uniform(5000, settle_ms=100),
    )


@pytest_asyncio.fixture
async def session(suite_config):
    async with fake_site_session(suite_config) as session:
        yield session


@pytest.fixture
def ctx(session, suite_config) -> ScenarioContext:
    return ScenarioContext(session, suite_config)


def broken_toggle_session(mode: str):
    """
    Session factory for a site whose star button misbehaves.

    ``inert`` never saves a favourite; ``add-only`` saves but never removes.
    """

    @asynccontextmanager
    async def factory(config: SuiteConfig):
        async with fake_site_session(config) as session:
            await session.page.context.add_init_script(f"window.brokenToggle = '{mode}';")
            yield session

    return factory
