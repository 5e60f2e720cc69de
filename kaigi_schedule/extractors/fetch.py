"""HTTP fetcher: httpx with retries, parsed into a BeautifulSoup document.

The schedule site is static HTML, so a single httpx GET per page is enough.
Failures surface as FetchError; callers decide whether they are fatal.
"""

import asyncio
from typing import Optional

import httpx
from bs4 import BeautifulSoup
from rich.console import Console

from kaigi_schedule.errors import FetchError

console = Console()

USER_AGENT = "Mozilla/5.0 (X11; Linux x86_64; rv:134.0) Gecko/20100101 Firefox/134.0"

HEADERS = {
    "User-Agent": USER_AGENT,
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.9,ja;q=0.8",
}

DEFAULT_TIMEOUT = 30.0
DEFAULT_RETRIES = 3


async def fetch_html(
    url: str,
    client: Optional[httpx.AsyncClient] = None,
    timeout: float = DEFAULT_TIMEOUT,
    retries: int = DEFAULT_RETRIES,
) -> str:
    """Fetch raw HTML, retrying with backoff. Raises FetchError on final failure."""
    last_error = "unknown"
    last_status = None

    for attempt in range(retries):
        try:
            if client is not None:
                response = await client.get(url, headers=HEADERS, timeout=timeout)
            else:
                async with httpx.AsyncClient(timeout=timeout, follow_redirects=True) as own_client:
                    response = await own_client.get(url, headers=HEADERS)
            last_status = response.status_code
            response.raise_for_status()
            return response.text

        except httpx.TimeoutException:
            last_error = "timeout"
        except httpx.HTTPStatusError as e:
            last_status = e.response.status_code
            last_error = str(e.response.status_code)
            if e.response.status_code in (403, 429):
                await asyncio.sleep(2 ** attempt)
        except httpx.ConnectError:
            last_error = "connection"
        except httpx.HTTPError as e:
            last_error = type(e).__name__.lower()

        if attempt < retries - 1:
            await asyncio.sleep(0.5 * (2 ** attempt))

    console.print(f"[dim]httpx failed for {url}: {last_error}[/dim]")
    raise FetchError(url, last_error, status=last_status)


def parse_html(html: str, url: str = "") -> BeautifulSoup:
    """Parse HTML into a navigable tree. Empty or unparseable input is a FetchError."""
    if not html or not html.strip():
        raise FetchError(url, "empty")
    try:
        document = BeautifulSoup(html, "html.parser")
    except Exception as e:
        raise FetchError(url, f"parse:{type(e).__name__}") from e
    if document.find() is None:
        raise FetchError(url, "not-html")
    return document


async def fetch_document(
    url: str,
    client: Optional[httpx.AsyncClient] = None,
    timeout: float = DEFAULT_TIMEOUT,
    retries: int = DEFAULT_RETRIES,
) -> BeautifulSoup:
    """Fetch a page and return it as a BeautifulSoup document.

    Args:
        url: Page to fetch
        client: Shared client to reuse (one is created per call otherwise)
        timeout: Request timeout in seconds
        retries: Number of attempts before giving up

    Raises:
        FetchError: network failure, timeout, non-2xx status, or a body
            that does not parse as HTML
    """
    html = await fetch_html(url, client=client, timeout=timeout, retries=retries)
    return parse_html(html, url)
