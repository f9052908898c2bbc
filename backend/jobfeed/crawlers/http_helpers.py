from __future__ import annotations
from typing import Any

from bs4 import BeautifulSoup
import httpx


def build_client(timeout: float, user_agent: str) -> httpx.Client:
    headers = {"User-Agent": user_agent, "Accept-Language": "en-US"}
    return httpx.Client(timeout=timeout, follow_redirects=True, headers=headers)


def _get(url: str, timeout: float, user_agent: str, client: httpx.Client | None, **kwargs: Any) -> httpx.Response:
    if client is not None:
        resp = client.get(url, timeout=timeout, **kwargs)
        resp.raise_for_status()
        return resp
    with build_client(timeout, user_agent) as own:
        resp = own.get(url, **kwargs)
        resp.raise_for_status()
        return resp


def fetch_text(url: str, timeout: float, user_agent: str, client: httpx.Client | None = None) -> str:
    return _get(url, timeout, user_agent, client).text


def fetch_json(
    url: str,
    timeout: float,
    user_agent: str,
    client: httpx.Client | None = None,
    params: dict[str, Any] | None = None,
) -> Any:
    return _get(url, timeout, user_agent, client, params=params).json()


def soup_links(html: str):
    soup = BeautifulSoup(html, "html.parser")
    return soup, soup.find_all("a", href=True)
