"""Fetch a source (web page or local text file) and reduce it to plain text."""

import logging
import os
import re

import requests
from bs4 import BeautifulSoup
from playwright.sync_api import sync_playwright

from config import Config

logger = logging.getLogger(__name__)

CONTENT_API_URL = "https://api.getcontentapi.com/api/v1/web/extract"
USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/124.0.0.0 Safari/537.36"
)

# Elements that never carry page copy
STRIP_TAGS = ["script", "style", "noscript", "nav", "footer", "header", "iframe"]

_WHITESPACE = re.compile(r"\s+")


def collapse_whitespace(text: str) -> str:
    return _WHITESPACE.sub(" ", text or "").strip()


def clean_html(html: str) -> str:
    soup = BeautifulSoup(html, "html.parser")
    for tag in soup(STRIP_TAGS):
        tag.decompose()
    root = soup.body or soup
    return collapse_whitespace(root.get_text(separator=" "))


def read_local_file(path: str) -> str | None:
    file_path = os.path.abspath(os.path.join(os.getcwd(), path))
    logger.info("Reading local file from: %s", file_path)
    try:
        with open(file_path, "r", encoding="utf-8", errors="replace") as f:
            return f.read()
    except OSError as e:
        logger.error("Error reading file %s: %s", file_path, e)
        return None


def fetch_with_content_api(url: str) -> str | None:
    """Extract page text through ContentAPI. Returns None when it yields nothing."""
    try:
        resp = requests.get(
            CONTENT_API_URL,
            params={"url": url, "render_js": "true"},
            headers={"Authorization": f"Bearer {Config.CONTENT_API_KEY}"},
            timeout=Config.HTTP_TIMEOUT,
        )
        resp.raise_for_status()
        content = (resp.json() or {}).get("content")
    except (requests.RequestException, ValueError) as e:
        logger.warning("ContentAPI failed for %s, falling back to local scraping: %s", url, e)
        return None

    if not content:
        return None
    logger.info("Used ContentAPI for %s", url)
    return collapse_whitespace(content)


def fetch_rendered_html(url: str) -> str:
    with sync_playwright() as p:
        browser = p.chromium.launch()
        page = browser.new_page(ignore_https_errors=True)

        # Block heavy/irrelevant resources to speed up loads
        def _block_route(route, request):
            if request.resource_type in {"image", "media", "font", "stylesheet"}:
                return route.abort()
            return route.continue_()

        page.route("**/*", _block_route)
        try:
            page.goto(url, wait_until="domcontentloaded", timeout=Config.HTTP_TIMEOUT * 1000)
            html = page.content()
        finally:
            browser.close()
    return html


def fetch_html(url: str) -> str:
    if Config.SCRAPE_RENDER_JS:
        return fetch_rendered_html(url)
    resp = requests.get(url, headers={"User-Agent": USER_AGENT}, timeout=Config.HTTP_TIMEOUT)
    resp.raise_for_status()
    return resp.text


def scrape_source(source: str) -> str | None:
    """
    Return the plain text of a source, or None if it could not be read.

    Sources that are not http(s) URLs are treated as local file paths.
    """
    if not source.startswith("http"):
        return read_local_file(source)

    logger.info("Scraping %s...", source)

    if Config.CONTENT_API_KEY:
        text = fetch_with_content_api(source)
        if text:
            return text

    try:
        html = fetch_html(source)
    except Exception as e:
        # requests and playwright errors alike
        logger.error("Error scraping %s: %s", source, e)
        return None

    return clean_html(html)
