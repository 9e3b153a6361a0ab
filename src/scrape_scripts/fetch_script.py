import codecs
import logging
from typing import Optional

import requests
from lxml import etree

from scrape_scripts.config import ScraperConfig
from scrape_scripts.errors import (
    ParseError,
    TransportError,
    UnexpectedMatchCountError,
    UnexpectedStatusError,
)
from scrape_scripts.helpers import format_title_for_url
from scrape_scripts.models import DocumentNode
from scrape_scripts.tree import element_with_children, find_all, parse_document

logger = logging.getLogger(__name__)


def build_script_url(title: str, endpoint_template: str) -> str:
    return endpoint_template.format(title=format_title_for_url(title))


def declared_charset(content_type: Optional[str]) -> Optional[str]:
    """Return the charset parameter of a Content-Type header, if any."""
    for param in (content_type or "").split(";")[1:]:
        name, _, value = param.strip().partition("=")
        if name.strip().lower() == "charset" and value.strip():
            return value.strip().strip("\"'")
    return None


def body_encoding(content_type: Optional[str], content: bytes) -> Optional[str]:
    """
    Pick the encoding to parse a response body with.

    A known charset from the header wins. Otherwise a body that decodes as
    UTF-8 is UTF-8. Anything else is left to the parser, which reads the
    page's meta charset.
    """
    charset = declared_charset(content_type)
    if charset:
        try:
            codecs.lookup(charset)
            return charset
        except LookupError:
            logger.debug("Ignoring unknown charset %r", charset)
    try:
        content.decode("utf-8")
    except UnicodeDecodeError:
        return None
    return "utf-8"


def fetch_script(title: str, config: ScraperConfig) -> DocumentNode:
    """
    Fetch the script page for title and return its content block.

    One request, no retries. The site answers unknown titles with an empty
    container, so only a container holding at least one node counts, and
    exactly one such container must be present.

    Raises:
        ScrapeError: One of TransportError, UnexpectedStatusError, ParseError
            or UnexpectedMatchCountError.
    """
    url = build_script_url(title, config.endpoint_template)
    logger.debug("Fetching %s", url)

    try:
        response = requests.get(
            url,
            timeout=config.request_timeout,
            headers={"User-Agent": config.user_agent},
        )
    except requests.RequestException as exc:
        raise TransportError(str(exc)) from exc

    if response.status_code != 200:
        raise UnexpectedStatusError(response.status_code)

    try:
        encoding = body_encoding(response.headers.get("Content-Type"), response.content)
        root = parse_document(response.content, encoding)
    except (etree.LxmlError, ValueError) as exc:
        raise ParseError(f"could not parse document: {exc}") from exc

    nodes = find_all(root, element_with_children(config.container_tag))
    if len(nodes) != 1:
        raise UnexpectedMatchCountError(len(nodes))
    return nodes[0]
