"""Minimal structural queries over raw markup.

Only "iterate elements with a given tag, read one attribute" is exposed so
the parser behind it can be swapped without touching the checks.
"""

import logging
from typing import Iterator, Optional, Protocol

from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)


class MarkupParser(Protocol):
    def attribute_values(
        self, content: str, tag: str, attribute: str
    ) -> Iterator[Optional[str]]:
        """Yield the attribute value of every `tag` element, or None when absent."""
        ...


class SoupParser:
    """MarkupParser backed by BeautifulSoup with the lxml parser."""

    def __init__(self, features: str = "lxml"):
        self.features = features

    def attribute_values(
        self, content: str, tag: str, attribute: str
    ) -> Iterator[Optional[str]]:
        try:
            soup = BeautifulSoup(content, self.features)
            elements = soup.find_all(tag)
        except Exception as e:
            # Unparsable content contributes zero elements
            logger.warning(f"Could not parse markup: {e}")
            return

        for element in elements:
            value = element.get(attribute)
            if isinstance(value, list):
                value = " ".join(value)
            yield value


DEFAULT_PARSER = SoupParser()


def missing_alt_text(path: str, content: str, parser: MarkupParser = DEFAULT_PARSER) -> bool:
    """Return True if any <img> in the content has no alt attribute or an empty one."""
    if "<img" not in content.lower():
        return False
    return any(alt is None or alt == "" for alt in parser.attribute_values(content, "img", "alt"))
