"""Check definitions and the ordered registry of SEO checks.

Every check belongs to one reporting group and carries exactly one detection
strategy, expressed by its type:

- PatternCheck: regex searched in the raw content, first match wins
- PathCheck: predicate over the file path alone, first match wins
- PredicateCheck: predicate over (path, content), first match wins, or with
  require_all=True every scanned file has to satisfy it
- AggregateCheck: predicate flagging a file as offending; every file is
  inspected and all offending files are collected

Adding a check only means adding a declaration to CHECKS.
"""

import re
from dataclasses import dataclass
from pathlib import PurePosixPath
from typing import Callable

from .markup import missing_alt_text

PathPredicate = Callable[[str], bool]
ContentPredicate = Callable[[str, str], bool]


@dataclass(frozen=True)
class Check:
    name: str
    group: str
    message: str


@dataclass(frozen=True)
class PatternCheck(Check):
    pattern: re.Pattern


@dataclass(frozen=True)
class PathCheck(Check):
    predicate: PathPredicate


@dataclass(frozen=True)
class PredicateCheck(Check):
    predicate: ContentPredicate
    require_all: bool = False


@dataclass(frozen=True)
class AggregateCheck(Check):
    offending: ContentPredicate


def _meta_name(name: str) -> re.Pattern:
    return re.compile(rf"""<meta\b[^>]*name=\s*['"]{re.escape(name)}['"]""", re.IGNORECASE)


def _meta_property(prop: str) -> re.Pattern:
    return re.compile(rf"""<meta\b[^>]*property=\s*['"]{re.escape(prop)}['"]""", re.IGNORECASE)


def _link_rel(rel: str) -> re.Pattern:
    return re.compile(rf"""<link\b[^>]*rel=\s*['"]{re.escape(rel)}['"]""", re.IGNORECASE)


_FRAMESET_RE = re.compile(r"<frameset\b", re.IGNORECASE)


def has_no_frameset(path: str, content: str) -> bool:
    return _FRAMESET_RE.search(content) is None


def is_robots_txt(path: str) -> bool:
    return PurePosixPath(path).name == "robots.txt"


META = "Meta-Data"
SCHEMA = "Schema.org"
SOCIAL = "Social-Media Tags"
MISC = "Misc"
IMAGES = "Images"

CHECKS: tuple[Check, ...] = (
    # --- Meta-Data ---
    PatternCheck(
        name="Doctype",
        group=META,
        message="No Doctype was found!",
        pattern=re.compile(r"<!DOCTYPE\s+html\b", re.IGNORECASE),
    ),
    PatternCheck(
        name="HTML Lang",
        group=META,
        message="No <html lang> attribute found!",
        pattern=re.compile(r"""<html\b[^>]*\slang=\s*['"][^'"]+""", re.IGNORECASE),
    ),
    PatternCheck(
        name="Title Tag",
        group=META,
        message="No <title> tag found!",
        pattern=re.compile(r"<title\b", re.IGNORECASE),
    ),
    PatternCheck(
        name="Meta Description",
        group=META,
        message='No <meta name="description"> tag found!',
        pattern=_meta_name("description"),
    ),
    PatternCheck(
        name="Meta Viewport",
        group=META,
        message='No <meta name="viewport"> tag found!',
        pattern=_meta_name("viewport"),
    ),
    PatternCheck(
        name="Meta Charset",
        group=META,
        message="No <meta charset> tag found!",
        pattern=re.compile(r"<meta\b[^>]*charset=", re.IGNORECASE),
    ),
    PatternCheck(
        name="Meta Robots",
        group=META,
        message='No <meta name="robots"> tag found!',
        pattern=_meta_name("robots"),
    ),
    PatternCheck(
        name="Canonical Link",
        group=META,
        message='No <link rel="canonical"> tag found!',
        pattern=_link_rel("canonical"),
    ),
    PatternCheck(
        name="Favicons",
        group=META,
        message="No favicon or related icons found!",
        pattern=re.compile(
            r"""<link\b[^>]*rel=\s*['"](?:icon|apple-touch-icon|shortcut icon|manifest)['"]"""
            r"""|<meta\b[^>]*name=\s*['"]msapplication-TileImage['"]""",
            re.IGNORECASE,
        ),
    ),
    # --- Schema.org ---
    PatternCheck(
        name="Inline Schema.org",
        group=SCHEMA,
        message="No itemscope+itemtype attributes found!",
        pattern=re.compile(r"<[^>]+itemscope[^>]+itemtype=", re.IGNORECASE),
    ),
    PatternCheck(
        name="JSON-LD Schema",
        group=SCHEMA,
        message='No <script type="application/ld+json"> found!',
        pattern=re.compile(
            r"""<script\b[^>]*type=\s*['"]application/ld\+json['"]""", re.IGNORECASE
        ),
    ),
    # --- Social-Media Tags ---
    PatternCheck(
        name="OG Title",
        group=SOCIAL,
        message="No Open Graph title (og:title) tag found!",
        pattern=_meta_property("og:title"),
    ),
    PatternCheck(
        name="OG Description",
        group=SOCIAL,
        message="No Open Graph description (og:description) tag found!",
        pattern=_meta_property("og:description"),
    ),
    PatternCheck(
        name="OG Image",
        group=SOCIAL,
        message="No Open Graph image (og:image) tag found!",
        pattern=_meta_property("og:image"),
    ),
    PatternCheck(
        name="Twitter Card",
        group=SOCIAL,
        message="No Twitter card (twitter:card) tag found!",
        pattern=_meta_name("twitter:card"),
    ),
    PatternCheck(
        name="Twitter Title",
        group=SOCIAL,
        message="No Twitter title (twitter:title) tag found!",
        pattern=_meta_name("twitter:title"),
    ),
    PatternCheck(
        name="Twitter Description",
        group=SOCIAL,
        message="No Twitter description (twitter:description) tag found!",
        pattern=_meta_name("twitter:description"),
    ),
    # --- Misc ---
    PredicateCheck(
        name="Frameset",
        group=MISC,
        message="Framesets are present!",
        predicate=has_no_frameset,
        require_all=True,
    ),
    PathCheck(
        name="Robots.txt",
        group=MISC,
        message="No robots.txt found!",
        predicate=is_robots_txt,
    ),
    # --- Images ---
    AggregateCheck(
        name="Alt-Tags",
        group=IMAGES,
        message="Missing alt text in: {file}",
        offending=missing_alt_text,
    ),
)
