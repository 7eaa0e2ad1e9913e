from __future__ import annotations

import re

from django.forms.utils import flatatt
from django.utils.html import format_html
from django.utils.safestring import SafeString

_TAG_NAME = re.compile(r"^[A-Za-z][A-Za-z0-9-]*$")


def _clean_attrs(attrs: dict | None) -> dict:
    # "" is rendered as-is; False is left to flatatt, which omits it.
    return {k: v for k, v in (attrs or {}).items() if v is not None}


def content_tag(tag: str, content, attrs: dict | None = None) -> SafeString:
    """Render ``<tag attrs>content</tag>``; ``content`` is escaped unless safe."""
    tag = str(tag)
    if not _TAG_NAME.match(tag):
        raise ValueError(f"Invalid tag name: {tag!r}")
    return format_html("<{0}{1}>{2}</{0}>", tag, flatatt(_clean_attrs(attrs)), content)


def link_to(content, url: str, attrs: dict | None = None) -> SafeString:
    return format_html('<a href="{}"{}>{}</a>', url, flatatt(_clean_attrs(attrs)), content)
