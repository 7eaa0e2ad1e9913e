from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from django.shortcuts import resolve_url
from django.utils.safestring import SafeString

from . import conf
from .context import get_request_context
from .html import content_tag, link_to
from .matcher import is_active

ACTIVE_OPTIONS = (
    "active",
    "class_active",
    "class_inactive",
    "active_disable",
    "wrap_tag",
    "wrap_class",
)


@dataclass(frozen=True)
class ActiveLinkConfig:
    active: Any = None
    class_active: str | None = None
    class_inactive: str | None = None
    active_disable: bool = False
    wrap_tag: str | None = None
    wrap_class: str | None = None


def split_options(options: dict | None) -> tuple[ActiveLinkConfig, dict]:
    """
    Partition caller options into the active-link config and the remaining
    HTML attributes, which are passed through untouched.
    """
    active_options: dict[str, Any] = {}
    attrs: dict[str, Any] = {}
    for key, value in (options or {}).items():
        if key in ACTIVE_OPTIONS:
            active_options[key] = value
        else:
            attrs[key] = value
    return ActiveLinkConfig(**active_options), attrs


def _class_for(active: bool, config: ActiveLinkConfig) -> str:
    if active:
        return config.class_active if config.class_active is not None else conf.class_active()
    if config.class_inactive is not None:
        return str(config.class_inactive)
    return conf.class_inactive()


def is_active_link(request, url: str, condition=None) -> bool:
    return is_active(url, condition, get_request_context(request))


def active_link_to_class(request, url: str, **options) -> str:
    """
    Return ``class_active`` (default ``"active"``) when ``url`` is active,
    otherwise ``class_inactive`` (default ``""``).
    """
    config, _attrs = split_options(options)
    return _class_for(is_active_link(request, url, config.active), config)


def active_link_to(request, label, target, *url_args, **options) -> SafeString:
    """
    Render a link to ``target`` marked up according to whether it is active.

    ``target`` is anything ``resolve_url`` accepts. ``label`` may be a
    callable producing the link content. ``css_class`` is an alias of
    ``class``; every key outside ``ACTIVE_OPTIONS`` becomes an attribute.

    Example:
        active_link_to(request, "Users", "users:list", active="exclusive", wrap_tag="li")
    """
    url = resolve_url(target, *url_args)
    content = label() if callable(label) else label
    config, attrs = split_options(options)

    css_class = attrs.pop("class", None)
    alias = attrs.pop("css_class", None)
    if css_class is None:
        css_class = alias

    active = is_active_link(request, url, config.active)
    active_class = _class_for(active, config)
    if active and "aria-current" not in attrs:
        attrs["aria-current"] = conf.aria_current()
    attrs["class"] = f"{css_class or ''} {active_class}".strip()

    if config.active_disable is True and active:
        element = content_tag("span", content, attrs)
    else:
        element = link_to(content, url, attrs)

    if config.wrap_tag:
        wrap_attrs = {"class": f"{config.wrap_class or ''} {active_class}".strip()}
        return content_tag(config.wrap_tag, element, wrap_attrs)
    return element
