from __future__ import annotations

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

DEFAULTS = {
    "ACTIVE_LINK_CLASS_ACTIVE": "active",
    "ACTIVE_LINK_CLASS_INACTIVE": "",
    "ACTIVE_LINK_ARIA_CURRENT": "page",
}


def get_setting(name: str) -> str:
    value = getattr(settings, name, DEFAULTS[name])
    if value is None:
        return DEFAULTS[name]
    if not isinstance(value, str):
        raise ImproperlyConfigured(f"{name} must be a string.")
    return value


def class_active() -> str:
    return get_setting("ACTIVE_LINK_CLASS_ACTIVE")


def class_inactive() -> str:
    return get_setting("ACTIVE_LINK_CLASS_INACTIVE")


def aria_current() -> str:
    return get_setting("ACTIVE_LINK_ARIA_CURRENT")
