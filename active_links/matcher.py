from __future__ import annotations

from urllib.parse import unquote_to_bytes

from .conditions import (
    ControllerAction,
    FieldEquality,
    MatchCondition,
    Mode,
    Pattern,
    coerce_condition,
    stringify,
)
from .context import RequestContext


def _url_path(url: str) -> str:
    return url.split("#", 1)[0].split("?", 1)[0]


def _path_matches(url: str, request_path: str, *, exclusive: bool) -> bool:
    # Compare decoded bytes; decoded paths need not be valid UTF-8.
    url_bytes = unquote_to_bytes(_url_path(url))
    request_bytes = unquote_to_bytes(request_path)
    if url_bytes == request_bytes:
        return True
    if exclusive:
        return False
    prefix = url_bytes if url_bytes.endswith(b"/") else url_bytes + b"/"
    return request_bytes.startswith(prefix)


def _controller_action_matches(condition: ControllerAction, ctx: RequestContext) -> bool:
    for controllers, actions in condition.pairs:
        if controllers and ctx.controller not in controllers:
            continue
        if actions and ctx.action not in actions:
            continue
        return True
    return False


def _fields_match(condition: FieldEquality, ctx: RequestContext) -> bool:
    for key, expected in condition.fields:
        if stringify(ctx.params.get(key)) != expected:
            return False
    return True


def _evaluate(url: str, condition: MatchCondition, ctx: RequestContext) -> bool:
    if isinstance(condition, bool):
        return condition
    if condition is Mode.EXACT:
        return ctx.full_path == url
    if isinstance(condition, Pattern):
        return condition.regex.search(ctx.full_path) is not None
    if isinstance(condition, ControllerAction):
        return _controller_action_matches(condition, ctx)
    if isinstance(condition, FieldEquality):
        return _fields_match(condition, ctx)
    return _path_matches(url, ctx.path, exclusive=condition is Mode.EXCLUSIVE)


def is_active(url: str, condition=None, ctx: RequestContext | None = None) -> bool:
    """
    Return whether ``url`` is active for ``ctx`` under ``condition``.

    ``condition`` may be any shape accepted by ``coerce_condition``. Results
    are memoized in ``ctx.cache`` for the lifetime of the context.
    """
    if ctx is None:
        ctx = RequestContext()
    condition = coerce_condition(condition)
    key = (url, condition)
    if key in ctx.cache:
        return ctx.cache.get(key)
    return ctx.cache.set(key, _evaluate(url, condition, ctx))
