from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from django.utils.encoding import escape_uri_path

_REQUEST_ATTR = "_active_link_context"


class MatchCache:
    """Memoized match results for one request, keyed by ``(url, condition)``."""

    def __init__(self):
        self._results: dict[tuple, bool] = {}

    def __contains__(self, key) -> bool:
        return key in self._results

    def __len__(self) -> int:
        return len(self._results)

    def get(self, key):
        return self._results.get(key)

    def set(self, key, value: bool) -> bool:
        self._results[key] = value
        return value


@dataclass(frozen=True)
class RequestContext:
    """
    Read-only snapshot of the request data the matcher looks at.

    ``path`` keeps its percent-escapes so it can be decoded exactly once;
    ``full_path`` is the escaped path plus query string.
    """

    path: str = ""
    full_path: str = ""
    controller: str | None = None
    action: str | None = None
    params: Mapping[str, object] = field(default_factory=dict)
    cache: MatchCache = field(default_factory=MatchCache, compare=False, repr=False)

    @classmethod
    def from_request(cls, request) -> "RequestContext":
        match = getattr(request, "resolver_match", None)
        params: dict[str, object] = dict(request.GET.items())
        controller = action = None
        if match is not None:
            params.update(match.kwargs)
            controller = match.namespace or None
            action = match.url_name
        return cls(
            path=escape_uri_path(request.path),
            full_path=request.get_full_path(),
            controller=controller,
            action=action,
            params=params,
        )


def get_request_context(request) -> RequestContext:
    """
    Return the ``RequestContext`` bound to ``request``, creating it on first use.

    The snapshot is only bound once URL resolution has set
    ``request.resolver_match``; before that each call gets a fresh, unbound
    snapshot. Accepts a ready ``RequestContext`` as-is; ``None`` yields a
    fresh empty one.
    """
    if isinstance(request, RequestContext):
        return request
    if request is None:
        return RequestContext()
    ctx = getattr(request, _REQUEST_ATTR, None)
    if ctx is None:
        ctx = RequestContext.from_request(request)
        if getattr(request, "resolver_match", None) is not None:
            setattr(request, _REQUEST_ATTR, ctx)
    return ctx
