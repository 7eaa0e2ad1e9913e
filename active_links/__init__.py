"""Active navigation links for Django templates and views."""

from .conditions import (  # noqa: F401
    ControllerAction,
    FieldEquality,
    MatchCondition,
    Mode,
    Pattern,
    coerce_condition,
)
from .context import MatchCache, RequestContext, get_request_context  # noqa: F401
from .matcher import is_active  # noqa: F401
from .rendering import (  # noqa: F401
    ACTIVE_OPTIONS,
    ActiveLinkConfig,
    active_link_to,
    active_link_to_class,
    is_active_link,
    split_options,
)

__version__ = "0.1.0"
