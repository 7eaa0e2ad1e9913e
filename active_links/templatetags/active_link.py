from __future__ import annotations

from django import template
from django.shortcuts import resolve_url
from django.template.base import token_kwargs

from active_links.conditions import Pattern
from active_links.rendering import (
    ACTIVE_OPTIONS,
    active_link_to as _active_link_to,
    active_link_to_class,
    is_active_link as _is_active_link,
)

register = template.Library()

_KEEP_UNDERSCORE = set(ACTIVE_OPTIONS) | {"css_class"}


def _html_options(options: dict) -> dict:
    # Template kwargs cannot contain "-": data_toggle -> data-toggle.
    return {
        (key if key in _KEEP_UNDERSCORE else key.replace("_", "-")): value
        for key, value in options.items()
    }


@register.simple_tag(takes_context=True)
def active_link_to(context, label, target, *url_args, **options):
    """
    Example:
        {% active_link_to "Users" "users:list" active="exclusive" wrap_tag="li" %}
    """
    return _active_link_to(context.get("request"), label, target, *url_args, **_html_options(options))


@register.simple_tag(takes_context=True)
def active_link_class(context, target, *url_args, **options):
    """
    Example:
        <li class="nav-item {% active_link_class '/users/' class_inactive='muted' %}">
    """
    url = resolve_url(target, *url_args)
    return active_link_to_class(context.get("request"), url, **options)


@register.simple_tag(takes_context=True)
def is_active_link(context, target, *url_args, active=None):
    """
    Example:
        {% is_active_link "home" active="exclusive" as on_home %}
    """
    return _is_active_link(context.get("request"), resolve_url(target, *url_args), active)


@register.simple_tag(takes_context=True)
def active_nav(context, *targets, css_class: str | None = None):
    """
    Return ``css_class`` (default: the configured active class) when the
    current path is at or below any supplied target.

    Example:
        class="link-classes {% active_nav '/users/' '/admin/' %}"
    """
    request = context.get("request")
    if not request:
        return ""
    for target in targets:
        if not target:
            continue
        url = resolve_url(target)
        if _is_active_link(request, url):
            return active_link_to_class(request, url, class_active=css_class)
    return ""


@register.filter
def active_pattern(value):
    """Compile a regex for the ``active`` option: ``active=pattern|active_pattern``."""
    if isinstance(value, Pattern):
        return value
    return Pattern.compile(str(value))


class ActiveLinkNode(template.Node):
    def __init__(self, target, url_args, options, nodelist):
        self.target = target
        self.url_args = url_args
        self.options = options
        self.nodelist = nodelist

    def render(self, context):
        target = self.target.resolve(context)
        url_args = [arg.resolve(context) for arg in self.url_args]
        options = {key: value.resolve(context) for key, value in self.options.items()}
        return _active_link_to(
            context.get("request"),
            lambda: self.nodelist.render(context),
            target,
            *url_args,
            **_html_options(options),
        )


@register.tag("active_link")
def do_active_link(parser, token):
    """
    Block form of ``active_link_to``; the enclosed template is the link content.

    Example:
        {% active_link "backoffice:reports" wrap_tag="li" %}<i class="chart"></i> Reports{% endactive_link %}
    """
    bits = token.split_contents()
    tag_name = bits.pop(0)
    if not bits:
        raise template.TemplateSyntaxError(f"'{tag_name}' requires a link target.")
    target = parser.compile_filter(bits.pop(0))
    url_args = []
    options = {}
    for bit in bits:
        kwarg = token_kwargs([bit], parser)
        if kwarg:
            options.update(kwarg)
        elif options:
            raise template.TemplateSyntaxError(
                f"'{tag_name}' received a positional argument after keyword arguments."
            )
        else:
            url_args.append(parser.compile_filter(bit))
    nodelist = parser.parse((f"end{tag_name}",))
    parser.delete_first_token()
    return ActiveLinkNode(target, url_args, options, nodelist)
