from __future__ import annotations

from django.views.generic import TemplateView


class NavDemoView(TemplateView):
    """Renders the demo navigation; every route shares the one template."""

    template_name = "nav_demo.html"
