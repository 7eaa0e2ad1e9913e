from django.apps import AppConfig


class ActiveLinksConfig(AppConfig):
    name = "active_links"
    verbose_name = "Active links"

    def ready(self) -> None:
        """Validate the ACTIVE_LINK_* settings at startup."""
        from . import conf

        for name in conf.DEFAULTS:
            conf.get_setting(name)
