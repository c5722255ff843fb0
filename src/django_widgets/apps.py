from django.apps import AppConfig
from django.core.exceptions import ImproperlyConfigured
from django.template import engines
from django.template.backends.django import DjangoTemplates


class WidgetsConfig(AppConfig):
    name = "django_widgets"

    def ready(self) -> None:
        from django_widgets.autodiscovery import import_libraries, register_global_widgets

        check_template_backend()

        import_libraries()
        register_global_widgets()


def check_template_backend() -> None:
    """Widgets are rendered with Django's own template engine, so it must be configured."""
    if not any(isinstance(engine, DjangoTemplates) for engine in engines.all()):
        raise ImproperlyConfigured(
            "django_widgets requires the 'django.template.backends.django.DjangoTemplates' "
            "backend to be configured in TEMPLATES."
        )
