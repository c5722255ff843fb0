from pathlib import Path
from typing import Any

import django
from django.conf import settings

TESTS_DIR = Path(__file__).resolve().parent


def setup_test_config(
    widgets: dict[str, Any] | None = None,
    extra_settings: dict[str, Any] | None = None,
) -> None:
    if settings.configured:
        return

    default_settings = {
        "DEBUG": False,
        "SECRET_KEY": "django-widgets-tests",
        "ALLOWED_HOSTS": ["*"],
        "INSTALLED_APPS": ("django_widgets",),
        "ROOT_URLCONF": "tests.urls",
        "MIDDLEWARE": ["django_widgets.middleware.WidgetRegistryMiddleware"],
        "TEMPLATES": [
            {
                "BACKEND": "django.template.backends.django.DjangoTemplates",
                "DIRS": [TESTS_DIR / "templates"],
                "OPTIONS": {
                    "builtins": ["django_widgets.templatetags.widget_tags"],
                    "context_processors": ["django.template.context_processors.request"],
                },
            }
        ],
        "DATABASES": {
            "default": {
                "ENGINE": "django.db.backends.sqlite3",
                "NAME": ":memory:",
            }
        },
        "WIDGETS": {
            "libraries": ["tests.library_widgets"],
            "global_widgets": ["tests.widgets.LanguageSwitcherWidget"],
            **(widgets or {}),
        },
    }

    settings.configure(
        **{
            **default_settings,
            **(extra_settings or {}),
        }
    )

    django.setup()
