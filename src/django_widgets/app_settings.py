from collections.abc import Sequence
from typing import Any, NamedTuple

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured


class WidgetsSettings(NamedTuple):
    """
    Settings available for django_widgets.

    **Example:**

    ```python
    WIDGETS = WidgetsSettings(
        libraries=["myshop.widgets"],
        global_widgets=["myshop.widgets.LanguageSwitcherWidget"],
    )
    ```

    A plain dict with the same keys works too.
    """

    libraries: Sequence[str] | None = None
    """
    Modules to import when Django starts, e.g. modules that use
    [`@register`](../api#django_widgets.register) to add global widgets.
    """

    global_widgets: Sequence[str] | None = None
    """Import paths of widget classes to register in the global widget collection."""

    widget_variable: str | None = None
    """
    Name of the template variable that holds the widget being rendered.

    Defaults to `"widget"`.
    """

    view_variable: str | None = None
    """
    Name of the template variable that holds the page view being rendered.

    Defaults to `"view"`.
    """


defaults = WidgetsSettings(
    libraries=[],
    global_widgets=[],
    widget_variable="widget",
    view_variable="view",
)


class InternalSettings:
    @property
    def _settings(self) -> WidgetsSettings:
        data: Any = getattr(settings, "WIDGETS", {})
        if isinstance(data, WidgetsSettings):
            return data
        return WidgetsSettings(**data)

    def _get(self, key: str) -> Any:
        value = getattr(self._settings, key)
        return getattr(defaults, key) if value is None else value

    @property
    def LIBRARIES(self) -> list[str]:
        return list(self._get("libraries"))

    @property
    def GLOBAL_WIDGETS(self) -> list[str]:
        return list(self._get("global_widgets"))

    @property
    def WIDGET_VARIABLE(self) -> str:
        return self._get_variable_name("widget_variable")

    @property
    def VIEW_VARIABLE(self) -> str:
        return self._get_variable_name("view_variable")

    # NOTE: Django templates do not allow variables that start with an underscore.
    def _get_variable_name(self, key: str) -> str:
        name = self._get(key)
        if not name or name.startswith("_"):
            raise ImproperlyConfigured(f"WIDGETS.{key} must be a non-empty name not starting with '_', got {name!r}")
        return name


app_settings = InternalSettings()
