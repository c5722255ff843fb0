from collections.abc import Callable
from typing import TypeVar

from django_widgets.exceptions import AlreadyRegistered, NotRegistered
from django_widgets.widget import Widget

TWidget = TypeVar("TWidget", bound=type[Widget])


class WidgetCollection:
    """
    Flat collection of widgets that can be rendered from any template
    with `{% widget_global %}`, regardless of which view or widget is rendering.

    Unlike the widgets declared on a [`View`](../api#django_widgets.View) or
    [`Widget`](../api#django_widgets.Widget), these are not scoped to the
    innermost renderer.

    The default collection is available as `django_widgets.global_widgets`.

    **Example:**

    ```python
    from django_widgets import global_widgets

    global_widgets.register(LanguageSwitcherWidget)
    global_widgets.register(CurrencySwitcherWidget, name="currency")

    global_widgets.has_widget("currency")  # True
    ```
    """

    def __init__(self) -> None:
        self._registry: dict[str, type[Widget]] = {}

    def register(self, widget_cls: type[Widget], name: str | None = None) -> None:
        """
        Register a widget under the given name. Defaults to
        [`Widget.get_name()`](../api#django_widgets.Widget.get_name).

        Raises `AlreadyRegistered` if the name is taken by a different widget class.
        """
        name = name or widget_cls.get_name()
        existing = self._registry.get(name)
        if existing is not None and existing is not widget_cls:
            raise AlreadyRegistered(
                f'The widget name "{name}" has already been registered with {existing.__qualname__}.'
            )
        self._registry[name] = widget_cls

    def unregister(self, name: str) -> None:
        """Remove the widget registered under the name. Raises `NotRegistered` if there is none."""
        if name not in self._registry:
            raise NotRegistered(f'The widget "{name}" is not registered as a global widget')
        del self._registry[name]

    def has_widget(self, name: str) -> bool:
        return name in self._registry

    def get_widget_class(self, name: str) -> type[Widget]:
        if name not in self._registry:
            raise NotRegistered(f'The widget "{name}" is not registered as a global widget')
        return self._registry[name]

    def all(self) -> dict[str, type[Widget]]:
        return self._registry.copy()

    def clear(self) -> None:
        self._registry = {}


global_widgets = WidgetCollection()
"""The default [`WidgetCollection`](../api#django_widgets.WidgetCollection)."""


def register(name: str | None = None, collection: WidgetCollection | None = None) -> Callable[[TWidget], TWidget]:
    """
    Class decorator that registers a widget in the global widget collection.

    ```python
    from django_widgets import Widget, register

    @register("language-switcher")
    class LanguageSwitcherWidget(Widget):
        template_name = "widgets/language_switcher.html"
    ```
    """
    target = collection if collection is not None else global_widgets

    def decorator(widget_cls: TWidget) -> TWidget:
        target.register(widget_cls, name=name)
        return widget_cls

    return decorator
