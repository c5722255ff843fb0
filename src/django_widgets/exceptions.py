class AlreadyRegistered(Exception):
    """
    Raised when you try to register a widget under a name that's already taken
    by a different widget class in the [`WidgetCollection`](../api#django_widgets.WidgetCollection).
    """


class NotRegistered(Exception):
    """
    Raised when you try to access a widget that's NOT registered,
    either in a widget container or in the [`WidgetCollection`](../api#django_widgets.WidgetCollection).
    """


class EmptyWidgetRegistry(Exception):
    """
    Raised when a widget is rendered by name, but there is no page view or widget
    that is currently rendering.

    Widget names are resolved against the innermost rendering view or widget,
    so `{% widget %}` and `{% widget_block %}` can be used only from within templates
    rendered by [`render_view()`](../api#django_widgets.render_view) or by another widget.
    """


class BlockNotFound(LookupError):
    """Raised when `{% widget_block %}` refers to a block that the widget template does not define."""


class WidgetRenderError(Exception):
    """
    Raised when building or rendering a widget fails.

    The original error is available as `__cause__`, and the name under which
    the widget was requested as `name`.
    """

    def __init__(self, name: str, cause: BaseException) -> None:
        self.name = name
        super().__init__(f'Something went wrong in widget "{name}": {cause}')
