from collections.abc import Generator, Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token

from django_widgets.exceptions import EmptyWidgetRegistry
from django_widgets.util.logger import TraceAction, trace_view_msg, trace_widget_msg
from django_widgets.widget import RenderingContext, View, Widget


class ActiveContextRegistry:
    """
    Stack of the page views and widgets that are currently rendering.

    The last added entry is the innermost renderer. Widget names used in a template
    are resolved against it.

    Entries are added right before their template is rendered and removed
    right after. Use [`activate()`](../api#django_widgets.ActiveContextRegistry.activate)
    so that an entry is removed also when rendering fails.
    """

    def __init__(self) -> None:
        self._stack: list[RenderingContext] = []

    def add(self, context: RenderingContext) -> None:
        self._stack.append(context)
        _trace(context, "PUSH", len(self._stack))

    def get_last_added(self) -> RenderingContext | None:
        if not self._stack:
            return None
        return self._stack[-1]

    def remove_last_added(self) -> None:
        if not self._stack:
            raise EmptyWidgetRegistry("Cannot remove the last added entry, the widget registry is empty.")
        context = self._stack.pop()
        _trace(context, "POP", len(self._stack))

    def get_last_view(self) -> View | None:
        for context in reversed(self._stack):
            if isinstance(context, View):
                return context
        return None

    @contextmanager
    def activate(self, context: RenderingContext) -> Generator[RenderingContext, None, None]:
        """
        Mark given view or widget as rendering for the duration of the `with` block.

        ```python
        with registry.activate(widget):
            html = template.render(...)
        ```
        """
        self.add(context)
        try:
            yield context
        finally:
            self.remove_last_added()

    def __len__(self) -> int:
        return len(self._stack)

    def __iter__(self) -> Iterator[RenderingContext]:
        return iter(self._stack)

    def __repr__(self) -> str:
        return f"<ActiveContextRegistry {self._stack!r}>"


def _trace(context: RenderingContext, action: TraceAction, depth: int) -> None:
    if isinstance(context, Widget):
        trace_widget_msg(action, context.get_name(), depth=depth)
    else:
        trace_view_msg(action, context.get_template_name(), depth=depth)


# The registry is request-scoped. Each request (thread or asyncio task) sees its own
# registry, see `WidgetRegistryMiddleware`.
_active_registry: ContextVar[ActiveContextRegistry | None] = ContextVar(
    "django_widgets_active_registry",
    default=None,
)


def get_active_registry() -> ActiveContextRegistry:
    registry = _active_registry.get()
    if registry is None:
        registry = ActiveContextRegistry()
        _active_registry.set(registry)
    return registry


def set_active_registry(registry: ActiveContextRegistry | None) -> Token:
    return _active_registry.set(registry)


def reset_active_registry(token: Token) -> None:
    _active_registry.reset(token)
