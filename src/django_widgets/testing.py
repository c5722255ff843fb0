import functools
import inspect
from collections.abc import Callable
from typing import Any, TypeVar, overload

from django.test import override_settings

from django_widgets.app_settings import WidgetsSettings
from django_widgets.collection import global_widgets
from django_widgets.registry import ActiveContextRegistry, reset_active_registry, set_active_registry

T = TypeVar("T", bound=Callable | type)


@overload
def widgets_test(_fn: T) -> T: ...  # noqa: E704


@overload
def widgets_test(
    *,
    django_settings: dict[str, Any] | None = None,
    widgets_settings: dict[str, Any] | WidgetsSettings | None = None,
) -> Callable[[T], T]: ...  # noqa: E704


def widgets_test(
    _fn: T | None = None,
    *,
    django_settings: dict[str, Any] | None = None,
    widgets_settings: dict[str, Any] | WidgetsSettings | None = None,
) -> T | Callable[[T], T]:
    """
    Decorator for tests that render widgets. Can decorate a test function or a test class.

    Each test:

    - Runs with an empty [`ActiveContextRegistry`](../api#django_widgets.ActiveContextRegistry).
    - Can register global widgets freely. The global collection is restored after the test.
    - Runs with the given Django settings and `WIDGETS` settings applied.

    **Example:**

    ```python
    from django_widgets.testing import widgets_test

    @widgets_test
    class TestMyWidget:
        def test_renders(self):
            ...

        @widgets_test(widgets_settings={"widget_variable": "w"})
        def test_custom_variable(self):
            ...
    ```
    """

    def decorator(target: T) -> T:
        if inspect.isclass(target):
            for attr_name, attr in list(vars(target).items()):
                if attr_name.startswith("test") and callable(attr) and not _is_wrapped(attr):
                    setattr(target, attr_name, decorator(attr))
            return target

        overrides = dict(django_settings or {})
        if widgets_settings is not None:
            overrides["WIDGETS"] = widgets_settings

        @functools.wraps(target)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            saved_widgets = global_widgets.all()
            token = set_active_registry(ActiveContextRegistry())
            try:
                with override_settings(**overrides):
                    return target(*args, **kwargs)
            finally:
                reset_active_registry(token)
                global_widgets.clear()
                for name, widget_cls in saved_widgets.items():
                    global_widgets.register(widget_cls, name=name)

        wrapper._widgets_wrapped = True  # type: ignore[attr-defined]
        return wrapper  # type: ignore[return-value]

    if _fn is not None:
        return decorator(_fn)
    return decorator


def _is_wrapped(fn: Any) -> bool:
    return getattr(fn, "_widgets_wrapped", False)
