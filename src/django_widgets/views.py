import functools
from collections.abc import Callable
from typing import Any

from django.core.exceptions import ImproperlyConfigured
from django.http import HttpRequest, HttpResponse
from django.template.loader import render_to_string

from django_widgets.app_settings import app_settings
from django_widgets.registry import get_active_registry
from django_widgets.util.logger import trace_view_msg
from django_widgets.widget import View


def render_view(request: HttpRequest, view: View, status: int | None = None) -> HttpResponse:
    """
    Render the page [`View`](../api#django_widgets.View) into an `HttpResponse`.

    While the page template renders, the view is the active renderer, so
    `{% widget %}` tags in the page template resolve against `View.widgets`.

    The page template gets the view's `data` as top-level variables, and the view
    itself as `view`.

    If the view has no `template_name`, the template is derived from the resolved URL
    as `<namespace>/<url_name>.html`, or `<url_name>.html` if the URL has no namespace.
    """
    template_name = view.get_template_name() or _get_default_template_name(request)

    context = {**view.data, app_settings.VIEW_VARIABLE: view}

    trace_view_msg("RENDER", template_name)
    with get_active_registry().activate(view):
        content = render_to_string(template_name, context, request)

    return HttpResponse(content, status=status)


def widget_view(view_func: Callable[..., Any]) -> Callable[..., HttpResponse]:
    """
    Decorator for Django view functions that return a page [`View`](../api#django_widgets.View)
    instead of an `HttpResponse`.

    ```python
    @widget_view
    def cart(request):
        return View(data={"cart": get_cart(request)}, widgets=[CartSummaryWidget])
    ```

    Results that are not a `View` are returned unchanged.
    """

    @functools.wraps(view_func)
    def wrapper(request: HttpRequest, *args: Any, **kwargs: Any) -> HttpResponse:
        result = view_func(request, *args, **kwargs)
        if not isinstance(result, View):
            return result
        return render_view(request, result)

    return wrapper


def _get_default_template_name(request: HttpRequest) -> str:
    match = getattr(request, "resolver_match", None)
    if match is None or not match.url_name:
        raise ImproperlyConfigured(
            "The View has no `template_name` and the template cannot be derived from the URL. "
            "Either set `View.template_name` or give the URL pattern a name."
        )
    if match.namespace:
        return f"{match.namespace.replace(':', '/')}/{match.url_name}.html"
    return f"{match.url_name}.html"
