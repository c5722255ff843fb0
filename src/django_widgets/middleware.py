from collections.abc import Callable

from django.http import HttpRequest, HttpResponse

from django_widgets.registry import ActiveContextRegistry, reset_active_registry, set_active_registry


class WidgetRegistryMiddleware:
    """
    Give each request its own [`ActiveContextRegistry`](../api#django_widgets.ActiveContextRegistry),
    so that widgets rendered by one request never see views or widgets of another.

    ```python
    MIDDLEWARE = [
        ...,
        "django_widgets.middleware.WidgetRegistryMiddleware",
    ]
    ```
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        token = set_active_registry(ActiveContextRegistry())
        try:
            return self.get_response(request)
        finally:
            reset_active_registry(token)
