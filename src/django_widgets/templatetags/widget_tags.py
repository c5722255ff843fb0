from typing import Any

from django.template import Context, Library
from django.utils.safestring import SafeString

from django_widgets.dispatcher import renderer

register = Library()


@register.simple_tag(takes_context=True)
def widget(context: Context, name: str, *args: Any) -> SafeString:
    """
    Render the widget registered under `name` in the view or widget that is currently rendering.

    Positional arguments are passed to the widget's constructor.

    ```django
    {% widget "cart-mini" request.session.session_key %}
    ```
    """
    return renderer.render_widget(name, *args, request=getattr(context, "request", None))


@register.simple_tag(takes_context=True)
def widget_block(context: Context, name: str, block: str, *args: Any) -> SafeString:
    """
    Same as `{% widget %}`, but renders only the given `{% block %}` of the widget's template.

    ```django
    {% widget_block "product-price" "amount" product.sku %}
    ```
    """
    return renderer.render_widget_block(name, block, *args, request=getattr(context, "request", None))


@register.simple_tag(takes_context=True)
def widget_global(context: Context, name: str, *args: Any) -> SafeString:
    """
    Render a widget from the global widget collection. Works from any template.

    ```django
    {% widget_global "language-switcher" %}
    ```
    """
    return renderer.render_global_widget(name, *args, request=getattr(context, "request", None))


@register.simple_tag
def widget_exists(name: str) -> bool:
    """
    ```django
    {% widget_exists "cart-mini" as has_cart %}
    {% if has_cart %}...{% endif %}
    ```
    """
    return renderer.widget_exists(name)
