from collections.abc import Iterator, Mapping, Sequence
from typing import Any, ClassVar

from django.core.exceptions import ImproperlyConfigured

from django_widgets.exceptions import NotRegistered


class WidgetContainer:
    """
    Anything that declares which widgets may be rendered from within its template.

    Widgets are looked up by their registered name, see
    [`Widget.get_name()`](../api#django_widgets.Widget.get_name).
    """

    def get_widgets(self) -> Sequence[type["Widget"]]:
        return ()

    def has_widget(self, name: str) -> bool:
        return name in self._get_widget_map()

    def get_widget_class(self, name: str) -> type["Widget"]:
        try:
            return self._get_widget_map()[name]
        except KeyError:
            raise NotRegistered(f"Widget '{name}' is not registered in {self!r}") from None

    def _get_widget_map(self) -> dict[str, type["Widget"]]:
        return {widget_cls.get_name(): widget_cls for widget_cls in self.get_widgets()}


class RenderingContext(WidgetContainer):
    """
    Base for the two kinds of objects that can be rendering at any given time:
    a page [`View`](../api#django_widgets.View) and a [`Widget`](../api#django_widgets.Widget).

    Instances of this class are what the
    [`ActiveContextRegistry`](../api#django_widgets.ActiveContextRegistry) holds.
    """

    def get_template_name(self) -> str | None:
        return None


class View(RenderingContext):
    """
    The result of a page controller. Holds the data for the page template
    and the list of widgets that the page template may render.

    **Example:**

    ```python
    from django_widgets import View, widget_view

    @widget_view
    def product_detail(request, sku):
        product = get_product(sku)
        return View(
            data={"product": product},
            widgets=[ProductPriceWidget, CartMiniWidget],
            template_name="catalog/product_detail.html",
        )
    ```

    When `template_name` is not given, the template is derived from the resolved URL,
    see [`render_view()`](../api#django_widgets.render_view).
    """

    def __init__(
        self,
        data: Mapping[str, Any] | None = None,
        widgets: Sequence[type["Widget"]] = (),
        template_name: str | None = None,
    ) -> None:
        self.data: dict[str, Any] = dict(data or {})
        self.widgets: list[type[Widget]] = list(widgets)
        self.template_name = template_name

    def get_widgets(self) -> Sequence[type["Widget"]]:
        return self.widgets

    def get_template_name(self) -> str | None:
        return self.template_name

    def __repr__(self) -> str:
        return f"<View template_name={self.template_name!r}>"


class Widget(RenderingContext):
    """
    Self-contained, independently renderable fragment of a page.

    A widget is built with the positional arguments given in the template tag,
    e.g. `{% widget "cart-mini" session_id %}` calls `CartMiniWidget(session_id)`.

    Use [`setup()`](../api#django_widgets.Widget.setup) to turn the arguments
    into template parameters. Parameters are then accessible in the widget's template
    as `{{ widget.<parameter> }}`.

    **Example:**

    ```python
    from django_widgets import Widget

    class CartMiniWidget(Widget):
        name = "cart-mini"
        template_name = "cart/mini.html"

        def setup(self, session_id):
            cart = get_cart(session_id)
            self.add_parameter("item_count", len(cart.items))
    ```

    A widget is itself a widget container. Widgets listed in `widgets` can be rendered
    from within this widget's template.
    """

    name: ClassVar[str | None] = None
    """Name under which the widget is rendered. Defaults to the class name."""

    template_name: ClassVar[str | None] = None
    """Template rendered for this widget. Required."""

    widgets: ClassVar[Sequence[type["Widget"]]] = ()
    """Widgets that can be rendered from within this widget's template."""

    def __init__(self, *args: Any) -> None:
        self.args: list[Any] = list(args)
        self.parameters: dict[str, Any] = {}
        self.setup(*args)

    def setup(self, *args: Any) -> None:
        """Hook to prepare template parameters from the constructor arguments."""

    @classmethod
    def get_name(cls) -> str:
        return cls.name or cls.__name__

    def add_parameter(self, name: str, value: Any) -> None:
        self.parameters[name] = value

    def get_widgets(self) -> Sequence[type["Widget"]]:
        return self.widgets

    def get_template_name(self) -> str:
        if not self.template_name:
            raise ImproperlyConfigured(f"Widget '{self.get_name()}' does not define `template_name`")
        return self.template_name

    # Django templates first try dictionary lookup, so `{{ widget.price }}`
    # resolves to `self.parameters["price"]` and falls back to attributes.
    def __getitem__(self, key: str) -> Any:
        return self.parameters[key]

    # Iterating a widget yields its parameter names. Without this, Python would fall back
    # to calling `__getitem__` with integers.
    def __iter__(self) -> Iterator[str]:
        return iter(self.parameters)

    def __contains__(self, key: object) -> bool:
        return key in self.parameters

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.get_name()!r}>"


class WidgetFactory:
    """Builds widget instances from widget classes resolved by name."""

    def build(self, widget_cls: type[Widget], args: Sequence[Any]) -> Widget:
        if not isinstance(widget_cls, type) or not issubclass(widget_cls, Widget):
            raise TypeError(f"Expected a subclass of Widget, got {widget_cls!r}")
        return widget_cls(*args)
