import pytest
from django.template import Context, Template, engines
from django.test import RequestFactory
from pytest_django.asserts import assertHTMLEqual

from django_widgets import EmptyWidgetRegistry, View, WidgetRenderError, get_active_registry, global_widgets
from django_widgets.testing import widgets_test

from .testutils import TESTS_DIR, setup_test_config
from .widgets import CartMiniWidget, CurrentPathWidget, ExplodingWidget, PathOuterWidget, ProductPriceWidget

setup_test_config()


@widgets_test
class TestWidgetTags:
    def test_widget(self):
        get_active_registry().add(View(widgets=[CartMiniWidget]))
        template = Template("""{% widget "cart-mini" session_id %}""")

        rendered = template.render(Context({"session_id": "xyz"}))

        assertHTMLEqual(rendered, '<span class="cart-mini">xyz</span>')

    def test_widget_output_not_escaped(self):
        get_active_registry().add(View(widgets=[CartMiniWidget]))
        template = Template("""{% widget "cart-mini" value %}""")

        rendered = template.render(Context({"value": "<b>"}))

        assert '<span class="cart-mini">&lt;b&gt;</span>' in rendered

    def test_widget_unknown(self):
        get_active_registry().add(View())
        template = Template("""[{% widget "cart-mini" "abc" %}]""")

        assert template.render(Context()) == "[]"

    def test_widget_block(self):
        get_active_registry().add(View(widgets=[ProductPriceWidget]))
        template = Template("""{% widget_block "product-price" "amount" 42 %}""")

        assert template.render(Context()) == "<b>42</b>"

    def test_widget_global(self):
        template = Template("""{% widget_global "currency-switcher" "CHF" %}""")

        assertHTMLEqual(template.render(Context()), '<nav class="currency">CHF</nav>')

    def test_widget_exists(self):
        get_active_registry().add(View(widgets=[CartMiniWidget]))
        template = Template(
            """
            {% widget_exists "cart-mini" as has_cart %}
            {% widget_exists "product-price" as has_price %}
            {% if has_cart %}cart{% endif %}
            {% if not has_price %}no-price{% endif %}
            """
        )

        rendered = template.render(Context())

        assert rendered.split() == ["cart", "no-price"]

    def test_widget_outside_of_view(self):
        template = Template("""{% widget "cart-mini" "abc" %}""")

        with pytest.raises(EmptyWidgetRegistry):
            template.render(Context())

    def test_widget_error(self):
        registry = get_active_registry()
        registry.add(View(widgets=[ExplodingWidget]))
        template = Template("""{% widget "exploding" %}""")

        with pytest.raises(WidgetRenderError, match='widget "exploding"'):
            template.render(Context())

        assert len(registry) == 1

    @widgets_test(widgets_settings={"widget_variable": "current_widget", "view_variable": "page"})
    def test_custom_variable_names(self):
        from django_widgets import Widget

        class NamedWidget(Widget):
            name = "named"
            template_name = "widgets/named.html"

        get_active_registry().add(View(widgets=[NamedWidget], template_name="pages/custom.html"))
        template = Template("""{% widget "named" %}""")

        assert template.render(Context()).strip() == "named in pages/custom.html"


# Templates configured without the "request" context processor, so the request
# is available only on the `RequestContext` itself.
TEMPLATES_WITHOUT_REQUEST_PROCESSOR = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [TESTS_DIR / "templates"],
        "OPTIONS": {
            "builtins": ["django_widgets.templatetags.widget_tags"],
            "context_processors": ["tests.context_processors.current_path"],
        },
    }
]


@widgets_test(django_settings={"TEMPLATES": TEMPLATES_WITHOUT_REQUEST_PROCESSOR})
class TestRequestForwarding:
    def test_widget(self):
        get_active_registry().add(View(widgets=[CurrentPathWidget]))
        template = engines["django"].from_string("""{% widget "current-path" %}""")

        rendered = template.render({}, RequestFactory().get("/products/42/"))

        assert rendered.strip() == '<span class="current-path">/products/42/</span>'

    def test_widget_global(self):
        global_widgets.register(CurrentPathWidget)
        template = engines["django"].from_string("""{% widget_global "current-path" %}""")

        rendered = template.render({}, RequestFactory().get("/cart/"))

        assert rendered.strip() == '<span class="current-path">/cart/</span>'

    def test_nested_widget(self):
        get_active_registry().add(View(widgets=[PathOuterWidget]))
        template = engines["django"].from_string("""{% widget "path-outer" %}""")

        rendered = template.render({}, RequestFactory().get("/checkout/"))

        assert " ".join(rendered.split()) == '<div><span class="current-path">/checkout/</span> </div>'

    def test_without_request(self):
        get_active_registry().add(View(widgets=[CurrentPathWidget]))
        template = Template("""{% widget "current-path" %}""")

        assert template.render(Context()).strip() == '<span class="current-path"></span>'


@widgets_test
class TestWidgetIteration:
    def test_for_loop_over_widget(self):
        template = Template("""{% for name in widget %}{{ name }};{% endfor %}""")

        assert template.render(Context({"widget": ProductPriceWidget(5, "USD")})) == "amount;currency;"
