from collections.abc import Sequence
from typing import Any, Protocol

from django.http import HttpRequest
from django.template import Context, Template
from django.template.context import make_context
from django.template.loader import get_template
from django.template.loader_tags import BLOCK_CONTEXT_KEY, BlockContext, BlockNode, ExtendsNode
from django.utils.safestring import SafeString, mark_safe

from django_widgets.app_settings import app_settings
from django_widgets.collection import WidgetCollection, global_widgets
from django_widgets.exceptions import BlockNotFound, EmptyWidgetRegistry, WidgetRenderError
from django_widgets.registry import ActiveContextRegistry, get_active_registry
from django_widgets.util.logger import trace_widget_msg
from django_widgets.widget import Widget, WidgetContainer, WidgetFactory


class WidgetLookup(Protocol):
    def has_widget(self, name: str) -> bool: ...  # noqa: E704

    def get_widget_class(self, name: str) -> type[Widget]: ...  # noqa: E704


class WidgetRenderer:
    """
    Renders widgets by name. This is what the `{% widget %}`, `{% widget_block %}`,
    `{% widget_global %}` and `{% widget_exists %}` template tags call.

    Widget names are resolved against the view or widget that is currently rendering,
    i.e. the last added entry of the [`ActiveContextRegistry`](../api#django_widgets.ActiveContextRegistry).
    Global widgets are resolved against the [`WidgetCollection`](../api#django_widgets.WidgetCollection).

    Rendering a widget that is not registered yields an empty string.
    Any error raised while building or rendering a widget is re-raised
    as [`WidgetRenderError`](../api#django_widgets.WidgetRenderError).
    """

    def __init__(
        self,
        registry: ActiveContextRegistry | None = None,
        collection: WidgetCollection | None = None,
        factory: WidgetFactory | None = None,
    ) -> None:
        self._registry = registry
        self._collection = collection
        self.factory = factory or WidgetFactory()

    # Unless given explicitly, the registry is looked up on every call,
    # because it is request-scoped.
    @property
    def registry(self) -> ActiveContextRegistry:
        return self._registry if self._registry is not None else get_active_registry()

    @property
    def collection(self) -> WidgetCollection:
        return self._collection if self._collection is not None else global_widgets

    def render_widget(self, name: str, *args: Any, request: HttpRequest | None = None) -> SafeString:
        container = self._get_widget_container()
        return self._render(container, name, args, block=None, request=request)

    def render_widget_block(
        self,
        name: str,
        block: str,
        *args: Any,
        request: HttpRequest | None = None,
    ) -> SafeString:
        container = self._get_widget_container()
        return self._render(container, name, args, block=block, request=request)

    def render_global_widget(self, name: str, *args: Any, request: HttpRequest | None = None) -> SafeString:
        return self._render(self.collection, name, args, block=None, request=request)

    def widget_exists(self, name: str) -> bool:
        return self._get_widget_container().has_widget(name)

    def _get_widget_container(self) -> WidgetContainer:
        registry = self.registry
        container = registry.get_last_added()
        if container is None:
            raise EmptyWidgetRegistry(
                f"You have tried to access a widget but {registry.__class__.__name__} is empty. "
                "Widgets can be rendered only from within a view or another widget. "
                "Render the page with `render_view()` or add your view to the registry."
            )
        return container

    def _render(
        self,
        container: WidgetLookup,
        name: str,
        args: Sequence[Any],
        block: str | None,
        request: HttpRequest | None,
    ) -> SafeString:
        if not container.has_widget(name):
            trace_widget_msg("SKIP", name, block_name=block)
            return mark_safe("")

        registry = self.registry
        try:
            widget_cls = container.get_widget_class(name)
            widget = self.factory.build(widget_cls, args)
            trace_widget_msg("BUILD", name)

            context_data = {
                app_settings.VIEW_VARIABLE: registry.get_last_view(),
                app_settings.WIDGET_VARIABLE: widget,
            }

            with registry.activate(widget):
                template_name = widget.get_template_name()
                trace_widget_msg("RENDER", name, template_name=template_name, block_name=block)
                if block is None:
                    html = get_template(template_name).render(context_data, request)
                else:
                    html = render_block(template_name, block, context_data, request)
        except Exception as err:
            raise WidgetRenderError(name, err) from err

        return mark_safe(html)


def render_block(
    template_name: str,
    block_name: str,
    context: dict[str, Any] | None = None,
    request: HttpRequest | None = None,
) -> str:
    """
    Render only the `{% block %}` of given name from the template.

    Template inheritance is honoured. The block may be defined in any template
    up the `{% extends %}` chain, and overrides may use `{{ block.super }}`.

    Raises [`BlockNotFound`](../api#django_widgets.BlockNotFound) if none of
    the templates define the block.
    """
    backend_template = get_template(template_name)
    # NOTE: `get_template()` returns the backend wrapper, the actual `django.template.Template`
    #       is behind `.template`. This works only with the `DjangoTemplates` backend.
    template = backend_template.template

    render_context = make_context(context, request, autoescape=backend_template.backend.engine.autoescape)

    # Same as what `Template.render()` does before rendering its nodelist
    with render_context.render_context.push_state(template):
        with render_context.bind_template(template):
            render_context.template_name = template.name

            block_context = _collect_blocks(template, render_context)
            render_context.render_context[BLOCK_CONTEXT_KEY] = block_context

            block_node = block_context.get_block(block_name)
            if block_node is None:
                raise BlockNotFound(f"Block '{block_name}' not found in template '{template_name}'")
            return block_node.render(render_context)


# Same as what `ExtendsNode.render()` does, except that we only collect the blocks
# of the whole `{% extends %}` chain instead of rendering the root template.
# Blocks of the child templates end up on top, so `{{ block.super }}` resolves to the parent.
def _collect_blocks(template: Template, context: Context) -> BlockContext:
    block_context = BlockContext()
    current = template
    while True:
        extends_nodes = current.nodelist.get_nodes_by_type(ExtendsNode)
        if not extends_nodes:
            block_context.add_blocks({node.name: node for node in current.nodelist.get_nodes_by_type(BlockNode)})
            return block_context

        extends_node = extends_nodes[0]
        block_context.add_blocks(extends_node.blocks)
        current = extends_node.get_parent(context)


renderer = WidgetRenderer()
"""The default [`WidgetRenderer`](../api#django_widgets.WidgetRenderer) used by the template tags."""
