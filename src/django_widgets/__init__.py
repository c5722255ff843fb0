"""Widgets for Django storefront templates, rendered by name from within page views and other widgets."""

# flake8: noqa F401
from django_widgets.app_settings import WidgetsSettings
from django_widgets.collection import WidgetCollection, global_widgets, register
from django_widgets.dispatcher import WidgetRenderer, render_block, renderer
from django_widgets.exceptions import (
    AlreadyRegistered,
    BlockNotFound,
    EmptyWidgetRegistry,
    NotRegistered,
    WidgetRenderError,
)
from django_widgets.registry import ActiveContextRegistry, get_active_registry
from django_widgets.views import render_view, widget_view
from django_widgets.widget import RenderingContext, View, Widget, WidgetContainer, WidgetFactory

__all__ = [
    "ActiveContextRegistry",
    "AlreadyRegistered",
    "BlockNotFound",
    "EmptyWidgetRegistry",
    "NotRegistered",
    "RenderingContext",
    "View",
    "Widget",
    "WidgetCollection",
    "WidgetContainer",
    "WidgetFactory",
    "WidgetRenderError",
    "WidgetRenderer",
    "WidgetsSettings",
    "get_active_registry",
    "global_widgets",
    "register",
    "render_block",
    "render_view",
    "renderer",
    "widget_view",
]
