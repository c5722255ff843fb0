import importlib
from collections.abc import Callable

from django.utils.module_loading import import_string

from django_widgets.app_settings import app_settings
from django_widgets.collection import WidgetCollection, global_widgets
from django_widgets.util.logger import logger


def import_libraries(map_module: Callable[[str], str] | None = None) -> list[str]:
    """
    Import the modules set in `WIDGETS.libraries`, so that the widgets they
    [`@register`](../api#django_widgets.register) are added to the global collection.

    Returns the list of imported module paths.
    """
    imported_modules: list[str] = []
    for module_path in app_settings.LIBRARIES:
        if map_module:
            module_path = map_module(module_path)

        logger.debug(f'Importing widget library "{module_path}"')
        importlib.import_module(module_path)
        imported_modules.append(module_path)

    return imported_modules


def register_global_widgets(collection: WidgetCollection | None = None) -> list[str]:
    """
    Register the widget classes set in `WIDGETS.global_widgets` in the global collection.

    Returns the list of registered widget names.
    """
    target = collection if collection is not None else global_widgets

    names: list[str] = []
    for import_path in app_settings.GLOBAL_WIDGETS:
        widget_cls = import_string(import_path)
        target.register(widget_cls)
        names.append(widget_cls.get_name())

    return names
