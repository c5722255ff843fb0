import logging
from typing import Literal

logger = logging.getLogger("django_widgets")

TraceAction = Literal["PUSH", "POP", "BUILD", "RENDER", "SKIP"]


def trace_widget_msg(
    action: TraceAction,
    widget_name: str,
    template_name: str | None = None,
    block_name: str | None = None,
    depth: int | None = None,
) -> None:
    """
    DEBUG level logger for widget rendering.

    Format:
    ```
    RENDER widget 'cart-mini' TEMPLATE 'cart/mini.html' BLOCK 'summary' DEPTH 2
    ```
    """
    if not logger.isEnabledFor(logging.DEBUG):
        return

    msg = f"{action} widget {widget_name!r}"
    if template_name is not None:
        msg += f" TEMPLATE {template_name!r}"
    if block_name is not None:
        msg += f" BLOCK {block_name!r}"
    if depth is not None:
        msg += f" DEPTH {depth}"

    logger.debug(msg)


def trace_view_msg(action: TraceAction, template_name: str | None, depth: int | None = None) -> None:
    if not logger.isEnabledFor(logging.DEBUG):
        return

    msg = f"{action} view TEMPLATE {template_name!r}"
    if depth is not None:
        msg += f" DEPTH {depth}"

    logger.debug(msg)
