"""Layout and rendering logic for the weather card - pure functions for testability."""
from typing import List
from translations import translate
from weather_transform import derive_display_values
from widget_state import WidgetState, Loading, Failed, Success


class DrawOp:
    """Represents a drawing operation (for testing/layout calculation)."""
    def __init__(self, op_type: str, **kwargs):
        self.op_type = op_type
        self.kwargs = kwargs

    def __repr__(self) -> str:
        return f"DrawOp({self.op_type!r}, {self.kwargs!r})"


def format_temperature(value) -> str:
    return f"{value}°C"


def calculate_layout(state: WidgetState) -> List[DrawOp]:
    """
    Calculate the drawing operations for the current state.

    Loading shows a progress indicator only, a failure shows the reason
    styled as an error, success shows the full card. The language toggle
    button closes every branch.

    Args:
        state: Current widget state

    Returns:
        List of DrawOp objects representing what to draw
    """
    direction = state.locale.direction
    lang = state.locale.locale_code
    status = state.status
    ops = []

    if isinstance(status, Loading):
        ops.append(DrawOp("progress", direction=direction))

    elif isinstance(status, Failed):
        ops.append(DrawOp("text", text=status.reason, style="error", direction=direction))

    elif isinstance(status, Success):
        payload = status.payload
        values = derive_display_values(payload)

        # City & time
        city = translate(payload.name, lang) if payload.name else translate("Loading...", lang)
        ops.append(DrawOp("text", text=city, style="city", direction=direction))
        ops.append(DrawOp("text", text=state.timestamp, style="time", direction=direction))
        ops.append(DrawOp("divider", direction=direction))

        # Degree & description
        ops.append(DrawOp(
            "text",
            text=format_temperature(values.temperature),
            style="temperature",
            direction=direction
        ))
        if values.icon_url:
            ops.append(DrawOp(
                "image",
                url=values.icon_url,
                alt=f"Weather icon representing {values.description}",
                direction=direction
            ))
        ops.append(DrawOp(
            "text",
            text=translate(values.description, lang),
            style="description",
            direction=direction
        ))
        min_max = (
            f"{translate('Min', lang)}: {format_temperature(values.min_temperature)}   |   "
            f"{translate('Max', lang)}: {format_temperature(values.max_temperature)}"
        )
        ops.append(DrawOp("text", text=min_max, style="min_max", direction=direction))

    ops.append(DrawOp("button", label=state.locale.toggle_label, direction=direction))
    return ops


def render_view(canvas, ops: List[DrawOp]) -> None:
    """
    Replay drawing operations onto a canvas.

    Args:
        canvas: Canvas instance (terminal, PIL or fake)
        ops: Operations from calculate_layout
    """
    canvas.clear()

    for op in ops:
        direction = op.kwargs.get("direction", "ltr")
        if op.op_type == "progress":
            canvas.draw_progress(direction)
        elif op.op_type == "text":
            canvas.draw_text(op.kwargs["text"], op.kwargs.get("style", "body"), direction)
        elif op.op_type == "divider":
            canvas.draw_divider(direction)
        elif op.op_type == "image":
            canvas.draw_image(op.kwargs["url"], op.kwargs.get("alt", ""), direction)
        elif op.op_type == "button":
            canvas.draw_button(op.kwargs["label"], direction)

    canvas.flush()
