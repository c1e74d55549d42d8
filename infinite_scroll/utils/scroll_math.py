"""Scroll geometry helpers for edge detection."""


def distance_to_edge(
    value: float,
    upper: float,
    page_size: float,
    at_start: bool = False,
    lower: float = 0.0,
) -> float:
    """Pixels between the viewport and the monitored edge of the content.

    Args:
        value: Current scroll position (top of the viewport)
        upper: Upper bound of the scrollable range
        page_size: Height of the viewport
        at_start: Measure to the start (top) instead of the end (bottom)
        lower: Lower bound of the scrollable range
    """
    if at_start:
        return value - lower
    return upper - page_size - value


def is_near_edge(
    value: float,
    upper: float,
    page_size: float,
    threshold: float,
    at_start: bool = False,
    lower: float = 0.0,
) -> bool:
    return distance_to_edge(value, upper, page_size, at_start, lower) < threshold
