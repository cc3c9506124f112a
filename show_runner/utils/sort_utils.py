"""Sorting utilities, especially for natural sorting."""

import re
from typing import Any


def natural_sort_key(text: str) -> list[Any]:
    """Generate a natural sort key for a string.

    Numbers compare numerically and letters case-insensitively, so a
    local drop folder lists in the order an operator would expect.

    Args:
        text: String to generate sort key for

    Returns:
        List of strings and integers for sorting

    Example:
        names = ["Ep10_Ann.mp4", "Ep2_Bob.mp4", "ep1_cy.mp4"]
        sorted(names, key=natural_sort_key)
        # Returns: ["ep1_cy.mp4", "Ep2_Bob.mp4", "Ep10_Ann.mp4"]
    """

    def convert(segment):
        return int(segment) if segment.isdigit() else segment.lower()

    return [convert(c) for c in re.split(r"(\d+)", str(text))]
