"""Formatters for CLI output."""

import json

from ..hal import Monitor
from ..model import CapturedArtifact


def format_screen_list(monitors: list[Monitor], format_type: str = "text") -> str:
    """Format enumerated screens.

    Args:
        monitors: Screens to list
        format_type: Output format ("text" or "json")

    Returns:
        Formatted string output

    Raises:
        ValueError: If format_type is not recognized
    """
    if format_type == "json":
        return json.dumps(
            [
                {
                    "index": m.index,
                    "width": m.width,
                    "height": m.height,
                    "x": m.x,
                    "y": m.y,
                    "primary": m.is_primary,
                }
                for m in monitors
            ],
            indent=2,
        )
    elif format_type == "text":
        if not monitors:
            return "No screens found"
        lines = ["Available screens:"]
        for m in monitors:
            primary = " (primary)" if m.is_primary else ""
            lines.append(f"  {m.index} - {m.resolution} at ({m.x}, {m.y}){primary}")
        return "\n".join(lines)
    else:
        raise ValueError(f"Unknown format type: {format_type}")


def format_artifact(artifact: CapturedArtifact) -> str:
    return f"Screenshot saved: {artifact.path}"
