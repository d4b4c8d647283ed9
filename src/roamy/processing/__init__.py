"""Public API surface for roamy.processing."""
__all__ = [
    "line_ops",
    "line_rules",
]
