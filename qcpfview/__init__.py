"""View configuration, binary config storage, layout description and sample plugins for a plugin-based application framework."""

__version__ = "1.0.0"
__all__ = ["datastream", "viewconfig", "viewmodel", "layout", "plugins", "charts"]