"""kcgraph - content graph node builder for headless CMS exports."""

__version__ = "0.1.0"
