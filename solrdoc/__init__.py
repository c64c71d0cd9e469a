"""solrdoc - map ORM records into boosted, type-suffixed search documents."""

__version__ = "0.1.0"
