"""Wine review search: sheet loading, in-memory queries, chat agent and API."""

__version__ = "1.0.0"
