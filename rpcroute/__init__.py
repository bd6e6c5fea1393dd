"""JSON-RPC 2.0 request and notification parsing, ids, typed resources, call outcomes, error objects and responses."""

__version__ = "0.2.1"