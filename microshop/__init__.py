"""In-memory user and order services, client interfaces, a gateway resolver and a greeting command."""

__version__ = "0.1.0"
__all__ = ["messages", "users", "orders", "greeting", "gateway"]