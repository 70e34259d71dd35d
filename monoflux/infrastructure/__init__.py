"""Infrastructure Layer - cross-cutting concerns (structured logging)."""
