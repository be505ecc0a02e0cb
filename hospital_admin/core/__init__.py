"""Cross-cutting pieces: security, validation, persistence, middleware, bootstrap."""
