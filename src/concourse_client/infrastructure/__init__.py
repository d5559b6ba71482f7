"""Infrastructure layer: HTTP transport, wire mappers and request building."""
