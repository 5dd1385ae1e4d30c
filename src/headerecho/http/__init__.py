"""HTTP primitives — request view, headers, response, and response sink."""
