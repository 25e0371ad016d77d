"""Runtime configuration, context and logging."""
