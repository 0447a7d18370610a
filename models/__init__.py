"""models — Finding and Report value types."""
