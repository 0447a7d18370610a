"""blueprints — HTTP blueprints."""
