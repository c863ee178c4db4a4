"""Feature modules: customers, scripts and the shared error taxonomy."""
