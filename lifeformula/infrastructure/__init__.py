"""Infrastructure Layer - database sessions, SQL collaborators, logging."""
