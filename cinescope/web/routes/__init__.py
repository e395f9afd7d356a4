"""Routes de l'application catalogue."""
