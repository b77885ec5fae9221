"""Domain layer for Virement."""
