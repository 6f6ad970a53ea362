"""Command actions - the logic behind each CLI command."""
