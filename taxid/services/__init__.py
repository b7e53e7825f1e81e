"""Tax ID services."""
