"""Index planning for a local collection of reference repositories."""
