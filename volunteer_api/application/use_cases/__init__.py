"""Use cases grouped by resource."""
