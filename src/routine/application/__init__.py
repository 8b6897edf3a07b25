"""Application layer – pagination, property mapping and sorting."""
