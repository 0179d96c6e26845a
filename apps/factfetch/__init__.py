"""Fact fetching: request lifecycle controller and its terminal host."""
