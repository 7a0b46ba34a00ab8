"""Showtime ranking engine and its supporting services."""
