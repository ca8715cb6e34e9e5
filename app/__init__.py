"""Parking community backend."""
