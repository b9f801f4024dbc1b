"""Utility helpers for Dynamic Footsteps."""
