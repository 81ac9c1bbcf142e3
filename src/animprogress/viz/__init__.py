"""Matplotlib helpers for plotting sampled progress curves."""
