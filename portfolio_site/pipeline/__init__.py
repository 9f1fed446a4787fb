"""Headless pipeline stages of the portfolio site build."""
