"""Inline command-line suggestions drawn from help document examples."""
