"""Aggregation module for dashboard statistics.

- Reads DB through repo and produces totals and chart breakdowns
- Forbidden: writes to the content table
"""
