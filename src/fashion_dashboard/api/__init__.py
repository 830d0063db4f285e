"""API module for the fashion dashboard.

API layer:
- Validates query parameters, reads the content table
- Returns payloads for the dashboard UI
- Forbidden: writes to the content table
"""
