"""
Shared utilities used by the data sources.

- http.py - pre-configured ``requests.Session``
"""
