"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, parameter tokens, constants
    ├── request.py        # Pure request/URL building
    └── query.py          # Client that performs the HTTP calls

Currently only ``meteomatics/`` exists.
"""
