"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, constants, request building
    ├── models.py         # Schemas for API responses
    └── {feature}.py      # Fetch functions (one per endpoint/concept)

Fetch functions take an ``HttpFetcher`` and return a ``FetchOutcome``; they
never raise on upstream or transport failures.
"""
