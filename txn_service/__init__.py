"""Transaction Log Service.

A small JSON-over-HTTP service that lets clients:
- List recorded transactions
- Record a new transaction (optionally anonymous)
- Fetch a single transaction by ID

Every request except the health check is logged with its processing time.
"""

__version__ = "0.1.0"
