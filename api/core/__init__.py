"""
Database wrapper, error handlers and path/query parsing used by every resource package.
"""
