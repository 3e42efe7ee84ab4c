"""
Articles feature: list, fetch and vote on articles.
"""
