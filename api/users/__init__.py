"""
Users feature: list users and look one up by username.
"""
