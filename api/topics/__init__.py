"""
Topics feature: list topics.
"""
