"""
Comments feature: list an article's comments and delete comments.
"""
