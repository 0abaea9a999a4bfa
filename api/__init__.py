"""
Name Cluster API - HTTP layer for connected grouping.
"""
