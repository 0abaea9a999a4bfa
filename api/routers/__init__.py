"""
API Routers - Endpoint handlers for the Name Cluster API.

- groups: Run connected grouping on structured or text input
"""
