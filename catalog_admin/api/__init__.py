"""HTTP surface: the products endpoint and the admin endpoints."""
