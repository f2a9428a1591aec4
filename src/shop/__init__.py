"""Storefront API.

Account registration, a product catalog with stock management, and a
shopping cart keyed by user and product, served over FastAPI.
"""

__version__ = "0.1.0"
