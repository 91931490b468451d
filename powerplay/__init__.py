"""
PowerPlay

Paginated product catalog client: fetches product pages, caches them in
memory and publishes list state for a UI layer.
"""

__version__ = "1.0.0"
