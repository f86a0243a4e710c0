"""Storefront: catalog pages backed by Supabase and a per-session cart."""

__version__ = "1.0.0"
