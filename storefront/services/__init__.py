"""Storefront services: Supabase access, catalog domain, money helpers."""
