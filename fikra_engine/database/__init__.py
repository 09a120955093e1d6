"""Supabase persistence for ideas and diaspora profiles."""

from .client import SupabaseClient

__all__ = ["SupabaseClient"]
