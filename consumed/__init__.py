"""Consumed social feed service."""
