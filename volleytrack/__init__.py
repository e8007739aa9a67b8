"""Volleyball training tracker service."""
