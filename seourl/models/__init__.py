"""Shared typed data models for seourl."""

from .datatypes import SlugResult

__all__ = ["SlugResult"]
