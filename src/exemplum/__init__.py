"""Exemplum: a layered CRUD web API built around a request pipeline."""

from __future__ import annotations

__version__ = "0.1.0"
