"""Keeps the repository root importable for tests (``src.core``, ``main``)."""
