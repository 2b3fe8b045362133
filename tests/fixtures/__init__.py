"""Shared test fixtures for odoflow."""
