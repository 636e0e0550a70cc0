"""Test fixtures for NameCraft."""
