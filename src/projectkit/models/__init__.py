"""Data models for artifacts and configuration."""
