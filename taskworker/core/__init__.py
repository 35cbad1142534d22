"""Ambient application support: settings and logging configuration."""
