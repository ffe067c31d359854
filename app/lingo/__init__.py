"""Lingo - locale-negotiated message resolution."""
