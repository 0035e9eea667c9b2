"""Presentation-facing orchestration: presenters, their task scope and state store."""
