"""Prompt rendering (pure, deterministic) and the templates of each flow."""
