"""Draft/published conversion for the journal editor."""
