"""User interfaces for fredsor."""
