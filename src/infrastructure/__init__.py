"""Infrastructure adapters implementing the domain repository ports."""
