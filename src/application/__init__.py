"""Application layer - demonstrations built on the domain examples."""
