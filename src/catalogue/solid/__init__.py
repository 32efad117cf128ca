"""The five SOLID principles."""
