"""Object-oriented fundamentals."""
