"""Core interfaces.

- Declares the contracts (Protocol) concrete modules satisfy.
- The core depends on these abstractions, never on a concrete demo.
"""
