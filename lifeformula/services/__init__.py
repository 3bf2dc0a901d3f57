"""Services Layer - tool registry, calculation dispatch, tool execution.

Invariants:
    - Dispatch uses an explicit dict mapping (no auto-discovery)
    - Services hold the only mutable shared state (the registry index)
"""
