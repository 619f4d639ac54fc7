"""View modules for manual routing.

All page implementations live under `views/` and expose a `view()` function.
Register a new page in `PAGE_REGISTRY` inside `app.py`.
"""
