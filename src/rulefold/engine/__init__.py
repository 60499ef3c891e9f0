"""Engine layer — evaluators, rule sets, nested binders, and adapters.

Every builder here runs once at definition time and returns an immutable
callable ``entity -> Outcome``. Invocations share no mutable state.
"""
