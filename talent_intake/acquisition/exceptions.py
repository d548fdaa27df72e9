class StrategyError(Exception):
    """Raised by a single acquisition strategy; the resolver moves on to the next one."""
