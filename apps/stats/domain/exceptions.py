class InvalidRangeError(ValueError):
    """Odwrócony zakres dat albo nieistniejący miesiąc."""
