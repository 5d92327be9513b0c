"""
Engine errors.

Rule rejections (can't afford, illegal placement, ...) are never raised;
they come back as None / False / an unplayable PlayAttempt. The errors
here signal programming mistakes or deliberately unsupported rules.
"""


class InvariantViolation(Exception):
    """
    An operation would corrupt game state.

    Operations are only emitted after validation, so this always means
    an upstream logic bug. Library code never catches it.
    """


class NotYetHandled(NotImplementedError):
    """A rare rule variant the interpreter does not resolve."""
