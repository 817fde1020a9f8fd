"""Exception hierarchy for the broker.

Every error the broker raises on purpose derives from BrokerError, so the
Lambda glue can tell an expected failure from a programming error.
"""


class BrokerError(Exception):
    pass


class ConfigError(BrokerError):
    pass


class ValidationError(BrokerError):
    pass


class ModelInvocationError(BrokerError):
    """Any failure while shaping, sending, or decoding a direct model call."""


class AgentConfigError(BrokerError):
    pass
