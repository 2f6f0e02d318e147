"""Errors raised when a driving model violates a kernel precondition.

Every error here is fatal for the run: it means the model built on top of the
kernel has a logic bug. Each class also derives from the closest builtin so
callers that only know the builtins still catch them.
"""


class SimulationError(Exception):
    """Base class for all kernel precondition violations."""


class NegativeDelayError(SimulationError, ValueError):
    """An event was scheduled in the past."""


class EmptyEventSetError(SimulationError, IndexError):
    """The engine was asked for the next event but none is pending."""


class EventNotFoundError(SimulationError, LookupError):
    """No pending event matched a cancel request."""


class DeviceBusyError(SimulationError, RuntimeError):
    """A device was reserved while another transact holds it."""


class DeviceIdleError(SimulationError, RuntimeError):
    """A device was released while nobody holds it."""


class EmptyQueueError(SimulationError, IndexError):
    """The head of an empty queue was requested."""


class ClockError(SimulationError, RuntimeError):
    """The simulation clock was asked to move backwards."""
