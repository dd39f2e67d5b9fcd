"""Core objmodel exceptions."""

__all__ = ['ObjModelError', 'InternalError', 'AttributeNotFound', 'APIError']


class ObjModelError(BaseException):
    """Base exception for objmodel package errors.

    Users should be able to use this base class to catch errors
    emitted by objmodel.
    """


class InternalError(ObjModelError):
    """An internal invariant of the object model has been violated.

    Indicates a broken bootstrap or misuse of a storage primitive.
    Deliberately not an Exception subclass, so that ``except Exception``
    clauses in user hooks do not intercept it.
    """


class AttributeNotFound(ObjModelError, AttributeError):
    """No direct value, class-side value, or miss hook resolved the name.

    User-defined miss hooks may raise this to signal that the name is still
    not found.
    """
    def __init__(self, name: str, obj=None):
        if obj is None:
            message = 'Attribute {} not found.'.format(repr(name))
        else:
            message = '{} has no attribute {}.'.format(repr(obj), repr(name))
        super().__init__(message)
        # AttributeError.__init__ resets these members.
        self.name = name
        self.obj = obj


class APIError(ObjModelError, TypeError):
    """The public API was called with arguments it cannot accept."""
