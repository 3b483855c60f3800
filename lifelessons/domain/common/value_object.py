"""Value object base: lesson filters, ids and other immutable values."""


class ValueObject:
    """
    Immutable value compared by its fields.

    Subclasses are ``@dataclass(frozen=True)`` and validate in ``__post_init__``,
    so an instance that exists is always well formed.
    """

    __slots__ = ()
