from __future__ import annotations


class Frozen:
    """
    Base for value objects that become read-only once ``__init__`` finishes.

    Subclasses declare their own ``__slots__`` and call ``self._freeze()`` as
    the last step of ``__init__``.
    """
    __slots__ = ('_is_frozen',)

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __delattr__(self, name):
        raise AttributeError(f"{self.__class__.__name__} is immutable; cannot delete {name}")

    def _freeze(self) -> None:
        super().__setattr__('_is_frozen', True)
