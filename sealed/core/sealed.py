"""Closed class hierarchies.

A class deriving directly from `Sealed` becomes a *root*. Classes deriving
from a root are its *variants*: they must be defined in the root's module and
cannot be subclassed further. The set of variants is therefore known once the
module has been imported, which lets callers (and tests) check that every
case is handled.

Usage:
    class Shape(Sealed):
        __slots__ = ()

    @dataclass(frozen=True, slots=True)
    class Circle(Shape):
        radius: float

    @dataclass(frozen=True, slots=True)
    class Square(Shape):
        side: float

    variants_of(Shape)  # (Circle, Square)
"""

from __future__ import annotations

from typing import Any, ClassVar

__all__ = ["Sealed", "is_sealed_root", "variants_of"]


class Sealed:
    """Marker base for closed hierarchies."""

    __slots__ = ()

    __sealed_variants__: ClassVar[tuple[type, ...]] = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)

        if Sealed in cls.__bases__:
            cls.__sealed_variants__ = ()
            return

        roots = [base for base in cls.__bases__ if is_sealed_root(base)]
        if not roots:
            parent = next(b for b in cls.__mro__[1:] if issubclass(b, Sealed))
            raise TypeError(f"cannot subclass final variant {parent.__qualname__}")

        for root in roots:
            if cls.__module__ != root.__module__:
                raise TypeError(
                    f"{cls.__qualname__} must be defined in {root.__module__} "
                    f"to extend sealed {root.__qualname__}"
                )
            # dataclass(slots=True) rebuilds the class; keep one entry per name
            kept = tuple(v for v in root.__sealed_variants__ if v.__qualname__ != cls.__qualname__)
            root.__sealed_variants__ = (*kept, cls)


def is_sealed_root(cls: object) -> bool:
    """Return True if `cls` derives directly from `Sealed`."""
    return isinstance(cls, type) and Sealed in cls.__bases__


def variants_of(root: type[Sealed]) -> tuple[type, ...]:
    """Return the variants of a sealed root in definition order.

    Raises:
        TypeError: If `root` is not a sealed root.
    """
    if not is_sealed_root(root):
        raise TypeError(f"{root!r} is not a sealed root")
    return root.__sealed_variants__
