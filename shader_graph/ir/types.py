from enum import Enum, auto
from typing import Iterable

class ValueKind(Enum):
    # Scalar
    SCALAR = auto()

    # Float vectors
    VEC2 = auto()
    VEC3 = auto()
    VEC4 = auto()

    def is_vector(self):
        return self in {ValueKind.VEC2, ValueKind.VEC3, ValueKind.VEC4}

    def component_count(self):
        if self == ValueKind.VEC2: return 2
        if self == ValueKind.VEC3: return 3
        if self == ValueKind.VEC4: return 4
        return 1

    def glsl_name(self) -> str:
        """GLSL type keyword used in declarations."""
        if self == ValueKind.SCALAR:
            return "float"
        return self.name.lower()

    @classmethod
    def from_components(cls, count: int) -> "ValueKind":
        if count == 1: return cls.SCALAR
        if count == 2: return cls.VEC2
        if count == 3: return cls.VEC3
        if count == 4: return cls.VEC4
        raise ValueError(f"No value kind with {count} components")

    def __str__(self):
        return self.glsl_name()


def widest_kind(kinds: Iterable[ValueKind]) -> ValueKind:
    """
    Widest vector kind among `kinds`, or SCALAR when none is a vector.
    """
    widest = ValueKind.SCALAR
    for kind in kinds:
        if kind.is_vector() and kind.component_count() > widest.component_count():
            widest = kind
    return widest
