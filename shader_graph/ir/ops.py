from enum import Enum, auto

class NodeKind(Enum):
    # --- Source inputs ---
    TIME = auto()
    POSITION = auto()
    NORMAL = auto()
    FRESNEL = auto()

    # --- Constants ---
    FLOAT = auto()
    COLOR = auto()

    # --- Arithmetic ---
    ADD = auto()
    SUBTRACT = auto()
    MULTIPLY = auto()   # polymorphic: scalar * vector
    DIVIDE = auto()
    SIN = auto()
    COS = auto()
    ABS = auto()
    MIX = auto()
    CLAMP = auto()

    # --- Vector ---
    COMBINE_XYZ = auto()   # x, y, z -> vec3
    SEPARATE_XYZ = auto()  # vec3 -> x, y, z

    # --- User parameters (uniforms) ---
    FLOAT_PARAMETER = auto()
    VECTOR_PARAMETER = auto()

    # --- Sink ---
    OUTPUT = auto()

    def is_parameter(self):
        return self in {NodeKind.FLOAT_PARAMETER, NodeKind.VECTOR_PARAMETER}

    def is_output(self):
        return self == NodeKind.OUTPUT
