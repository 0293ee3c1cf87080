# Kind conversion and parameter emitters

from ...ir.types import ValueKind

_SWIZZLE = "xyzw"


def coerce(expr: str, source: ValueKind, target: ValueKind) -> str:
    """Wrap `expr` so a value of kind `source` reads as `target`."""
    if source == target:
        return expr

    # Float -> vector : splat
    if source == ValueKind.SCALAR:
        return f"{target.glsl_name()}({expr})"

    # Vec3 -> Float : Average
    if source == ValueKind.VEC3 and target == ValueKind.SCALAR:
        return f"dot({expr}, vec3(0.33333333))"

    # Vec4 (color) -> Float : Luminance
    if source == ValueKind.VEC4 and target == ValueKind.SCALAR:
        return f"dot(({expr}).rgb, vec3(0.2126, 0.7152, 0.0722))"

    # Other vector -> Float : first component
    if target == ValueKind.SCALAR:
        return f"({expr}).x"

    # Narrowing : swizzle
    if source.component_count() > target.component_count():
        return f"({expr}).{_SWIZZLE[:target.component_count()]}"

    # Vec3 -> Vec4 : Append Alpha 1.0
    if source == ValueKind.VEC3 and target == ValueKind.VEC4:
        return f"vec4({expr}, 1.0)"

    # Vec2 -> Vec3 : Pad with 0.0
    if source == ValueKind.VEC2 and target == ValueKind.VEC3:
        return f"vec3({expr}, 0.0)"

    # Vec2 -> Vec4 : Pad z with 0.0, alpha 1.0
    return f"vec4({expr}, 0.0, 1.0)"


def emit_parameter(pin_name, ctx):
    """Parameters read the uniform assigned to them by the collector."""
    return ctx.uniform_name()
