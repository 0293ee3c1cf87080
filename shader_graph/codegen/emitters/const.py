# Constant formatting utilities and constant node emitters

import math

from ...ir.types import ValueKind


def format_float(value, precision: int = 3) -> str:
    """Fixed-point GLSL float literal, e.g. 0.500."""
    try:
        v = float(value)
    except (TypeError, ValueError):
        v = 0.0
    # inf/nan have no GLSL literal
    if not math.isfinite(v):
        v = 0.0
    s = f"{v:.{precision}f}" if precision > 0 else f"{v:.1f}"
    if s.startswith("-") and float(s) == 0.0:
        s = s[1:]
    return s


def format_vector(values, kind: ValueKind, precision: int = 3) -> str:
    """Constructor literal, padding or truncating to the kind's size."""
    count = kind.component_count()
    if isinstance(values, (int, float)):
        comps = [values] * count
    else:
        try:
            comps = list(values)[:count]
        except TypeError:
            comps = []
        comps += [0.0] * (count - len(comps))
    if count == 1:
        return format_float(comps[0], precision)
    return f"{kind.glsl_name()}({', '.join(format_float(c, precision) for c in comps)})"


def emit_float(pin_name, ctx):
    return ctx.literal(ctx.setting("value", 0.0))


def emit_color(pin_name, ctx):
    return format_vector(ctx.setting("color", (0.0, 0.0, 0.0)), ValueKind.VEC3, ctx.options.float_precision)
