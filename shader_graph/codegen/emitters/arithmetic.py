# Arithmetic Emitters
# Handles: ADD, SUBTRACT, MULTIPLY, DIVIDE


def emit_add(pin_name, ctx):
    return f"({ctx.input('A')} + {ctx.input('B')})"


def emit_subtract(pin_name, ctx):
    return f"({ctx.input('A')} - {ctx.input('B')})"


def emit_divide(pin_name, ctx):
    return f"({ctx.input('A')} / {ctx.input('B')})"


def emit_multiply(pin_name, ctx):
    """
    Scalar operands pass through (scalar * vecN is valid GLSL); vector
    operands are brought to the widened result kind.
    """
    result = ctx.output_kind(pin_name)
    operands = []
    for name in ("A", "B"):
        expr, kind = ctx.resolved(name)
        if kind.is_vector() and result is not None and kind != result:
            expr = ctx.coerce(expr, kind, result)
        operands.append(expr)
    return f"({operands[0]} * {operands[1]})"
