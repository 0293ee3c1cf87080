# Math Function Emitters
# Handles: SIN, COS, ABS, MIX, CLAMP


def emit_unary(func, pin_name, ctx):
    return f"{func}({ctx.input('X')})"


def emit_mix(pin_name, ctx):
    return f"mix({ctx.input('A')}, {ctx.input('B')}, {ctx.input('T')})"


def emit_clamp(pin_name, ctx):
    """Range comes from the node's own settings, not from pins."""
    lo = ctx.literal(ctx.setting("min", 0.0))
    hi = ctx.literal(ctx.setting("max", 1.0))
    return f"clamp({ctx.input('X')}, {lo}, {hi})"
