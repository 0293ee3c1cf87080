# Source Input Emitters
# Handles: TIME, POSITION, NORMAL, FRESNEL

POSITION_EXPRESSIONS = {
    'XYZ': "FragPos",
    'X': "FragPos.x",
    'Y': "FragPos.y",
    'Z': "FragPos.z",
}

NORMAL_EXPRESSION = "normalize(Normal)"
VIEW_DIRECTION_EXPRESSION = "normalize(viewPos - FragPos)"


def emit_time(pin_name, ctx):
    return "time"


def emit_position(pin_name, ctx):
    return POSITION_EXPRESSIONS[pin_name]


def emit_normal(pin_name, ctx):
    return NORMAL_EXPRESSION


def emit_fresnel(pin_name, ctx):
    """pow(1 - max(N.V, 0), power)"""
    power = ctx.input('Power')
    return f"pow(1.0 - max(dot({NORMAL_EXPRESSION}, {VIEW_DIRECTION_EXPRESSION}), 0.0), {power})"
