# Vector Emitters
# Handles: COMBINE_XYZ, SEPARATE_XYZ


def emit_combine_xyz(pin_name, ctx):
    return f"vec3({ctx.input('X')}, {ctx.input('Y')}, {ctx.input('Z')})"


def emit_separate_xyz(pin_name, ctx):
    """One member access per requested component (X, Y or Z output)."""
    return f"({ctx.input('Vec3')}).{pin_name.lower()}"
