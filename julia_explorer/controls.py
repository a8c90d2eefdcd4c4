"""
Keyboard controls.

Keys are identified by logical names; the presenter maps physical keys to
them. Every held key applies its full effect once per frame, so motion
speed follows the frame rate rather than wall-clock time.
"""

# Logical key names
EXIT = "exit"
ZOOM_IN = "zoom_in"
ZOOM_OUT = "zoom_out"
PAN_LEFT = "pan_left"
PAN_RIGHT = "pan_right"
PAN_UP = "pan_up"
PAN_DOWN = "pan_down"
PARAM_A_DEC = "param_a_dec"
PARAM_A_INC = "param_a_inc"
PARAM_B_DEC = "param_b_dec"
PARAM_B_INC = "param_b_inc"
RESET = "reset"

# Per-frame step sizes
ZOOM_IN_FACTOR = 0.95
ZOOM_OUT_FACTOR = 1.05
PAN_DIVISOR = 50.0       # Pan by 1/50 of the view per frame
PARAM_STEP = 0.01

# Order in which held keys are applied within a frame
KEY_ORDER = (
    RESET,
    ZOOM_IN, ZOOM_OUT,
    PAN_LEFT, PAN_RIGHT, PAN_UP, PAN_DOWN,
    PARAM_A_DEC, PARAM_A_INC, PARAM_B_DEC, PARAM_B_INC,
)


def _apply_key(session, key):
    view = session.viewport
    params = session.parameters
    if key == ZOOM_IN:
        view.zoom(ZOOM_IN_FACTOR, view.center)
    elif key == ZOOM_OUT:
        view.zoom(ZOOM_OUT_FACTOR, view.center)
    elif key == PAN_LEFT:
        view.pan(-1, 0, PAN_DIVISOR)
    elif key == PAN_RIGHT:
        view.pan(1, 0, PAN_DIVISOR)
    elif key == PAN_UP:
        view.pan(0, -1, PAN_DIVISOR)
    elif key == PAN_DOWN:
        view.pan(0, 1, PAN_DIVISOR)
    elif key == PARAM_A_DEC:
        params.nudge(da=-PARAM_STEP)
    elif key == PARAM_A_INC:
        params.nudge(da=PARAM_STEP)
    elif key == PARAM_B_DEC:
        params.nudge(db=-PARAM_STEP)
    elif key == PARAM_B_INC:
        params.nudge(db=PARAM_STEP)
    elif key == RESET:
        view.reset()


def apply_keys(session, keys):
    """
    React to the keys held during this frame.

    Args:
        session: JuliaSession to mutate
        keys: Iterable of logical key names; unknown names are ignored

    Returns:
        False if EXIT is held (the frame loop should stop), else True
    """
    keys = set(keys)
    for key in KEY_ORDER:
        if key in keys:
            _apply_key(session, key)
    if EXIT in keys:
        session.running = False
    return session.running
