"""Scene errors and the messages reported when a scene cannot be loaded."""

ERR_PREFIX = "\033[91mminiRT: "

USAGE = "Usage: /miniRT <map_path>"
MALLOC = "Malloc Error."
REGISTRATION = "Object Registration Error"
MAP_NOT_FOUND = "Map path not found"
OBJ = "Invalid object id"

A_ARGS = "Ambiant format: 'A <level> <color>'"
A_LVL = "Ambiant level format: [0.0;1.0]"
A_RGB = "Ambiant rgb format: [0;255],[0;255],[0;255]"

C_ARGS = "Camera format: 'C <position> <normal> <fov>'"
C_POS = (
    "Camera position format: [INT_MIN;INT_MAX],[INT_MIN;INT_MAX]"
    ",[INT_MIN;INT_MAX]"
)
C_NORM = "Camera normal format: [-1.0;1.0],[-1.0;1.0],[-1.0;1.0]"
C_FOV = "Camera fov format: [0;180]"

L_ARGS = "Camera format: 'L <position> <level> <color>'"
L_POS = (
    "Light position format: [INT_MIN;INT_MAX],[INT_MIN;INT_MAX]"
    ",[INT_MIN;INT_MAX]"
)
L_LVL = "Light level format: [0.0;1.0]"
L_RGB = "Light rgb format: [0;255],[0;255],[0;255]"

PL_ARGS = "Plane format: 'pl <position> <normal> <color>'"
PL_POS = (
    "Plane position format: [INT_MIN;INT_MAX],[INT_MIN;INT_MAX]"
    ",[INT_MIN;INT_MAX]"
)
PL_NORM = "Plane normal format: [-1.0;1.0],[-1.0;1.0],[-1.0;1.0]"
PL_RGB = "Plane rgb format: [0;255],[0;255],[0;255]"

SP_ARGS = "Sphere format: 'sp <position> <diameter> <color>'"
SP_POS = (
    "Sphere position format: [INT_MIN;INT_MAX],[INT_MIN;INT_MAX]"
    ",[INT_MIN;INT_MAX]"
)
SP_DIAM = "Sphere diameter format: [0.0;INT_MAX]"
SP_RGB = "Sphere rgb format: [0;255],[0;255],[0;255]"

CY_ARGS = "Cylinder format: 'cy <position> <normal> <diameter> <height> <color>'"
CY_POS = (
    "Cylinder position format: [INT_MIN;INT_MAX],[INT_MIN;INT_MAX]"
    ",[INT_MIN;INT_MAX]"
)
CY_NORM = "Cylinder normal format: [-1.0;1.0],[-1.0;1.0],[-1.0;1.0]"
CY_DIAM = "Cylinder diameter format: [0.0;INT_MAX]"
CY_HEI = "Cylinder height format: [0.0;INT_MAX]"
CY_RGB = "Cylinder rgb format: [0;255],[0;255],[0;255]"


def format_error(message: str) -> str:
    """Return *message* as it is written to the error stream."""
    return f"{ERR_PREFIX}{message}\n"


class SceneError(Exception):
    """Base class for every error raised while loading a scene."""

    exit_code = 2

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class MapNotFoundError(SceneError):
    """The map file could not be opened."""

    exit_code = 3

    def __init__(self, message: str = MAP_NOT_FOUND) -> None:
        super().__init__(message)


class UnknownObjectError(SceneError):
    """A line of the map starts with an identifier no type is registered for."""

    exit_code = 7

    def __init__(self, message: str = OBJ) -> None:
        super().__init__(message)


class ObjectFormatError(SceneError):
    """The values of an object line do not have the expected format."""

    exit_code = 8


class RegistrationError(SceneError):
    """A parsed object could not be added to the scene."""

    exit_code = 9

    def __init__(self, message: str = REGISTRATION) -> None:
        super().__init__(message)