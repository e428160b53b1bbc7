from .colors import *  # noqa: F401,F403
from .colors import __all__
