from .codec import *  # noqa: F401,F403
from .codec import __all__

__version__ = "0.1.0"
