# Django settings file, pulls in settings from submodules
from .base import *
from .ninja_jwt import *
from .worldid import *
