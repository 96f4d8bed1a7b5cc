import copy

from glossa.settings.common import *

LANGUAGE_TAGS_PRELOAD_REGISTRY = False

LOGGING = copy.deepcopy(LOGGING)
LOGGING["loggers"]["language"]["level"] = "WARNING"
