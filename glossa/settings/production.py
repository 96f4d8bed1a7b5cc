import os

from glossa.settings.common import *

DEBUG = False
SECRET_KEY = os.environ["DJANGO_SECRET_KEY"]

if "LANGUAGE_TAGS_REGISTRY_PATH" in os.environ:
    LANGUAGE_TAGS_REGISTRY_PATH = os.environ["LANGUAGE_TAGS_REGISTRY_PATH"]
