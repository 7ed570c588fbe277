# This file makes the 'commands' directory a Python package
# Importing command modules from here

from . import init
from . import commit
from . import config
from . import log
from . import cat_file
