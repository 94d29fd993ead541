"""API schemas package."""

from .common import *
from .patterns import *
