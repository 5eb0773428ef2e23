"""
Central roller registry and registration decorator.
Use @register_roller("name") above a Roller subclass to make it available to make_roller and the demo script.
All roller modules in this directory are imported here so that registration occurs.
"""

import logging

from ..core.config import RollerConfig

logger = logging.getLogger(__name__)

ROLLER_MAP = {}

def register_roller(name):
	"""
	Decorator to register a roller class under a given name.
	Usage:
		@register_roller("rng")
		class RngRoller(Roller): ...
	"""
	def decorator(cls):
		ROLLER_MAP[name] = cls
		return cls
	return decorator


def make_roller(config=None):
	"""
	Build a roller from a RollerConfig (defaults to RollerConfig()).
	Raises:
		ValueError: If the configured roller name is not registered, or the config is invalid.
	"""
	config = config or RollerConfig()
	config.validate()
	try:
		cls = ROLLER_MAP[config.roller]
	except KeyError:
		raise ValueError(f"unknown roller {config.roller!r}; known: {sorted(ROLLER_MAP)}") from None
	logger.debug("building roller %r (%s)", config.roller, cls.__name__)
	return cls.from_config(config)

# Automatically import all roller modules in this directory to ensure registration decorators run
import importlib
import os
import pkgutil

_this_dir = os.path.dirname(__file__)
_pkg_name = __name__
for _, modname, ispkg in pkgutil.iter_modules([_this_dir]):
	if not ispkg and modname not in ("__init__", "base"):
		importlib.import_module(f"{_pkg_name}.{modname}")
