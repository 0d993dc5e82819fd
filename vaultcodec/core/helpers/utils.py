import functools
import importlib
import logging
import pkgutil
from collections.abc import Callable


def setup_logging(level: str = "WARNING") -> None:
    logging.basicConfig(
        level=level,
        format='%(asctime)s %(levelname)-8s [%(name)s:%(funcName)s] : %(message)s',
    )


def scan(package: str):
    """
    Decorator that triggers a component scan when the decorated function
    is called, importing every module of `package` first.
    """
    def decorator(func: Callable):

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            py_package = importlib.import_module(package)

            for module_info in pkgutil.iter_modules(py_package.__path__):
                module_name = f"{package}.{module_info.name}"
                importlib.import_module(module_name)

            return func(*args, **kwargs)

        return wrapper

    return decorator
