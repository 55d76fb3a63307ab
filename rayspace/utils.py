import sys


def export(fn):
    # https://stackoverflow.com/a/35710527
    mod = sys.modules[fn.__module__]
    if hasattr(mod, "__all__"):
        if fn.__name__ not in mod.__all__:
            mod.__all__.append(fn.__name__)
    else:
        mod.__all__ = [fn.__name__]
    return fn
