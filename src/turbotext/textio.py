"""str/bytes adapter for the public text functions.

The engine works on UTF-8 ``bytes`` throughout. Public functions are wrapped
with :func:`text_function` so callers may pass ``str`` as well: ``str``
arguments are encoded to UTF-8 on the way in, and when the primary argument
was a ``str`` a ``bytes`` result is decoded back on the way out.
"""

import functools


def to_bytes(value):
    if isinstance(value, bytes):
        return value
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, (bytearray, memoryview)):
        return bytes(value)
    raise TypeError(f"expected str or bytes, not {type(value).__name__}")


def text_function(func=None, *, returns_text=True):
    """Let a bytes-level function accept and return ``str`` as well."""
    if func is None:
        return functools.partial(text_function, returns_text=returns_text)

    @functools.wraps(func)
    def wrapper(value, *args, **kwargs):
        was_text = isinstance(value, str)
        value = to_bytes(value)
        args = [arg.encode("utf-8") if isinstance(arg, str) else arg for arg in args]
        for key, arg in kwargs.items():
            if isinstance(arg, str):
                kwargs[key] = arg.encode("utf-8")
        result = func(value, *args, **kwargs)
        if was_text and returns_text and isinstance(result, bytes):
            return result.decode("utf-8", "surrogateescape")
        return result

    return wrapper
