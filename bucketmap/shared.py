from typing import Any


_debug_trace_growth = False


def set_debug_trace_growth(b: bool):
    global _debug_trace_growth
    _debug_trace_growth = b


def printf(format: str, *args: Any):
    print(format.format(*args), end="")


def trace_growth(format: str, *args: Any):
    if _debug_trace_growth:
        printf(format, *args)
