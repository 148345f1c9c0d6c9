from typing import Iterator


_INT32_MASK = 0xFFFFFFFF
_INT32_SIGN = 0x80000000


def hash_string(key: str) -> int:
    """Java-style string hash: h = h * 31 + c over 32-bit signed arithmetic.

    The absolute value of the signed result is returned, so -2**31 comes
    back as 2**31 rather than staying negative.
    """
    hash = 0
    for code_unit in _utf16_code_units(key):
        hash = ((hash << 5) - hash + code_unit) & _INT32_MASK

    if hash & _INT32_SIGN:
        hash -= 1 << 32
    return abs(hash)


def _utf16_code_units(key: str) -> Iterator[int]:
    for char in key:
        code = ord(char)
        if code > 0xFFFF:
            code -= 0x10000
            yield 0xD800 + (code >> 10)
            yield 0xDC00 + (code & 0x3FF)
        else:
            yield code
