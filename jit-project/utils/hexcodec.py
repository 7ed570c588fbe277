# What it does: Converts object ids between their 40 character hex form and the raw 20 bytes stored inside tree objects
# How it does: Walks the string two characters at a time and parses each pair as a base-16 number

import string

HEX_DIGITS = set(string.hexdigits)

class ParseError(ValueError):
    pass

def decode_hex(s): # Converts a hex string to bytes, one byte per pair of hex digits
    if len(s) % 2 != 0:
        raise ParseError(f"hex string has odd length ({len(s)}): {s!r}")

    out = bytearray()
    for i in range(0, len(s), 2):
        pair = s[i:i + 2]
        # int() would also accept signs and whitespace
        if not all(c in HEX_DIGITS for c in pair):
            raise ParseError(f"invalid hex digit pair {pair!r} at offset {i}")
        out.append(int(pair, 16))
    return bytes(out)

def encode_hex(raw): # Converts bytes back to a lowercase hex string
    return raw.hex()
