import sys
import pathlib

sys.path.append(str(pathlib.Path(__file__).resolve().parent.parent))

INIT_DICT_SIZE = 256
MAX_DICT_SIZE = 4096


def encode_codes(data):
    """Fixed 12-bit LZW encoder whose table resets when it reaches 4096."""
    dictionary = {bytes([i]): i for i in range(INIT_DICT_SIZE)}
    codes = []
    w = b''
    for b in bytes(data):
        c = bytes([b])
        if w + c in dictionary:
            w = w + c
            continue
        codes.append(dictionary[w])
        dictionary[w + c] = len(dictionary)
        if len(dictionary) >= MAX_DICT_SIZE:
            dictionary = {bytes([i]): i for i in range(INIT_DICT_SIZE)}
        w = c
    if w:
        codes.append(dictionary[w])
    return codes


def pack_codes(codes):
    """Pack codes two per three bytes, a final odd code as two bytes."""
    out = bytearray()
    for i in range(0, len(codes) - 1, 2):
        a, b = codes[i], codes[i + 1]
        out.append(a >> 4)
        out.append(((a & 0x0F) << 4) | (b >> 8))
        out.append(b & 0xFF)
    if len(codes) % 2:
        out.append(codes[-1] >> 8)
        out.append(codes[-1] & 0xFF)
    return bytes(out)


def compress(data):
    return pack_codes(encode_codes(data))
