from .core import HALF_BYTE_MASK, NBITS_BYTE, NBITS_HALF_BYTE


def dropped_bytes(data):
    """Number of trailing bytes in *data* that cannot form a codeword."""
    return 1 if len(data) % 3 == 1 else 0


def unpack_array(data):
    """Unpack a fully buffered input into a ``uint16`` array of codewords.

    Produces the same sequence as iterating a ``CodeUnpacker`` over *data*.
    """
    import numpy as np

    data = bytes(data)
    chunks = len(data) // 3
    packed = np.array(bytearray(data[:chunks * 3]), dtype=np.uint16)
    packed = packed.reshape(chunks, 3)
    first = (packed[:, 0] << NBITS_HALF_BYTE) | (packed[:, 1] >> NBITS_HALF_BYTE)
    second = ((packed[:, 1] & HALF_BYTE_MASK) << NBITS_BYTE) | packed[:, 2]
    codes = np.column_stack((first, second)).reshape(-1)
    if len(data) % 3 == 2:
        trailing = (data[-2] << NBITS_BYTE) | data[-1]
        codes = np.append(codes, np.uint16(trailing))
    return codes.astype(np.uint16)
