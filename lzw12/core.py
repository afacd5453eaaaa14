NBITS_HALF_BYTE = 4
NBITS_BYTE = 8
HALF_BYTE_MASK = 0x0F

INIT_DICT_SIZE = 256
MAX_DICT_SIZE = 4096


class Codeword(int):
    def __new__(cls, value, last=False):
        if not isinstance(value, int) or value < 0:
            raise ValueError('Codeword value must be non-negative integer')
        code = int.__new__(cls, value)
        code.last = bool(last)
        return code

    def __repr__(self):
        if self.last:
            return 'Codeword(%d, last=True)' % int(self)
        return 'Codeword(%d)' % int(self)


def format_bits(value):
    """Render a 16-bit word as its high and low bytes in binary."""
    high = (value >> NBITS_BYTE) & 0xFF
    low = value & 0xFF
    return '{:08b} {:08b}'.format(high, low)
