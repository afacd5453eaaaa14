from .core import Codeword, HALF_BYTE_MASK, NBITS_BYTE, NBITS_HALF_BYTE


class CodeUnpacker:
    """Recover 12-bit codewords from a packed byte stream.

    Every three bytes carry two codewords split on a nibble boundary. When
    the input ends after two bytes of a chunk, those two bytes form a single
    16-bit codeword. A lone trailing byte cannot form a codeword and is
    discarded.

    Args:
        stream: Binary source whose ``read`` returns ``b''`` at end of input.
        reporter: Optional reporter used for metric collection.
    """

    def __init__(self, stream, reporter=None):
        self._stream = stream
        self._reporter = reporter
        self._exhausted = False
        self._dropped = 0
        self._count = 0

    @property
    def exhausted(self):
        return self._exhausted

    @property
    def dropped_bytes(self):
        return self._dropped

    @property
    def count(self):
        return self._count

    def _next_byte(self):
        data = self._stream.read(1)
        if not data:
            return None
        return data[0]

    def _finish(self, dropped=0):
        self._exhausted = True
        self._dropped += dropped
        if self._reporter:
            self._reporter.report(
                'codes_unpacked',
                'Number of codewords recovered from the input',
                self._count,
            )
            if dropped:
                count = self._reporter.report('truncated_bytes') or 0
                self._reporter.report(
                    'truncated_bytes',
                    'Number of trailing bytes discarded without a codeword',
                    count + dropped,
                )

    def read_step(self):
        """Return the codewords of the next chunk: two, one or none."""
        if self._exhausted:
            return ()
        byte1 = self._next_byte()
        if byte1 is None:
            self._finish()
            return ()
        byte2 = self._next_byte()
        if byte2 is None:
            self._finish(dropped=1)
            return ()
        byte3 = self._next_byte()
        if byte3 is None:
            # odd number of codes, the final pair is not nibble-split
            self._count += 1
            self._finish()
            return ((byte1 << NBITS_BYTE) | byte2,)
        first = (byte1 << NBITS_HALF_BYTE) | (byte2 >> NBITS_HALF_BYTE)
        second = ((byte2 & HALF_BYTE_MASK) << NBITS_BYTE) | byte3
        self._count += 2
        return (first, second)

    def __iter__(self):
        step = self.read_step()
        while step:
            following = self.read_step()
            for index, code in enumerate(step):
                last = not following and index == len(step) - 1
                yield Codeword(code, last=last)
            step = following
