import io
import random
import unittest
import sys
import pathlib

sys.path.append(str(pathlib.Path(__file__).resolve().parent.parent))
import numpy as np

from lzw12.codes import dropped_bytes, unpack_array
from lzw12.unpacker import CodeUnpacker


class TestUnpackArray(unittest.TestCase):
    def test_matches_streaming_unpacker(self):
        rng = random.Random(7)
        for length in range(0, 12):
            data = bytes(rng.randrange(256) for _ in range(length))
            unpacker = CodeUnpacker(io.BytesIO(data))
            expected = [int(c) for c in unpacker]
            codes = unpack_array(data)
            print('Length', length, 'codes:', codes.tolist())
            self.assertEqual(codes.dtype, np.uint16)
            self.assertEqual(codes.tolist(), expected)
            self.assertEqual(dropped_bytes(data), unpacker.dropped_bytes)

    def test_known_values(self):
        self.assertEqual(unpack_array(bytes([0x41, 0x00, 0x42])).tolist(), [0x410, 0x042])
        self.assertEqual(unpack_array(bytes([0x00, 0x41])).tolist(), [65])
        self.assertEqual(unpack_array(bytes([0xFF, 0xFF])).tolist(), [0xFFFF])

    def test_empty(self):
        codes = unpack_array(b'')
        self.assertEqual(codes.shape, (0,))
        self.assertEqual(dropped_bytes(b''), 0)


if __name__ == '__main__':
    unittest.main()
