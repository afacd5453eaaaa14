import unittest
import sys
import pathlib

sys.path.append(str(pathlib.Path(__file__).resolve().parent.parent))
from lzw12.core import format_bits
from lzw12.errors import (
    CorruptStreamError,
    DecodeError,
    FileOpenError,
    TruncatedInputError,
    UnknownCodeError,
    UsageError,
)


class TestErrorCases(unittest.TestCase):
    def test_exception_hierarchy(self):
        for cls in (UsageError, FileOpenError, TruncatedInputError, CorruptStreamError):
            self.assertTrue(issubclass(cls, DecodeError))
        self.assertTrue(issubclass(UnknownCodeError, CorruptStreamError))

    def test_unknown_code_message(self):
        error = UnknownCodeError(0x410, 256)
        print('Message:', error)
        self.assertEqual(
            str(error), 'Unknown code 1040 (00000100 00010000), next code 256'
        )

    def test_default_messages(self):
        self.assertEqual(str(UsageError()), 'Requires a target file')
        self.assertEqual(str(FileOpenError('x.lzw')), 'No such file: x.lzw')
        self.assertEqual(TruncatedInputError(1).dropped, 1)

    def test_format_bits(self):
        self.assertEqual(format_bits(65), '00000000 01000001')
        self.assertEqual(format_bits(0xFFFF), '11111111 11111111')


if __name__ == '__main__':
    unittest.main()
