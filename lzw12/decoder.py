from .dictionary import DictionaryDecoder
from .unpacker import CodeUnpacker


class DecodeDriver:
    def __init__(self, reporter=None, mode='stream', strict=False):
        if mode not in ('stream', 'array'):
            raise ValueError("mode must be 'stream' or 'array'")
        self._reporter = reporter
        self._mode = mode
        self._strict = strict
        self._dictionary = None
        self._dropped = 0

    @property
    def dictionary(self):
        """Dictionary used by the most recent run."""
        return self._dictionary

    @property
    def dropped_bytes(self):
        return self._dropped

    def _decode_codes(self, codes):
        self._dictionary = DictionaryDecoder(self._reporter)
        self._dropped = 0
        output = bytearray()
        current = b''
        count = 0
        for code in codes:
            current = self._dictionary.decode(int(code), current)
            output.extend(current)
            count += 1
        if self._reporter:
            self._reporter.report(
                'codes_decoded', 'Number of codewords decoded', count
            )
        return output

    def _finish(self, output, dropped):
        from .errors import TruncatedInputError
        from .integrity import IntegrityChecker
        result = bytes(output)
        self._dropped = dropped
        if self._reporter:
            self._reporter.report(
                'output_bytes', 'Number of bytes in the decoded output', len(result)
            )
            checker = IntegrityChecker(self._reporter)
            checker.hash_output(result)
            checker.hash_dictionary(self._dictionary)
        if dropped and self._strict:
            raise TruncatedInputError(dropped)
        return result

    def run(self, stream):
        unpacker = CodeUnpacker(stream, self._reporter)
        output = self._decode_codes(unpacker)
        return self._finish(output, unpacker.dropped_bytes)

    def decode_bytes(self, data):
        if self._mode == 'array':
            from .codes import dropped_bytes, unpack_array
            codes = unpack_array(data)
            dropped = dropped_bytes(data)
            if self._reporter:
                self._reporter.report(
                    'codes_unpacked',
                    'Number of codewords recovered from the input',
                    len(codes),
                )
                if dropped:
                    count = self._reporter.report('truncated_bytes') or 0
                    self._reporter.report(
                        'truncated_bytes',
                        'Number of trailing bytes discarded without a codeword',
                        count + dropped,
                    )
            output = self._decode_codes(codes.tolist())
            return self._finish(output, dropped)
        import io
        with io.BytesIO(bytes(data)) as stream:
            return self.run(stream)

    def decode_file(self, path):
        from .errors import FileOpenError
        try:
            stream = open(path, 'rb')
        except OSError as exc:
            raise FileOpenError(path, exc.strerror) from exc
        with stream:
            if self._mode == 'array':
                return self.decode_bytes(stream.read())
            return self.run(stream)
