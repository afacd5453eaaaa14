import sys


class Reporter:
    _metrics = {}

    @classmethod
    def report(cls, metricname, metricdescription=None, value=None):
        if isinstance(metricname, list):
            return [cls._metrics.get(name) for name in metricname]
        if value is not None:
            cls._metrics[metricname] = value
            return value
        return cls._metrics.get(metricname)


class Application:
    def __init__(self, stdout=None, stderr=None, strict=False, mode='stream'):
        self._stdout = stdout if stdout is not None else sys.stdout.buffer
        self._stderr = stderr if stderr is not None else sys.stderr
        self._strict = strict
        self._mode = mode

    def _parse(self, argv):
        import argparse
        from .errors import UsageError
        parser = argparse.ArgumentParser(
            description='Decompress a fixed-width 12-bit LZW file',
        )
        parser.add_argument('files', nargs='*', help='file to decompress')
        args = parser.parse_args(['--', *argv])
        if len(args.files) < 1:
            raise UsageError('Requires a target file')
        if len(args.files) > 1:
            raise UsageError('Only give one target file to decompress')
        return args.files[0]

    def _status(self, message):
        print(message, file=self._stderr)

    def run(self, argv=None):
        from .decoder import DecodeDriver
        from .errors import DecodeError, UsageError
        try:
            filename = self._parse(sys.argv[1:] if argv is None else argv)
        except UsageError as exc:
            count = Reporter.report('usage_errors') or 0
            Reporter.report('usage_errors', 'Number of invalid invocations', count + 1)
            self._status(str(exc))
            return 2
        driver = DecodeDriver(Reporter, mode=self._mode, strict=self._strict)
        self._status(f'Decompressing {filename} ...')
        try:
            output = driver.decode_file(filename)
        except DecodeError as exc:
            count = Reporter.report('decode_failures') or 0
            Reporter.report('decode_failures', 'Number of failed decode runs', count + 1)
            self._status(str(exc))
            return 1
        if driver.dropped_bytes:
            self._status(
                f'warning: {driver.dropped_bytes} trailing byte(s) discarded'
            )
        self._status('decompression complete!')
        self._stdout.write(output)
        self._stdout.flush()
        return 0


def main():
    return Application().run()

