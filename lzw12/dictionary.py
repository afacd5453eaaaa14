from .core import INIT_DICT_SIZE, MAX_DICT_SIZE


class DictionaryDecoder:
    def __init__(self, reporter=None):
        self._reporter = reporter
        self._table = []
        self._resets = 0
        self._initialise()

    def _initialise(self):
        self._table = [bytes([i]) for i in range(INIT_DICT_SIZE)]
        if self._reporter:
            self._reporter.report(
                'dictionary_size',
                'Number of entries in decoder dictionary',
                len(self._table),
            )

    def reset(self):
        self._initialise()
        self._resets += 1
        if self._reporter:
            count = self._reporter.report('dictionary_resets') or 0
            self._reporter.report(
                'dictionary_resets',
                'Number of times the full dictionary was reinitialised',
                count + 1,
            )

    @property
    def size(self):
        return len(self._table)

    @property
    def resets(self):
        return self._resets

    def entry(self, code):
        if 0 <= code < len(self._table):
            return self._table[code]
        return None

    def _add_sequence(self, seq):
        self._table.append(seq)
        if self._reporter:
            self._reporter.report('dictionary_size', value=len(self._table))
            count = self._reporter.report('decoder_mutations') or 0
            self._reporter.report(
                'decoder_mutations',
                'Number of decoder dictionary mutations',
                count + 1,
            )

    def decode(self, code, last_string):
        from .errors import CorruptStreamError, UnknownCodeError
        # first code of a fresh table adds nothing, else it would be duplicated
        if len(self._table) == INIT_DICT_SIZE and not last_string:
            seq = self.entry(code)
            if seq is None:
                raise UnknownCodeError(code, len(self._table))
            return seq
        if not last_string:
            raise CorruptStreamError('Previous string missing for code %d' % int(code))
        next_code = len(self._table)
        seq = self.entry(code)
        if seq is not None:
            new_seq = last_string + seq[:1]
        elif code == next_code:
            new_seq = last_string + last_string[:1]
            seq = new_seq
        else:
            raise UnknownCodeError(code, next_code)
        self._add_sequence(new_seq)
        if len(self._table) >= MAX_DICT_SIZE:
            self.reset()
        return seq
