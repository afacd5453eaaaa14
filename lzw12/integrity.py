class IntegrityChecker:
    def __init__(self, reporter=None, segment_size=4096):
        """Compute SHA256 digests for decoded output and decoder dictionaries.

        Args:
            reporter: Optional reporter used for metric collection.
            segment_size: Number of bytes per segment when hashing output.
        """
        self._reporter = reporter
        self._segment_size = segment_size

    def _hash_bytes(self, data):
        """Return SHA256 hexadecimal digest for *data* bytes."""
        import hashlib

        hasher = hashlib.sha256()
        hasher.update(data)
        return hasher.hexdigest()

    def hash_output(self, output):
        """Hash decoded bytes in fixed-size segments.

        The digest is reported under ``output_hash`` when a reporter is
        provided.
        """
        data = bytes(output or b"")
        segment_hashes = []
        for i in range(0, len(data), self._segment_size):
            segment_hashes.append(self._hash_bytes(data[i : i + self._segment_size]))

        digest = self._hash_bytes("".join(segment_hashes).encode("utf-8"))

        if self._reporter:
            self._reporter.report(
                "output_hash", "SHA256 hash of the decoded output", digest
            )

        return digest

    def hash_dictionary(self, decoder):
        """Hash the code to string mappings of a decoder in code order."""
        if not hasattr(decoder, "entry") or not hasattr(decoder, "size"):
            raise TypeError("Unsupported dictionary type")

        segment_hashes = []
        for code in range(decoder.size):
            code_bytes = code.to_bytes(2, "big", signed=False)
            segment_hashes.append(self._hash_bytes(code_bytes + decoder.entry(code)))

        digest = self._hash_bytes("".join(segment_hashes).encode("utf-8"))

        if self._reporter:
            self._reporter.report(
                "dictionary_hash", "SHA256 hash of the decoder dictionary", digest
            )

        return digest
