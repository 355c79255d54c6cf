"""Unit tests for HashEngine / HashRequest / FileChunkReader."""
import hashlib
import hmac
import io

import pytest

from encryptkit.core.crypto_engine import (
    DigestKind,
    FileChunkReader,
    FileOpenFailedError,
    FileReadError,
    HashEngine,
    HashRequest,
    InvalidInputError,
    UnknownHashSourceError,
)
from encryptkit.core.crypto_engine import hash_crypto

REFERENCE = {
    DigestKind.MD5:    hashlib.md5,
    DigestKind.SHA1:   hashlib.sha1,
    DigestKind.SHA224: hashlib.sha224,
    DigestKind.SHA256: hashlib.sha256,
    DigestKind.SHA384: hashlib.sha384,
    DigestKind.SHA512: hashlib.sha512,
}

EXPECTED_SIZES = {
    DigestKind.MD5:    16,
    DigestKind.SHA1:   20,
    DigestKind.SHA224: 28,
    DigestKind.SHA256: 32,
    DigestKind.SHA384: 48,
    DigestKind.SHA512: 64,
}


class TestHashRequest:
    def test_requires_a_source(self):
        with pytest.raises(UnknownHashSourceError):
            HashRequest()

    def test_rejects_both_sources(self, sample_file):
        with pytest.raises(InvalidInputError):
            HashRequest(data=b"x", file_path=sample_file)

    def test_defaults_to_md5_without_key(self):
        req = HashRequest.for_data(b"abc")
        assert req.kind is DigestKind.MD5
        assert req.hmac_key is None

    def test_empty_buffer_is_a_valid_source(self):
        assert HashRequest(data=b"").data == b""


class TestBufferDigest:
    @pytest.mark.parametrize("kind", list(DigestKind))
    def test_digest_length(self, kind):
        out = HashEngine().digest(HashRequest.for_data(b"payload", kind))
        assert len(out) == EXPECTED_SIZES[kind] == kind.digest_size

    @pytest.mark.parametrize("kind", list(DigestKind))
    def test_matches_reference(self, kind):
        data = b"The quick brown fox jumps over the lazy dog"
        out  = HashEngine().digest_bytes(data, kind)
        assert out == REFERENCE[kind](data).digest()

    @pytest.mark.parametrize("kind", list(DigestKind))
    def test_hmac_matches_reference(self, kind):
        key, data = b"secret-key", b"message body"
        out = HashEngine().digest_bytes(data, kind, hmac_key=key)
        assert out == hmac.new(key, data, REFERENCE[kind]).digest()

    def test_empty_hmac_key_still_selects_hmac(self):
        data = b"abc"
        out  = HashEngine().digest_bytes(data, DigestKind.SHA256, hmac_key=b"")
        assert out == hmac.new(b"", data, hashlib.sha256).digest()
        assert out != hashlib.sha256(data).digest()

    def test_hello_world_md5(self):
        data = "hello, world!".encode("utf-8")
        hexd = HashEngine().hex_digest(HashRequest.for_data(data))
        assert hexd == hashlib.md5(data).hexdigest()

    def test_hex_is_lowercase_two_chars_per_byte(self):
        hexd = HashEngine().hex_digest(
            HashRequest.for_data(b"\x00\xff", DigestKind.SHA512)
        )
        assert len(hexd) == 128
        assert hexd == hexd.lower()
        assert all(c in "0123456789abcdef" for c in hexd)

    def test_known_sha256_of_empty_input(self):
        hexd = HashEngine().hex_digest(
            HashRequest.for_data(b"", DigestKind.SHA256)
        )
        assert hexd == (
            "e3b0c44298fc1c149afbf4c8996fb924"
            "27ae41e4649b934ca495991b7852b855"
        )


class TestFileDigest:
    @pytest.mark.parametrize("kind", list(DigestKind))
    def test_file_matches_buffer(self, kind, sample_file):
        engine = HashEngine()
        data   = sample_file.read_bytes()
        assert engine.digest_file(sample_file, kind) == \
            engine.digest_bytes(data, kind)

    @pytest.mark.parametrize("chunk_size", [1, 7, 64, 4096, 1 << 20])
    def test_chunk_size_does_not_change_digest(self, chunk_size, sample_file):
        data = sample_file.read_bytes()
        out  = HashEngine(chunk_size=chunk_size).digest_file(
            sample_file, DigestKind.SHA256
        )
        assert out == hashlib.sha256(data).digest()

    @pytest.mark.parametrize("chunk_size", [1, 13, 4096, 1 << 20])
    def test_chunked_hmac_matches_one_shot(self, chunk_size, sample_file):
        key  = b"k" * 80
        data = sample_file.read_bytes()
        out  = HashEngine(chunk_size=chunk_size).digest_file(
            sample_file, DigestKind.SHA384, hmac_key=key
        )
        assert out == hmac.new(key, data, hashlib.sha384).digest()

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty"
        path.write_bytes(b"")
        assert HashEngine().hex_digest(HashRequest.for_file(path)) == \
            hashlib.md5(b"").hexdigest()

    def test_accepts_str_path(self, sample_file):
        engine = HashEngine()
        assert engine.digest_file(str(sample_file)) == \
            engine.digest_file(sample_file)

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileOpenFailedError) as info:
            HashEngine().digest_file(tmp_path / "nope.bin")
        assert info.value.path == tmp_path / "nope.bin"

    def test_directory_raises(self, tmp_path):
        with pytest.raises(FileOpenFailedError):
            HashEngine().digest_file(tmp_path, DigestKind.SHA1, hmac_key=b"k")


class _BrokenFile(io.BytesIO):
    """Returns one chunk, then fails like a flaky disk."""

    def __init__(self):
        super().__init__(b"x" * 100)
        self.reads = 0

    def read(self, size=-1):
        self.reads += 1
        if self.reads > 1:
            raise OSError(5, "Input/output error")
        return super().read(size)


class TestReadErrors:
    def test_read_error_is_not_end_of_file(self, monkeypatch, sample_file):
        broken = _BrokenFile()
        monkeypatch.setattr(hash_crypto, "open",
                            lambda *a, **kw: broken, raising=False)
        with pytest.raises(FileReadError):
            HashEngine(chunk_size=10).digest_file(sample_file)
        assert broken.closed

    def test_reader_closes_on_success(self, sample_file):
        with FileChunkReader(sample_file, 4096) as reader:
            chunks = list(reader)
            fh = reader._fh
        assert b"".join(chunks) == sample_file.read_bytes()
        assert fh.closed
        assert reader._fh is None

    def test_reader_rejects_bad_chunk_size(self, sample_file):
        with pytest.raises(InvalidInputError):
            FileChunkReader(sample_file, 0)

    @pytest.mark.parametrize("chunk_size", [0, -1])
    def test_engine_rejects_bad_chunk_size(self, chunk_size):
        with pytest.raises(InvalidInputError):
            HashEngine(chunk_size=chunk_size)

    def test_iterating_unopened_reader_raises(self, sample_file):
        with pytest.raises(FileReadError):
            list(FileChunkReader(sample_file, 16))
