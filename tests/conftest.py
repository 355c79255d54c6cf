import os

import pytest

from encryptkit.core.crypto_engine import (
    CipherKind,
    CipherOperationFailedError,
    Status,
)

# A key of a size every provider backend accepts, per kind.
KEYS = {
    CipherKind.AES:        bytes(range(32)),
    CipherKind.DES:        bytes.fromhex("133457799bbcdff1"),
    CipherKind.TRIPLE_DES: bytes(range(1, 25)),
    CipherKind.CAST:       bytes(range(16)),
    CipherKind.RC4:        bytes(range(16)),
    CipherKind.RC2:        bytes(range(16)),
    CipherKind.BLOWFISH:   bytes(range(16)),
}


@pytest.fixture
def sample_file(tmp_path):
    """A 10 000-byte file that does not align with any chunk size."""
    path = tmp_path / "sample.bin"
    path.write_bytes(os.urandom(10_000))
    return path


@pytest.fixture
def run_or_skip():
    """Call *fn*, skipping the test when OpenSSL lacks the algorithm."""
    def _run(fn, *args, **kwargs):
        try:
            return fn(*args, **kwargs)
        except CipherOperationFailedError as exc:
            if exc.status == Status.UNIMPLEMENTED:
                pytest.skip("cipher not available in the linked OpenSSL")
            raise
    return _run
