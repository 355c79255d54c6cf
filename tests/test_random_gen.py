"""Unit tests for SecureRandom / KeyKind."""
import base64

import pytest

from encryptkit import CipherKind, InvalidInputError, KeyKind, SecureRandom


class TestRandomData:
    @pytest.mark.parametrize("length", [0, 1, 16, 1000])
    def test_length(self, length):
        assert len(SecureRandom.random_data(length)) == length

    def test_differs_between_calls(self):
        assert SecureRandom.random_data(32) != SecureRandom.random_data(32)

    def test_negative_length(self):
        with pytest.raises(InvalidInputError):
            SecureRandom.random_data(-1)


class TestKeys:
    @pytest.mark.parametrize("kind, length", [
        (KeyKind.AES128, 16), (KeyKind.AES192, 24), (KeyKind.AES256, 32),
        (KeyKind.DES, 8), (KeyKind.TRIPLE_DES, 24),
    ])
    def test_key_kind_lengths(self, kind, length):
        key = SecureRandom.generate_key(kind)
        assert len(base64.b64decode(key, validate=True)) == length

    def test_random_key_is_base64(self):
        assert len(base64.b64decode(SecureRandom.random_key(7))) == 7

    @pytest.mark.parametrize("kind, size", [
        (CipherKind.AES, 16), (CipherKind.DES, 8), (CipherKind.BLOWFISH, 8),
    ])
    def test_iv_is_one_block(self, kind, size):
        assert len(SecureRandom.generate_iv(kind)) == size
