"""
Tests for short id generation.
"""
import re

import pytest

from shortener_app.services.exceptions import RandomSourceUnavailableError
from shortener_app.services.id_generator import (
    ID_BYTES,
    IdGenerator,
    generate_id,
)

URL_SAFE_ID = re.compile(r"^[A-Za-z0-9_-]{8}$")


class TestIdGenerator:
    """Test id shape and randomness"""

    def test_generates_eight_characters(self):
        assert len(generate_id()) == 8

    def test_only_url_safe_characters(self):
        for _ in range(500):
            url_id = generate_id()
            assert URL_SAFE_ID.match(url_id)
            assert not set(url_id) & {"+", "/", "="}

    def test_ids_differ(self):
        ids = {generate_id() for _ in range(1000)}
        # 48 bits of entropy: a collision in 1000 draws would be astronomically unlikely
        assert len(ids) == 1000

    def test_draws_six_bytes(self):
        requested = []

        def source(n):
            requested.append(n)
            return bytes(n)

        IdGenerator(random_source=source).generate()

        assert requested == [ID_BYTES] == [6]

    def test_url_safe_encoding(self):
        """Bytes that map to '+' and '/' in standard base64 become '-' and '_'"""
        generator = IdGenerator(random_source=lambda n: b"\xfb\xff\xbf\xfb\xff\xbf")

        assert generator.generate() == "-_-_-_-_"

    def test_same_bytes_same_id(self):
        generator = IdGenerator(random_source=lambda n: b"\x00" * n)

        assert generator.generate() == "AAAAAAAA"
        assert generator.generate() == "AAAAAAAA"


class TestRandomSourceFailure:
    """The generator must fail loudly, never fall back to weaker randomness"""

    def test_source_raises(self):
        def broken(n):
            raise OSError("entropy pool unavailable")

        with pytest.raises(RandomSourceUnavailableError):
            IdGenerator(random_source=broken).generate()

    def test_source_not_implemented(self):
        def missing(n):
            raise NotImplementedError("no urandom on this platform")

        with pytest.raises(RandomSourceUnavailableError):
            IdGenerator(random_source=missing).generate()

    def test_source_returns_too_few_bytes(self):
        with pytest.raises(RandomSourceUnavailableError):
            IdGenerator(random_source=lambda n: b"\x01").generate()

