import pytest

from roomlog.core.security import PasswordHasher, SecretKeyIssuer


class TestPasswordHasher:
    @pytest.fixture(scope="class")
    def hasher(self) -> PasswordHasher:
        return PasswordHasher()

    def test_default_work_factor_is_ten_rounds(self, hasher):
        digest = hasher.hash("pw1")
        assert digest.startswith("$2b$10$")

    def test_digest_never_equals_plaintext(self, hasher):
        digest = hasher.hash("pw1")
        assert digest != "pw1"
        assert "pw1" not in digest

    def test_same_password_hashes_differently(self, hasher):
        assert hasher.hash("pw1") != hasher.hash("pw1")

    def test_verify(self, hasher):
        digest = hasher.hash("pw1")
        assert hasher.verify("pw1", digest) is True
        assert hasher.verify("wrong", digest) is False

    def test_verify_malformed_digest_is_false(self, hasher):
        assert hasher.verify("pw1", "not-a-bcrypt-digest") is False

    def test_custom_rounds(self):
        digest = PasswordHasher(rounds=4).hash("pw1")
        assert digest.startswith("$2b$04$")


class TestSecretKeyIssuer:
    def test_issues_32_bytes_hex_by_default(self):
        key = SecretKeyIssuer().issue()
        assert len(key) == 64
        int(key, 16)

    def test_ten_thousand_keys_without_collision(self):
        issuer = SecretKeyIssuer()
        keys = {issuer.issue() for _ in range(10_000)}
        assert len(keys) == 10_000

    def test_rejects_fewer_than_128_bits(self):
        with pytest.raises(ValueError):
            SecretKeyIssuer(num_bytes=8)

    def test_custom_length(self):
        assert len(SecretKeyIssuer(num_bytes=16).issue()) == 32
