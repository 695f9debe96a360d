import jwt
import pytest

from modules.auth.exceptions import InvalidTokenError
from modules.auth.interfaces import ITokenService
from modules.auth.tokens import TokenService, signature_of


SECRET = "test-secret-key-for-testing-only"


class TestSignatureOf:
    def test_third_segment(self):
        assert signature_of("aaa.bbb.ccc") == "ccc"

    @pytest.mark.parametrize("token", ["", "aaa", "aaa.bbb", None])
    def test_malformed_tokens_have_empty_signature(self, token):
        assert signature_of(token) == ""


class TestTokenService:
    @pytest.fixture
    def service(self):
        return TokenService(SECRET)

    def test_implements_interface(self, service):
        assert isinstance(service, ITokenService)

    def test_rejects_empty_secret(self):
        with pytest.raises(ValueError):
            TokenService("")

    def test_issue_and_verify(self, service):
        """Should sign the claims plus iat, with no expiry."""
        token = service.issue({"id": 1, "name": "pizza diner", "roles": [{"role": "diner"}]})
        claims = service.verify(token)
        assert claims["id"] == 1
        assert claims["roles"] == [{"role": "diner"}]
        assert isinstance(claims["iat"], int)
        assert "exp" not in claims

    def test_same_claims_give_distinct_tokens(self, service):
        first = service.issue({"id": 1})
        second = service.issue({"id": 1})
        assert service.signature_of(first) != service.signature_of(second)

    def test_signature_matches_jwt_segment(self, service):
        token = service.issue({"id": 1})
        assert service.signature_of(token) == token.split(".")[2]

    def test_verify_rejects_wrong_secret(self, service):
        token = jwt.encode({"id": 1}, "another-secret", algorithm="HS256")
        with pytest.raises(InvalidTokenError):
            service.verify(token)

    def test_verify_rejects_garbage(self, service):
        with pytest.raises(InvalidTokenError):
            service.verify("not-a-valid-token")

    def test_verify_rejects_tampered_payload(self, service):
        header, _, signature = service.issue({"id": 1}).split(".")
        forged_payload = jwt.encode({"id": 2}, SECRET, algorithm="HS256").split(".")[1]
        with pytest.raises(InvalidTokenError):
            service.verify(f"{header}.{forged_payload}.{signature}")
