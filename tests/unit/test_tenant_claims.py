"""Tests for tenant role claims and the claims principal."""

from uuid import UUID, uuid4

import pytest
from hypothesis import given
from hypothesis import strategies as st
from structlog.testing import capture_logs

from src.moneybook.core.tenancy import (
    TENANT_ROLE_CLAIM,
    ClaimsPrincipal,
    TenantClaim,
    parse_tenant_claims,
    tenant_claims_from_payload,
)
from src.moneybook.models.enums import TenantRole
from tests.helpers import make_principal

pytestmark = pytest.mark.unit

TENANT_KEY = UUID("0b6f3a58-6a1e-4c1a-9b2f-4e4f1a7d9c10")


class TestTenantClaim:
    def test_encode(self):
        claim = TenantClaim(tenant_key=TENANT_KEY, role=TenantRole.EDITOR)

        assert claim.encode() == "0b6f3a58-6a1e-4c1a-9b2f-4e4f1a7d9c10:Editor"

    def test_parse(self):
        claim = TenantClaim.parse("0b6f3a58-6a1e-4c1a-9b2f-4e4f1a7d9c10:Owner")

        assert claim == TenantClaim(tenant_key=TENANT_KEY, role=TenantRole.OWNER)

    @pytest.mark.parametrize(
        "value",
        [
            "",
            "Owner",
            "0b6f3a58-6a1e-4c1a-9b2f-4e4f1a7d9c10",
            "0b6f3a58-6a1e-4c1a-9b2f-4e4f1a7d9c10:",
            "0b6f3a58-6a1e-4c1a-9b2f-4e4f1a7d9c10:owner",
            "0b6f3a58-6a1e-4c1a-9b2f-4e4f1a7d9c10:Admin",
            "0b6f3a58-6a1e-4c1a-9b2f-4e4f1a7d9c10:Owner:extra",
            "not-a-uuid:Owner",
            ":Owner",
        ],
    )
    def test_parse_rejects_malformed(self, value: str):
        with pytest.raises(ValueError):
            TenantClaim.parse(value)

    @given(key=st.uuids(), role=st.sampled_from(list(TenantRole)))
    def test_encoded_claim_parses_back(self, key: UUID, role: TenantRole):
        claim = TenantClaim(tenant_key=key, role=role)

        assert TenantClaim.parse(claim.encode()) == claim

    def test_is_immutable(self):
        claim = TenantClaim(tenant_key=TENANT_KEY, role=TenantRole.VIEWER)

        with pytest.raises(AttributeError):
            claim.role = TenantRole.OWNER  # type: ignore[misc]


class TestParseTenantClaims:
    def test_malformed_entries_are_dropped_and_logged(self):
        good = f"{TENANT_KEY}:Viewer"

        with capture_logs() as logs:
            claims = parse_tenant_claims([good, "garbage", 42, f"{uuid4()}:Superuser"])

        assert claims == [TenantClaim(tenant_key=TENANT_KEY, role=TenantRole.VIEWER)]
        assert [entry["log_level"] for entry in logs] == ["warning", "warning", "warning"]

    @pytest.mark.parametrize(
        ("payload", "expected_count"),
        [
            ({}, 0),
            ({TENANT_ROLE_CLAIM: None}, 0),
            ({TENANT_ROLE_CLAIM: []}, 0),
            ({TENANT_ROLE_CLAIM: f"{TENANT_KEY}:Owner"}, 1),
            ({TENANT_ROLE_CLAIM: [f"{TENANT_KEY}:Owner", f"{uuid4()}:Editor"]}, 2),
            ({TENANT_ROLE_CLAIM: {"tenant": "Owner"}}, 0),
        ],
    )
    def test_payload_shapes(self, payload: dict, expected_count: int):
        assert len(tenant_claims_from_payload(payload)) == expected_count


class TestClaimsPrincipal:
    def test_claim_for_finds_matching_tenant(self):
        other = uuid4()
        principal = make_principal(uuid4(), (other, TenantRole.OWNER), (TENANT_KEY, TenantRole.VIEWER))

        claim = principal.claim_for(TENANT_KEY)

        assert claim is not None
        assert claim.role is TenantRole.VIEWER

    def test_claim_for_unknown_tenant(self):
        principal = make_principal(uuid4(), (uuid4(), TenantRole.OWNER))

        assert principal.claim_for(TENANT_KEY) is None

    def test_principal_without_claims(self):
        principal = ClaimsPrincipal(user_id=uuid4())

        assert principal.tenant_claims == ()
        assert principal.claim_for(TENANT_KEY) is None
