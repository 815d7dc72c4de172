import pytest

from app.api.security import POLICIES, Policy, find_policy, has_role, parse_user_id
from app.domain.enums import UserRole


@pytest.mark.parametrize(
    "method, path, role",
    [
        ("POST", "/api/products", UserRole.ADMIN),
        ("POST", "/api/products/", UserRole.ADMIN),
        ("PUT", "/api/products/7", UserRole.ADMIN),
        ("DELETE", "/api/products/7", UserRole.ADMIN),
        ("GET", "/api/users", UserRole.ADMIN),
        ("PUT", "/api/users/3", UserRole.ADMIN),
        ("GET", "/api/products", None),
        ("GET", "/api/products/search", None),
        ("POST", "/api/cart", None),
        ("POST", "/api/users", None),
        ("GET", "/api/users/3", None),
    ],
)
def test_policy_table(method, path, role):
    policy = find_policy(method, path)

    assert (policy.role if policy else None) == role


def test_first_matching_policy_wins():
    policies = (
        Policy("GET", "/api/reports/public", UserRole.CUSTOMER),
        Policy("GET", "/api/reports/*", UserRole.ADMIN),
    )

    assert find_policy("get", "/api/reports/public", policies).role == UserRole.CUSTOMER
    assert find_policy("GET", "/api/reports/daily", policies).role == UserRole.ADMIN


def test_admin_satisfies_customer_requirement():
    assert has_role(UserRole.ADMIN, UserRole.CUSTOMER)
    assert has_role(UserRole.ADMIN, UserRole.ADMIN)
    assert has_role(UserRole.CUSTOMER, UserRole.CUSTOMER)
    assert not has_role(UserRole.CUSTOMER, UserRole.ADMIN)


@pytest.mark.parametrize("raw, expected", [("12", 12), ("0", None), ("-3", None), ("x", None), (None, None)])
def test_parse_user_id(raw, expected):
    assert parse_user_id(raw) == expected


def test_policies_only_guard_writes_on_catalogue():
    assert {p.method for p in POLICIES if p.pattern.startswith("/api/products")} == {"POST", "PUT", "DELETE"}
