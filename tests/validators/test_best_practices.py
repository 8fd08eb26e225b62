"""Tests for best-practice checks."""

from catalog_lint.validators.best_practices import check_best_practices, validate_best_practices


class TestBestPractices:
    def test_summary_and_owner_present(self, resource):
        issues = validate_best_practices(
            [resource("service", "orders", {"summary": "Takes orders", "owners": ["asmith"]})]
        )

        assert issues == []

    def test_missing_summary(self, resource):
        issues = validate_best_practices([resource("event", "placed", {"summary": "   ", "owners": ["a"]})])

        assert len(issues) == 1
        assert issues[0].field == "summary"
        assert issues[0].rule_id == "best-practices/summary-required"
        assert issues[0].message == "Summary is required for better documentation"

    def test_missing_owners(self, resource):
        issues = validate_best_practices([resource("domain", "sales", {"summary": "x", "owners": []})])

        assert len(issues) == 1
        assert issues[0].field == "owners"
        assert issues[0].rule_id == "best-practices/owner-required"

    def test_users_and_teams_exempt(self, resource):
        result = check_best_practices([resource("user", "asmith", {}), resource("team", "core", {})])

        assert result.is_valid
