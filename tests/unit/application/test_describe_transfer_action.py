"""
Unit tests for DescribeTransferAction use case.

Usage:
    pytest tests/unit/application/test_describe_transfer_action.py
"""

from virement.application.use_cases import DescribeTransferAction


class TestDescribeTransferAction:
    """Test DescribeTransferAction use case."""

    def test_descriptor_fields(self):
        """Test descriptor carries fixed title, label and description."""
        descriptor = DescribeTransferAction().execute(
            "https://example.com", "/api/actions/transfer"
        )

        assert descriptor.icon == "https://example.com/solana-logo.png"
        assert descriptor.title == "Transfer SOL"
        assert descriptor.description == "Send SOL to another wallet address"
        assert descriptor.label == "Transfer"

    def test_linked_action(self):
        """Test single linked action keeps placeholders unexpanded."""
        descriptor = DescribeTransferAction().execute(
            "https://example.com", "/api/actions/transfer"
        )

        assert len(descriptor.actions) == 1
        action = descriptor.actions[0]
        assert action.label == "Send SOL"
        assert action.type == "transaction"
        assert action.href == "/api/actions/transfer?to={to}&amount={amount}"

        params = [(p.name, p.label, p.required) for p in action.parameters]
        assert params == [
            ("to", "Recipient Address", True),
            ("amount", "Amount (SOL)", True),
        ]

    def test_icon_follows_origin(self):
        """Test icon is resolved against the inbound origin."""
        use_case = DescribeTransferAction(icon_path="/static/icon.png")

        descriptor = use_case.execute("http://localhost:8000", "/transfer")

        assert descriptor.icon == "http://localhost:8000/static/icon.png"
        assert descriptor.actions[0].href == "/transfer?to={to}&amount={amount}"

    def test_deterministic(self):
        """Test same inputs give equal descriptors."""
        use_case = DescribeTransferAction()

        first = use_case.execute("https://a.io", "/api/actions/transfer")
        second = use_case.execute("https://a.io", "/api/actions/transfer")

        assert first == second
