import unittest
import math
from decimal import Decimal
from unittest.mock import MagicMock

from checkout_api.config import Settings
from checkout_api.errors import (
    ConfigurationError,
    GatewayError,
    InternalError,
    InvalidArgument,
    PaymentErrorKind,
)
from checkout_api.services.order_service import OrderService, parse_amount, to_minor_units


def make_settings(**overrides):
    values = {
        "RAZORPAY_KEY_ID": "rzp_test_123",
        "RAZORPAY_KEY_SECRET": "s3cr3t",
        "JWT_SECRET": "jwt-test-secret",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


class TestOrderService(unittest.TestCase):
    def setUp(self):
        self.gateway = MagicMock()
        self.gateway.create_order.return_value = {"id": "order_abc", "amount": 49999, "currency": "INR"}
        self.service = OrderService(self.gateway, make_settings())

    def test_default_currency_and_minor_units(self):
        order = self.service.create_order(499.99)

        self.assertEqual(order["id"], "order_abc")
        kwargs = self.gateway.create_order.call_args.kwargs
        self.assertEqual(kwargs["amount"], 49999)
        self.assertEqual(kwargs["currency"], "INR")
        self.assertTrue(kwargs["receipt"].startswith("receipt_"))
        self.assertIsNone(kwargs["notes"])

    def test_explicit_currency_receipt_and_notes(self):
        self.service.create_order("250.75", currency="usd", receipt="cart_42", notes={"cart": "42"})

        self.gateway.create_order.assert_called_once_with(
            amount=25075, currency="USD", receipt="cart_42", notes={"cart": "42"}
        )

    def test_minor_units_match_rounded_amount(self):
        for amount in (1, 0.1, 0.29, 1.005, 0.125, 19.99, 499.99, 1234.5, 99999.99, "10", "0.07", "1.005"):
            with self.subTest(amount=amount):
                self.gateway.reset_mock()
                self.service.create_order(amount)
                sent = self.gateway.create_order.call_args.kwargs["amount"]
                self.assertEqual(sent, math.floor(float(amount) * 100 + 0.5))
                self.assertIsInstance(sent, int)

    def test_float_product_decides_rounding(self):
        self.service.create_order(1.005)
        self.assertEqual(self.gateway.create_order.call_args.kwargs["amount"], 100)

        self.service.create_order(0.125)
        self.assertEqual(self.gateway.create_order.call_args.kwargs["amount"], 13)

    def test_huge_amount_is_forwarded_to_gateway(self):
        self.service.create_order("1e30")

        sent = self.gateway.create_order.call_args.kwargs["amount"]
        self.assertIsInstance(sent, int)
        self.assertEqual(sent, math.floor(1e30 * 100 + 0.5))

    def test_amount_overflowing_float_is_invalid(self):
        for amount in ("1e400", 1e307 * 10, 10 ** 400):
            with self.subTest(amount=amount):
                with self.assertRaises(InvalidArgument):
                    self.service.create_order(amount)
        self.gateway.create_order.assert_not_called()

    def test_rejects_non_positive_and_non_numeric(self):
        for amount in (0, -1, -0.01, "0", "-5", "abc", "", None, True, float("nan"), float("inf"), "Infinity", "sNaN", [1], {"a": 1}):
            with self.subTest(amount=amount):
                with self.assertRaises(InvalidArgument) as ctx:
                    self.service.create_order(amount)
                self.assertEqual(ctx.exception.kind, PaymentErrorKind.INVALID_ARGUMENT)
                self.assertEqual(ctx.exception.status_code, 400)
        self.gateway.create_order.assert_not_called()

    def test_rejects_bad_currency(self):
        with self.assertRaises(InvalidArgument):
            self.service.create_order(100, currency="RUPEE")
        self.gateway.create_order.assert_not_called()

    def test_missing_gateway_is_configuration_error(self):
        service = OrderService(None, make_settings(RAZORPAY_KEY_SECRET=None))
        with self.assertRaises(ConfigurationError) as ctx:
            service.create_order(100)
        self.assertEqual(ctx.exception.status_code, 500)

    def test_invalid_amount_checked_before_configuration(self):
        service = OrderService(None, make_settings(RAZORPAY_KEY_SECRET=None))
        with self.assertRaises(InvalidArgument):
            service.create_order(-1)

    def test_gateway_error_propagates_with_detail(self):
        detail = {"code": "BAD_REQUEST_ERROR", "description": "The amount must be at least INR 1.00"}
        self.gateway.create_order.side_effect = GatewayError(detail["description"], detail=detail)

        with self.assertRaises(GatewayError) as ctx:
            self.service.create_order(0.5)

        self.assertEqual(ctx.exception.message, "The amount must be at least INR 1.00")
        self.assertEqual(ctx.exception.to_payload()["error"], detail)

    def test_unexpected_error_becomes_internal_error(self):
        self.gateway.create_order.side_effect = RuntimeError("boom")

        with self.assertRaises(InternalError) as ctx:
            self.service.create_order(10)

        self.assertEqual(ctx.exception.message, "boom")
        self.assertEqual(ctx.exception.status_code, 500)


class TestAmountHelpers(unittest.TestCase):
    def test_parse_amount_accepts_numeric_strings(self):
        self.assertEqual(parse_amount(" 12.50 "), 12.5)
        self.assertEqual(parse_amount(7), 7.0)
        self.assertEqual(parse_amount(Decimal("3.25")), 3.25)

    def test_halves_round_up(self):
        self.assertEqual(to_minor_units(0.125), 13)
        self.assertEqual(to_minor_units(0.124), 12)
        self.assertEqual(to_minor_units(2.5), 250)

    def test_binary_float_product_is_not_a_tie(self):
        # 1.005 * 100 == 100.49999999999999
        self.assertEqual(to_minor_units(1.005), 100)
        self.assertEqual(to_minor_units(0.005), 1)


if __name__ == "__main__":
    unittest.main()
