import unittest
from datetime import date, datetime, timedelta, timezone

from hospital_inventory.core.tiers import (
    ExpiryTier,
    QuantityTier,
    days_until,
    expiry_tier,
    quantity_tier,
)


class QuantityTierTest(unittest.TestCase):
    def test_boundaries(self):
        cases = [
            (0, QuantityTier.LOW),
            (20, QuantityTier.LOW),
            (21, QuantityTier.MEDIUM),
            (50, QuantityTier.MEDIUM),
            (51, QuantityTier.HIGH),
            (500, QuantityTier.HIGH),
        ]
        for quantity, expected in cases:
            with self.subTest(quantity=quantity):
                self.assertEqual(quantity_tier(quantity), expected)

    def test_accepts_numeric_strings(self):
        self.assertEqual(quantity_tier("75"), QuantityTier.HIGH)
        self.assertEqual(quantity_tier(" 30 "), QuantityTier.MEDIUM)

    def test_unparseable_quantity_is_low(self):
        self.assertEqual(quantity_tier("n/a"), QuantityTier.LOW)
        self.assertEqual(quantity_tier(None), QuantityTier.LOW)
        for value in ("inf", "-inf", "1e400", "nan"):
            with self.subTest(value=value):
                self.assertEqual(quantity_tier(value), QuantityTier.LOW)


class ExpiryTierTest(unittest.TestCase):
    def setUp(self):
        self.now = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)

    def test_boundaries(self):
        cases = [
            (timedelta(days=-3), ExpiryTier.URGENT),
            (timedelta(days=10), ExpiryTier.URGENT),
            (timedelta(days=30), ExpiryTier.URGENT),
            (timedelta(days=30, hours=1), ExpiryTier.WARNING),
            (timedelta(days=60), ExpiryTier.WARNING),
            (timedelta(days=60, hours=1), ExpiryTier.SAFE),
            (timedelta(days=365), ExpiryTier.SAFE),
        ]
        for offset, expected in cases:
            with self.subTest(offset=offset):
                self.assertEqual(expiry_tier(self.now + offset, self.now), expected)

    def test_plain_date_is_midnight_utc(self):
        # 2026-03-02 00:00 is 59.5 days after the reference time.
        self.assertAlmostEqual(days_until(date(2026, 3, 2), self.now), 59.5)
        self.assertEqual(expiry_tier(date(2026, 3, 2), self.now), ExpiryTier.WARNING)

    def test_accepts_iso_strings(self):
        self.assertEqual(expiry_tier("2026-06-01", self.now), ExpiryTier.SAFE)
        self.assertEqual(expiry_tier("2026-01-05T00:00:00Z", self.now), ExpiryTier.URGENT)

    def test_unreadable_expiry_is_urgent(self):
        self.assertIsNone(days_until("soon", self.now))
        self.assertEqual(expiry_tier("soon", self.now), ExpiryTier.URGENT)

    def test_tiers_are_independent(self):
        expiry = self.now + timedelta(days=10)
        self.assertEqual(quantity_tier(80), QuantityTier.HIGH)
        self.assertEqual(expiry_tier(expiry, self.now), ExpiryTier.URGENT)


if __name__ == "__main__":
    unittest.main()
