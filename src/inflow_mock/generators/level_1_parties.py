"""
Level 1 Generator: Parties (vendors, customers).

Tables generated:
- vendors
- customers

Names are sampled without replacement from fixed pools (shuffle, then take
the first N). Requests larger than a pool are clamped to the pool size.
Contact names and street addresses come from Faker; email domains and
phone area codes from fixed vocabularies.
"""

from .base import BaseLevelGenerator
from ..constants import AREA_CODES, CUSTOMERS, EMAIL_DOMAINS, VENDORS
from ..helpers import party_code


class Level1Generator(BaseLevelGenerator):
    """Generate Level 1 party data."""

    LEVEL = 1

    def generate(self) -> None:
        self.report("  Level 1: Parties (vendors, customers)")

        self._generate_vendors()
        self._generate_customers()

        self.ctx.generated_levels.add(self.LEVEL)
        self.report(
            f"    Generated: {len(self.data['vendors'])} vendors, "
            f"{len(self.data['customers'])} customers"
        )

    def _sample_pool(self, pool: tuple, requested: int, label: str) -> list:
        if requested > len(pool):
            self.report(
                f"    Note: {requested} {label} requested, clamped to pool size {len(pool)}"
            )
        return self.rng.shuffle(pool)[:requested]

    def _contact(self) -> dict[str, str]:
        """Contact person, email, phone and postal address for a party."""
        first = self.fake.first_name()
        last = self.fake.last_name()
        domain = self.rng.pick(EMAIL_DOMAINS)
        area = self.rng.pick(AREA_CODES)
        return {
            "contact_name": f"{first} {last}",
            "email": f"{first[0]}{last}@{domain}".lower().replace("'", ""),
            "phone": f"({area}) {self.rng.range(200, 999)}-{self.rng.range(1000, 9999)}",
            "address": f"{self.rng.range(1, 9999)} {self.fake.street_name()}",
            "city": self.fake.city(),
            "state": self.fake.state_abbr(),
            "postal_code": self.fake.zipcode(),
        }

    def _generate_vendors(self) -> None:
        currency_id = self.ctx.base_currency()["currency_id"]
        for vendor in self._sample_pool(VENDORS, self.ctx.config.vendors, "vendors"):
            vendor_id = self.new_id()
            name = vendor["name"]
            row = {
                "vendor_id": vendor_id,
                "name": name,
                "vendor_code": party_code(name),
                "specialization": vendor["specialization"],
                "lead_time_days": vendor["lead_time"],
                "is_active": True,
                "currency_id": currency_id,
                "payment_terms_id": self.rng.pick(self.data["payment_terms"])["payment_terms_id"],
                "taxing_scheme_id": self.rng.pick(self.data["taxing_schemes"])["taxing_scheme_id"],
            }
            row.update(self._contact())
            row["timestamp"] = self.now()
            self.data["vendors"].append(row)

    def _generate_customers(self) -> None:
        currency_id = self.ctx.base_currency()["currency_id"]
        for name in self._sample_pool(CUSTOMERS, self.ctx.config.customers, "customers"):
            customer_id = self.new_id()
            row = {
                "customer_id": customer_id,
                "name": name,
                "customer_code": party_code(name),
                "is_active": True,
                "currency_id": currency_id,
                "pricing_scheme_id": self.rng.pick(self.data["pricing_schemes"])["pricing_scheme_id"],
                "payment_terms_id": self.rng.pick(self.data["payment_terms"])["payment_terms_id"],
                "taxing_scheme_id": self.rng.pick(self.data["taxing_schemes"])["taxing_scheme_id"],
            }
            row.update(self._contact())
            row["timestamp"] = self.now()
            self.data["customers"].append(row)
