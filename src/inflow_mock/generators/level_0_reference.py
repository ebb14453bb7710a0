"""
Level 0 Generator: Reference data with no FK dependencies.

Tables generated:
- currencies
- payment_terms
- pricing_schemes
- taxing_schemes
- tax_codes
- adjustment_reasons
- operation_types
- categories
- locations
- team_members
- custom_field_definitions
- custom_field_dropdown_options
- custom_fields

This is the foundation level - all other levels depend on Level 0 data.
"""

import json
from decimal import Decimal

from .base import BaseLevelGenerator
from ..constants import (
    ADJUSTMENT_REASONS,
    CATEGORIES,
    CURRENCIES,
    CUSTOM_FIELD_DEFINITIONS,
    CUSTOM_FIELD_DROPDOWN_OPTIONS,
    CUSTOM_FIELD_PRINT_FLAGS,
    LOCATIONS,
    MAX_CATEGORIES,
    OPERATION_TYPES,
    PAYMENT_TERMS,
    PRICING_SCHEMES,
    RECEIVABLE_LOCATIONS,
    SHIPPABLE_LOCATIONS,
    TAXING_SCHEMES,
    TEAM_MEMBERS,
)


class Level0Generator(BaseLevelGenerator):
    """
    Generate Level 0 reference data.

    Reference rows have fixed cardinality, except locations, which are the
    first N of the location pool.
    """

    LEVEL = 0

    def generate(self) -> None:
        self.report("  Level 0: Reference data (currencies, schemes, categories, locations...)")

        self._generate_currencies()
        self._generate_payment_terms()
        self._generate_pricing_schemes()
        self._generate_taxing_schemes()
        self._generate_adjustment_reasons()
        self._generate_operation_types()
        self._generate_categories()
        self._generate_locations()
        self._generate_team_members()
        self._generate_custom_fields()

        self.ctx.generated_levels.add(self.LEVEL)
        self.report(
            f"    Generated: {len(self.data['categories'])} categories, "
            f"{len(self.data['locations'])} locations, "
            f"{len(self.data['tax_codes'])} tax codes, "
            f"{len(self.data['team_members'])} team members"
        )

    def _generate_currencies(self) -> None:
        for i, cur in enumerate(CURRENCIES):
            currency_id = self.new_id()
            self.data["currencies"].append(
                {
                    "currency_id": currency_id,
                    "name": cur["name"],
                    "code": cur["code"],
                    "symbol": cur["symbol"],
                    "exchange_rate": Decimal(cur["exchange_rate"]),
                    "is_base_currency": i == 0,
                    "timestamp": self.now(),
                }
            )

    def _generate_payment_terms(self) -> None:
        for term in PAYMENT_TERMS:
            terms_id = self.new_id()
            discount = term["discount_percent"]
            self.data["payment_terms"].append(
                {
                    "payment_terms_id": terms_id,
                    "name": term["name"],
                    "net_days": term["net_days"],
                    "discount_days": term["discount_days"],
                    "discount_percent": Decimal(discount) if discount is not None else None,
                    "timestamp": self.now(),
                }
            )

    def _generate_pricing_schemes(self) -> None:
        """Standard (the first scheme) is the default."""
        for i, scheme in enumerate(PRICING_SCHEMES):
            scheme_id = self.new_id()
            self.data["pricing_schemes"].append(
                {
                    "pricing_scheme_id": scheme_id,
                    "name": scheme["name"],
                    "is_default": i == 0,
                    "timestamp": self.now(),
                }
            )

    def _generate_taxing_schemes(self) -> None:
        """Taxing schemes first, then their tax codes (first code per scheme is default)."""
        for scheme in TAXING_SCHEMES:
            scheme_id = self.new_id()
            self.data["taxing_schemes"].append(
                {
                    "taxing_scheme_id": scheme_id,
                    "name": scheme["name"],
                    "timestamp": self.now(),
                }
            )

        for scheme, row in zip(TAXING_SCHEMES, self.data["taxing_schemes"]):
            scheme_id = row["taxing_scheme_id"]
            for i, code in enumerate(scheme["tax_codes"]):
                code_id = self.new_id()
                self.data["tax_codes"].append(
                    {
                        "tax_code_id": code_id,
                        "taxing_scheme_id": scheme_id,
                        "name": code["name"],
                        "rate": Decimal(code["rate"]),
                        "is_default": i == 0,
                        "timestamp": self.now(),
                    }
                )

    def _generate_adjustment_reasons(self) -> None:
        for name in ADJUSTMENT_REASONS:
            reason_id = self.new_id()
            self.data["adjustment_reasons"].append(
                {
                    "adjustment_reason_id": reason_id,
                    "name": name,
                    "is_active": True,
                    "timestamp": self.now(),
                }
            )

    def _generate_operation_types(self) -> None:
        for name in OPERATION_TYPES:
            op_id = self.new_id()
            self.data["operation_types"].append(
                {
                    "operation_type_id": op_id,
                    "name": name,
                    "timestamp": self.now(),
                }
            )

    def _generate_categories(self) -> None:
        """Only the first MAX_CATEGORIES of the pool are instantiated."""
        for cat in CATEGORIES[:MAX_CATEGORIES]:
            category_id = self.new_id()
            self.data["categories"].append(
                {
                    "category_id": category_id,
                    "name": cat["name"],
                    "description": cat["description"],
                    "is_active": True,
                    "timestamp": self.now(),
                }
            )

    def _generate_locations(self) -> None:
        requested = self.ctx.config.locations
        if requested > len(LOCATIONS):
            self.report(
                f"    Note: {requested} locations requested, "
                f"clamped to pool size {len(LOCATIONS)}"
            )
        for loc in LOCATIONS[:requested]:
            location_id = self.new_id()
            abbr = loc["abbreviation"]
            self.data["locations"].append(
                {
                    "location_id": location_id,
                    "name": loc["name"],
                    "abbreviation": abbr,
                    "is_active": True,
                    "is_shippable": abbr in SHIPPABLE_LOCATIONS,
                    "is_receivable": abbr in RECEIVABLE_LOCATIONS,
                    "timestamp": self.now(),
                }
            )

    def _generate_team_members(self) -> None:
        for member in TEAM_MEMBERS:
            member_id = self.new_id()
            self.data["team_members"].append(
                {
                    "team_member_id": member_id,
                    "name": member["name"],
                    "email": member["email"],
                    "is_active": True,
                }
            )

    def _generate_custom_fields(self) -> None:
        """Custom field definitions, dropdown options and the print settings row."""
        for definition in CUSTOM_FIELD_DEFINITIONS:
            self.data["custom_field_definitions"].append(
                {
                    "custom_field_definition_id": self.new_id(),
                    "label": definition["label"],
                    "property_name": definition["property_name"],
                    "custom_field_type": definition["custom_field_type"],
                    "entity_type": definition["entity_type"],
                    "is_active": True,
                }
            )

        for option in CUSTOM_FIELD_DROPDOWN_OPTIONS:
            self.data["custom_field_dropdown_options"].append(
                {
                    "custom_field_dropdown_option_id": self.new_id(),
                    "entity_type": option["entity_type"],
                    "property_name": option["property_name"],
                    "dropdown_options": json.dumps(list(option["options"])),
                }
            )

        settings = {"custom_fields_id": self.new_id()}
        for doc_type, flags in CUSTOM_FIELD_PRINT_FLAGS.items():
            for n, flag in enumerate(flags, 1):
                settings[f"{doc_type}_custom{n}_print"] = flag
        self.data["custom_fields"].append(settings)
