"""
GS1-128 generators for commonly used Application Identifiers.

Each function returns a Code128 holding one element string; combine them
with + or Code128.join().

Reference: https://www.gs1.org/standards/barcodes/application-identifiers
"""

from __future__ import annotations

from datetime import date
from typing import Optional

from .core.sequence import Code128
from .errors import ErrorCode, InputError

MAX_MEASURE = 999_999
MAX_AMOUNT = 999_999_999_999_999


def _date(ai: int, value: date) -> Code128:
    return Code128.create_gs1(ai, value.strftime("%y%m%d"))


def _decimal_places(y: int) -> int:
    if y < 0 or y > 9:
        raise InputError(ErrorCode.INVALID_ARGUMENT, "y should be in 0-9.")
    return y


def _measure(ai: int, y: int, value: int) -> Code128:
    """Fixed 6-digit value with y implied decimal places (31nn-36nn)."""
    y = _decimal_places(y)
    if value < 0 or value > MAX_MEASURE:
        raise InputError(ErrorCode.INVALID_ARGUMENT, f"value should be in 0-{MAX_MEASURE:,}.")
    return Code128.create_gs1(ai + y, f"{value:06d}")


def _amount(ai: int, y: int, value: int, currency_code: Optional[str] = None) -> Code128:
    """Variable-length amount with y implied decimal places (390n-393n)."""
    y = _decimal_places(y)
    if value < 0 or value > MAX_AMOUNT:
        raise InputError(ErrorCode.INVALID_ARGUMENT, f"value should be in 0-{MAX_AMOUNT:,}.")
    return Code128.create_gs1(ai + y, f"{currency_code or ''}{value}")


def sscc(data: str) -> Code128:
    """Serial shipping container code (00), 18 digits."""
    return Code128.create_gs1(0, data)


def gtin(data: str) -> Code128:
    """Global trade item number (01), 14 digits."""
    return Code128.create_gs1(1, data)


def gtin_of_contained_trade_items(data: str) -> Code128:
    """GTIN of contained trade items (02), 14 digits."""
    return Code128.create_gs1(2, data)


def batch(data: str) -> Code128:
    """Batch or lot number (10), up to 20 characters."""
    return Code128.create_gs1(10, data)


def production(value: date) -> Code128:
    return _date(11, value)


def due(value: date) -> Code128:
    return _date(12, value)


def packaging(value: date) -> Code128:
    return _date(13, value)


def best_before(value: date) -> Code128:
    return _date(15, value)


def expiration(value: date) -> Code128:
    return _date(17, value)


def product_variant(value: int) -> Code128:
    """Internal product variant (20), 0-99."""
    if value < 0 or value > 99:
        raise InputError(ErrorCode.INVALID_ARGUMENT, "value should be in 0-99.")
    return Code128.create_gs1(20, str(value))


def serial_number(data: str) -> Code128:
    """Serial number (21), up to 20 characters."""
    return Code128.create_gs1(21, data)


def secondary_data(data: str) -> Code128:
    return Code128.create_gs1(22, data)


def additional_product_identification(data: str) -> Code128:
    return Code128.create_gs1(240, data)


def customer_part(data: str) -> Code128:
    return Code128.create_gs1(241, data)


def made_to_order_variation(value: int) -> Code128:
    """Made-to-order variation number (242), below 1,000,000."""
    if value < 0 or value > MAX_MEASURE:
        raise InputError(ErrorCode.INVALID_ARGUMENT, f"value should be in 0-{MAX_MEASURE:,}.")
    return Code128.create_gs1(242, str(value))


def packaging_component(data: str) -> Code128:
    return Code128.create_gs1(243, data)


def secondary_serial_number(data: str) -> Code128:
    return Code128.create_gs1(250, data)


def source_entity(data: str) -> Code128:
    return Code128.create_gs1(251, data)


def document_type_id(data: str) -> Code128:
    return Code128.create_gs1(253, data)


def gln_extension_component(data: str) -> Code128:
    return Code128.create_gs1(254, data)


def coupon_number(data: str) -> Code128:
    return Code128.create_gs1(255, data)


def count(value: int) -> Code128:
    """Variable count of items (30)."""
    return Code128.create_gs1(30, str(value))


def unit_count(value: int) -> Code128:
    """Count of trade items contained in a logistic unit (37)."""
    return Code128.create_gs1(37, str(value))


def product_weight(y: int, value: int) -> Code128:
    """Net weight in kg (310y)."""
    return _measure(3100, y, value)


def product_length(y: int, value: int) -> Code128:
    return _measure(3110, y, value)


def product_width(y: int, value: int) -> Code128:
    return _measure(3120, y, value)


def product_depth(y: int, value: int) -> Code128:
    return _measure(3130, y, value)


def product_area(y: int, value: int) -> Code128:
    return _measure(3140, y, value)


def product_volume(y: int, value: int) -> Code128:
    """Net volume in litres (315y), or in cubic metres (316y) when y is 10-19."""
    if y > 9:
        return _measure(3160, y - 10, value)
    return _measure(3150, y, value)


def container_weight(y: int, value: int) -> Code128:
    """Logistic gross weight in kg (330y)."""
    return _measure(3300, y, value)


def container_length(y: int, value: int) -> Code128:
    return _measure(3310, y, value)


def container_width(y: int, value: int) -> Code128:
    return _measure(3320, y, value)


def container_depth(y: int, value: int) -> Code128:
    return _measure(3330, y, value)


def container_area(y: int, value: int) -> Code128:
    return _measure(3340, y, value)


def container_volume(y: int, value: int) -> Code128:
    if y > 9:
        return _measure(3360, y - 10, value)
    return _measure(3350, y, value)


def amount_payable(y: int, value: int, currency_code: Optional[str] = None) -> Code128:
    """Amount payable (390y), or with an ISO 4217 currency code (391y)."""
    return _amount(3910 if currency_code else 3900, y, value, currency_code)


def trade_item_amount_payable(y: int, value: int, currency_code: Optional[str] = None) -> Code128:
    """Amount payable for a single trade item (392y / 393y)."""
    return _amount(3930 if currency_code else 3920, y, value, currency_code)


def order(data: str) -> Code128:
    return Code128.create_gs1(400, data)


def consignment(data: str) -> Code128:
    return Code128.create_gs1(401, data)


def lading_bill(data: str) -> Code128:
    return Code128.create_gs1(402, data)


def routing(data: str) -> Code128:
    return Code128.create_gs1(403, data)


def to_single_postal_authority_code(data: str) -> Code128:
    return Code128.create_gs1(420, data)


def to_postal_code(data: str) -> Code128:
    """Ship-to postal code with ISO country code (421)."""
    return Code128.create_gs1(421, data)


def origin_country(data: str) -> Code128:
    return Code128.create_gs1(422, data)


def initial_processing_countries(data: str) -> Code128:
    return Code128.create_gs1(423, data)


def processing_country(data: str) -> Code128:
    return Code128.create_gs1(424, data)


def disassembly_country(data: str) -> Code128:
    return Code128.create_gs1(425, data)


def full_process_chain_country(data: str) -> Code128:
    return Code128.create_gs1(426, data)


def service_code_description(data: str) -> Code128:
    return Code128.create_gs1(3420, data)


def dangerous(value: bool) -> Code128:
    return Code128.create_gs1(3421, "1" if value else "0")


def authority_to_leave(value: bool) -> Code128:
    return Code128.create_gs1(3422, "1" if value else "0")


def signature_required(value: bool) -> Code128:
    return Code128.create_gs1(3423, "1" if value else "0")


def release(value: date) -> Code128:
    return _date(3426, value)


def nsn(data: str) -> Code128:
    """NATO stock number (7001)."""
    return Code128.create_gs1(7001, data)


def active_potency(value: int) -> Code128:
    return Code128.create_gs1(7004, str(value))


def catch_area(data: str) -> Code128:
    return Code128.create_gs1(7005, data)


def first_freeze(value: date) -> Code128:
    return _date(7006, value)


def harvest(value: date) -> Code128:
    return _date(7007, value)


def production_method(data: str) -> Code128:
    return Code128.create_gs1(7010, data)


def certification(y: int, data: str) -> Code128:
    """Certification reference (723y)."""
    return Code128.create_gs1(7230 + _decimal_places(y), data)


def protocol(data: str) -> Code128:
    return Code128.create_gs1(7240, data)


def roll_products(data: str) -> Code128:
    return Code128.create_gs1(8001, data)


def phone_id(data: str) -> Code128:
    return Code128.create_gs1(8002, data)


def global_returnable_asset(data: str) -> Code128:
    return Code128.create_gs1(8003, data)


def global_individual_asset(data: str) -> Code128:
    return Code128.create_gs1(8004, data)


def bank_account(data: str) -> Code128:
    """International bank account number (8007)."""
    return Code128.create_gs1(8007, data)


def software_version(data: str) -> Code128:
    return Code128.create_gs1(8012, data)


def gmn(data: str) -> Code128:
    """Global model number (8013)."""
    return Code128.create_gs1(8013, data)


def global_service_relationship(recipient: bool, data: str) -> Code128:
    """GSRN of a service provider (8017) or recipient (8018)."""
    return Code128.create_gs1(8018 if recipient else 8017, data)


def srin(data: str) -> Code128:
    return Code128.create_gs1(8019, data)


def payment_slip(data: str) -> Code128:
    return Code128.create_gs1(8020, data)


def extended_packaging_url(data: str) -> Code128:
    return Code128.create_gs1(8200, data)


def mutually_agreed(data: str) -> Code128:
    """Information mutually agreed between trading partners (90)."""
    return Code128.create_gs1(90, data)


def internal_company_code(index: int, data: str) -> Code128:
    """Company internal information (91-99), index 1-9."""
    if index < 1 or index > 9:
        raise InputError(ErrorCode.INVALID_ARGUMENT, "index should be in 1-9.")
    return Code128.create_gs1(90 + index, data)
