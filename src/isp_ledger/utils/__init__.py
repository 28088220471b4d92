"""Utility functions for isp_ledger."""

from isp_ledger.utils.amount_parser import parse_amount, parse_non_negative_amount, to_decimal

__all__ = ["parse_amount", "parse_non_negative_amount", "to_decimal"]
