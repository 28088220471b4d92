"""Custom click parameter types."""

from decimal import Decimal

import click

from isp_ledger.utils.amount_parser import parse_non_negative_amount


class NonNegativeAmount(click.ParamType):
    """Decimal amount >= 0, accepting '12,5', '1 200' and currency suffixes."""

    name = "amount"

    def convert(self, value, param, ctx):
        if isinstance(value, Decimal):
            return value
        try:
            return parse_non_negative_amount(str(value))
        except ValueError as e:
            self.fail(str(e), param, ctx)


NON_NEGATIVE_AMOUNT = NonNegativeAmount()

# Upper bound for IDs typed at a prompt
MAX_ID = 1_000_000
