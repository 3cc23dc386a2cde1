"""one-two-pay command line tool"""

import asyncio
from dataclasses import fields
from decimal import Decimal, InvalidOperation

import click

from one_two_pay.config import settings
from one_two_pay.domain.banks import Bank, bank_of_acronym
from one_two_pay.domain.exceptions import PayoutError
from one_two_pay.domain.models import QueryReq, TransferReq
from one_two_pay.infrastructure.clients.payout import PayoutClient
from one_two_pay.infrastructure.observability.logging import setup_logging


def _parse_amount(ctx, param, value: str) -> Decimal:
    try:
        amount = Decimal(value)
    except InvalidOperation:
        raise click.BadParameter(f"{value!r} is not a number")
    if not amount.is_finite() or amount <= 0:
        raise click.BadParameter("amount must be a positive number")
    return amount


def _run(coro):
    try:
        result = asyncio.run(coro)
    except PayoutError as e:
        raise click.ClickException(str(e))
    for field in fields(result):
        click.echo(f"{field.name}: {getattr(result, field.name)}")


@click.group()
@click.option("--api-key", "-a", envvar="API_KEY", show_envvar=True, help="Gateway API key")
@click.option("--partner-code", "-p", envvar="PARTNER_CODE", show_envvar=True, help="Partner code")
@click.option("--channel", "-c", envvar="CHANNEL", show_envvar=True, help="Channel")
@click.option("--base-url", default=None, help="Gateway base URL")
@click.pass_context
def main(ctx, api_key, partner_code, channel, base_url):
    """1-2-Pay payout gateway client."""
    setup_logging(settings.log_level)
    ctx.obj = PayoutClient(
        base_url=base_url,
        api_key=api_key,
        partner_code=partner_code,
        channel=channel,
    )


@main.command()
@click.option("--bankacc", required=True, help="Bank account number")
@click.option(
    "--bank",
    required=True,
    type=click.Choice([bank.value for bank in Bank], case_sensitive=False),
    help="Which bank to transfer to, by acronym",
)
@click.option("--amount", required=True, callback=_parse_amount, help="Amount of THB to transfer")
@click.option("--accname", required=True, help="Account name, owner of the bank account")
@click.option("--mobileno", required=True, help="Mobile number in Thai local format")
@click.option("--transaction-by", required=True, help="Who is making the transaction")
@click.option("--ref1", required=True, help="External ID of transaction, 1 to 30 characters")
@click.option("--ref2", default=None, help="Additional data")
@click.option("--ref3", default=None, help="Additional data")
@click.option("--ref4", default=None, help="Additional data")
@click.option("--line-token", default=None, help="Passed through to the gateway as lineToken")
@click.option("--email", default=None, help="Passed through to the gateway")
@click.pass_obj
def transfer(client: PayoutClient, bank, **options):
    """Make transfer to bank account."""
    req = TransferReq(bank=bank_of_acronym(bank), **options)
    _run(client.transfer(req))


@main.command()
@click.option("--ref1", "-r", required=True, help="ID of transaction")
@click.pass_obj
def inquery(client: PayoutClient, ref1):
    """Query status of payment."""
    _run(client.query(QueryReq(ref1=ref1)))


if __name__ == "__main__":
    main()
