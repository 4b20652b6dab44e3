"""Argument parsing for the finbind CLI."""

import argparse
from pathlib import Path

from finbind.aozorabank.types import (
    QueryKeyClass,
    RequestTransferClass,
    RequestTransferTerm,
    TransferStatus,
)
from finbind.config.schema import APIHostType


def add_common_args(parser: argparse.ArgumentParser) -> None:
    """Add the options shared by every API subcommand."""
    parser.add_argument(
        "--host",
        dest="host",
        choices=[h.value for h in APIHostType],
        default=None,
        help="Deployment to call (default: from config, else test)",
    )
    parser.add_argument(
        "--config",
        dest="config",
        type=Path,
        default=None,
        help="Config file (default: ~/.finbind/config.json when present)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Timeout in seconds for the API call (default: from config)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log request and response details to stderr",
    )


def add_access_token_arg(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--access-token",
        dest="access_token",
        help="Bank access token (default: $FINBIND_AOZORA_ACCESS_TOKEN)",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the full parser with every subcommand."""
    parser = argparse.ArgumentParser(
        prog="finbind",
        description="Call the GMO Aozora Net Bank and GMO deferred-payment APIs",
    )
    subparsers = parser.add_subparsers(dest="command")

    # ==========================================================================
    # aozora - bank transfer API
    # ==========================================================================
    aozora_parser = subparsers.add_parser(
        "aozora",
        help="GMO Aozora Net Bank corporate API",
    )
    aozora_subparsers = aozora_parser.add_subparsers(dest="aozora_command")

    # aozora status - GET /transfer/status
    status_parser = aozora_subparsers.add_parser(
        "status",
        help="Query transfer applications and their state",
    )
    add_common_args(status_parser)
    add_access_token_arg(status_parser)
    status_parser.add_argument("--account-id", dest="account_id", required=True)
    status_parser.add_argument(
        "--query-key-class",
        dest="query_key_class",
        choices=[c.value for c in QueryKeyClass],
        default=QueryKeyClass.TRANSFER_APPLIES.value,
        help="1: transfer applications, 2: bulk transfer applications (default: 1)",
    )
    status_parser.add_argument("--apply-no", dest="apply_no", default="")
    status_parser.add_argument("--date-from", dest="date_from", default="", help="YYYY-MM-DD")
    status_parser.add_argument("--date-to", dest="date_to", default="", help="YYYY-MM-DD")
    status_parser.add_argument("--next-item-key", dest="next_item_key", default="")
    status_parser.add_argument(
        "--status",
        dest="statuses",
        action="append",
        choices=[s.value for s in TransferStatus],
        default=None,
        help="Filter by transfer status code (repeatable)",
    )
    status_parser.add_argument(
        "--transfer-class",
        dest="request_transfer_class",
        choices=[c.value for c in RequestTransferClass],
        default=None,
    )
    status_parser.add_argument(
        "--transfer-term",
        dest="request_transfer_term",
        choices=[t.value for t in RequestTransferTerm],
        default=None,
    )

    # aozora result - GET /transfer/request-result
    result_parser = aozora_subparsers.add_parser(
        "result",
        help="Fetch the registration result of a transfer application",
    )
    add_common_args(result_parser)
    add_access_token_arg(result_parser)
    result_parser.add_argument("--account-id", dest="account_id", required=True)
    result_parser.add_argument("--apply-no", dest="apply_no", required=True)

    # ==========================================================================
    # deferred - deferred-payment gateway
    # ==========================================================================
    deferred_parser = subparsers.add_parser(
        "deferred",
        help="GMO deferred-payment gateway",
    )
    deferred_subparsers = deferred_parser.add_subparsers(dest="deferred_command")

    register_parser = deferred_subparsers.add_parser(
        "register",
        help="Register a transaction from a JSON order file",
    )
    add_common_args(register_parser)
    register_parser.add_argument(
        "order",
        type=Path,
        help="Order file in the gateway's JSON shape (shopInfo, buyer, deliveries)",
    )

    return parser

