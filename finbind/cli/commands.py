"""CLI commands for the bank and deferred-payment APIs.

Each command builds a request from parsed arguments, makes exactly one API
call, prints the reply as JSON to stdout and returns an exit code. Business
errors in a reply are printed like any other reply; only the deferred
gateway's NG result turns into a non-zero exit code.
"""

import argparse
import os
from pathlib import Path

from pydantic import ValidationError

from finbind.aozorabank.client import AozoraBankClient
from finbind.aozorabank.models import (
    GetRequestResultRequest,
    GetTransferStatusRequest,
    RequestTransferStatus,
)
from finbind.aozorabank.types import (
    QueryKeyClass,
    RequestTransferClass,
    RequestTransferTerm,
    TransferStatus,
)
from finbind.cli.output import ConsoleRawLog, print_error, print_result, print_warning
from finbind.config.load_utils import load_json_file
from finbind.config.loader import load_config
from finbind.config.schema import APIHostType, Config
from finbind.core.errors import ConfigError, FinbindError
from finbind.deferred import translate as deferred_translate
from finbind.deferred import wire as deferred_wire
from finbind.deferred.client import DeferredClient
from finbind.deferred.models import RegisterRequest
from finbind.transport.convert import code_to_wire

ACCESS_TOKEN_ENV = "FINBIND_AOZORA_ACCESS_TOKEN"

# Wire name of each shopInfo field -> environment variable supplying it
SHOP_INFO_ENV = {
    "authenticationId": "FINBIND_DEFERRED_AUTHENTICATION_ID",
    "shopCode": "FINBIND_DEFERRED_SHOP_CODE",
    "connectPassword": "FINBIND_DEFERRED_CONNECT_PASSWORD",
}


def _host_override(args: argparse.Namespace) -> APIHostType | None:
    return APIHostType(args.host) if args.host else None


def _raw_log(args: argparse.Namespace) -> ConsoleRawLog | None:
    return ConsoleRawLog() if args.verbose else None


def resolve_access_token(explicit: str | None) -> str:
    """Return the bank access token from the argument or the environment.

    Raises:
        ConfigError: If neither provides a token.
    """
    token = explicit or os.environ.get(ACCESS_TOKEN_ENV, "")
    if not token:
        raise ConfigError(f"No access token: pass --access-token or set {ACCESS_TOKEN_ENV}")
    return token


def build_transfer_status_request(
    args: argparse.Namespace, access_token: str
) -> GetTransferStatusRequest:
    statuses = None
    if args.statuses is not None:
        statuses = tuple(RequestTransferStatus(TransferStatus(s)) for s in args.statuses)
    return GetTransferStatusRequest(
        access_token=access_token,
        account_id=args.account_id,
        query_key_class=QueryKeyClass(args.query_key_class),
        apply_no=args.apply_no,
        date_from=args.date_from,
        date_to=args.date_to,
        next_item_key=args.next_item_key,
        request_transfer_statuses=statuses,
        request_transfer_class=(
            RequestTransferClass(args.request_transfer_class)
            if args.request_transfer_class else None
        ),
        request_transfer_term=(
            RequestTransferTerm(args.request_transfer_term)
            if args.request_transfer_term else None
        ),
    )


def load_order(path: Path) -> RegisterRequest:
    """Read a register request from an order file in the gateway's JSON shape.

    A missing ``shopInfo`` object is filled from the FINBIND_DEFERRED_*
    environment variables.

    Raises:
        LoadError: If the file cannot be read or is not a JSON object.
        ConfigError: If credentials are missing or the order is malformed.
    """
    data = load_json_file(path, error_context="order")
    if not any(key.lower() == "shopinfo" for key in data):
        missing = [env for env in SHOP_INFO_ENV.values() if not os.environ.get(env)]
        if missing:
            raise ConfigError(
                f"Order {path} has no shopInfo and {', '.join(missing)} not set"
            )
        data["shopInfo"] = {key: os.environ[env] for key, env in SHOP_INFO_ENV.items()}

    try:
        param = deferred_wire.RegisterRequestParam.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid order file {path}: {e}") from e
    return deferred_translate.register_request_from_wire(param)


async def cmd_aozora_status(args: argparse.Namespace, config: Config) -> int:
    request = build_transfer_status_request(args, resolve_access_token(args.access_token))
    async with AozoraBankClient(
        config.aozorabank, host_type=_host_override(args), raw_log=_raw_log(args)
    ) as client:
        response = await client.get_transfer_status(request, timeout=args.timeout)
    print_result(response)
    return 0


async def cmd_aozora_result(args: argparse.Namespace, config: Config) -> int:
    request = GetRequestResultRequest(
        access_token=resolve_access_token(args.access_token),
        account_id=args.account_id,
        apply_no=args.apply_no,
    )
    async with AozoraBankClient(
        config.aozorabank, host_type=_host_override(args), raw_log=_raw_log(args)
    ) as client:
        response = await client.get_request_result(request, timeout=args.timeout)
    print_result(response)
    return 0


async def cmd_deferred_register(args: argparse.Namespace, config: Config) -> int:
    request = load_order(args.order)
    async with DeferredClient(
        config.deferred, host_type=_host_override(args), raw_log=_raw_log(args)
    ) as client:
        response = await client.register(request, timeout=args.timeout)
    print_result(response)
    if not response.ok:
        print_warning(f"Registration not accepted (result: {code_to_wire(response.result)})")
        return 1
    return 0


COMMANDS = {
    ("aozora", "status"): cmd_aozora_status,
    ("aozora", "result"): cmd_aozora_result,
    ("deferred", "register"): cmd_deferred_register,
}


async def run_command(command: tuple[str, str], args: argparse.Namespace) -> int:
    """Load config and run one subcommand, mapping finbind errors to exit code 1."""
    try:
        config = load_config(args.config)
        return await COMMANDS[command](args, config)
    except FinbindError as e:
        print_error(e.message)
        return 1
