"""``headless`` command line.

Each command builds one call on ``HeadlessClient`` and prints the service
response as received. Errors are printed to stdout and end the process with
status 1.
"""

import asyncio
import json
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, NoReturn

import httpx
import typer

from headless_cli import __version__
from headless_cli.client import HeadlessClient
from headless_cli.config import (
    DEBUG_ENV_VAR,
    DEFAULT_HOST,
    DEFAULT_WALLET_ID,
    HOST_ENV_VAR,
    HeadlessConfig,
)
from headless_cli.custom import curl_command
from headless_cli.exceptions import HeadlessError

log = logging.getLogger(__name__)

app = typer.Typer(
    name="headless",
    help="Command line client for the headless wallet service.",
    no_args_is_help=True,
    add_completion=False,
)
wallet_app = typer.Typer(no_args_is_help=True, help="Commands on a started wallet.")
p2sh_app = typer.Typer(no_args_is_help=True, help="Multisig (P2SH) transaction proposals.")
hsm_app = typer.Typer(no_args_is_help=True, help="HSM backed wallets.")
fireblocks_app = typer.Typer(no_args_is_help=True, help="Fireblocks backed wallets.")
custom_app = typer.Typer(no_args_is_help=True, help="Commands computed locally from several calls.")

app.add_typer(wallet_app, name="wallet")
wallet_app.add_typer(p2sh_app, name="p2sh")
app.add_typer(hsm_app, name="hsm")
app.add_typer(fireblocks_app, name="fireblocks")
app.add_typer(custom_app, name="custom")


@dataclass
class Target:
    config: HeadlessConfig
    wallet_id: str = DEFAULT_WALLET_ID


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _fail(exc: Exception) -> NoReturn:
    typer.echo(str(exc) or repr(exc))
    raise typer.Exit(code=1)


def _run(ctx: typer.Context, call: Callable[[HeadlessClient], Awaitable[Any]]) -> None:
    """Run *call* against a fresh client and print what it returns."""
    target: Target = ctx.obj

    async def runner() -> Any:
        async with HeadlessClient(target.config) as client:
            return await call(client)

    try:
        output = asyncio.run(runner())
    except (HeadlessError, httpx.HTTPError) as exc:
        log.debug("command failed", exc_info=True)
        _fail(exc)
    typer.echo(output)


def _wallet(ctx: typer.Context) -> str:
    return ctx.obj.wallet_id


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    host: str = typer.Option(DEFAULT_HOST, "--host", envvar=HOST_ENV_VAR, help="Base URL of the headless service."),
    debug: bool = typer.Option(False, "--debug", envvar=DEBUG_ENV_VAR, help="Trace requests on stderr."),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show the version and exit."
    ),
) -> None:
    _configure_logging(debug)
    ctx.obj = Target(config=HeadlessConfig(host=host, debug=debug))


# ---------------------------------------------------------------------------
# Service
# ---------------------------------------------------------------------------

@app.command()
def start(
    ctx: typer.Context,
    wallet_id: str = typer.Option(DEFAULT_WALLET_ID, "--wallet-id"),
    seed_key: str = typer.Option("default", "--seed-key"),
    passphrase: str | None = typer.Option(None, "--passphrase", "-p"),
    scan_policy: str | None = typer.Option(None, "--scan-policy"),
    gap_limit: int | None = typer.Option(None, "--gap-limit"),
    policy_start_index: int | None = typer.Option(None, "--policy-start-index"),
    policy_end_index: int | None = typer.Option(None, "--policy-end-index"),
    history_sync_mode: str | None = typer.Option(None, "--history-sync-mode"),
) -> None:
    """Start a wallet from a seed configured on the service."""
    _run(
        ctx,
        lambda c: c.service.start(
            wallet_id=wallet_id,
            seed_key=seed_key,
            passphrase=passphrase,
            scan_policy=scan_policy,
            gap_limit=gap_limit,
            policy_start_index=policy_start_index,
            policy_end_index=policy_end_index,
            history_sync_mode=history_sync_mode,
        ),
    )


@app.command("multisig-pubkey")
def multisig_pubkey(
    ctx: typer.Context,
    seed_key: str = typer.Argument(...),
    passphrase: str | None = typer.Option(None, "--passphrase", "-p"),
) -> None:
    """Get the multisig xpubkey of a configured seed."""
    _run(ctx, lambda c: c.service.multisig_pubkey(seed_key, passphrase=passphrase))


@app.command("configuration-string")
def configuration_string(ctx: typer.Context, token: str = typer.Argument(...)) -> None:
    """Get the configuration string of a token."""
    _run(ctx, lambda c: c.service.configuration_string(token))


@hsm_app.command("start")
def hsm_start(
    ctx: typer.Context,
    hsm_key: str = typer.Argument(...),
    wallet_id: str = typer.Option(DEFAULT_WALLET_ID, "--wallet-id"),
) -> None:
    """Start a wallet whose keys live in an HSM."""
    _run(ctx, lambda c: c.service.hsm_start(hsm_key, wallet_id=wallet_id))


@fireblocks_app.command("start")
def fireblocks_start(
    ctx: typer.Context,
    xpub: str = typer.Argument(...),
    wallet_id: str = typer.Option(DEFAULT_WALLET_ID, "--wallet-id"),
) -> None:
    """Start a Fireblocks wallet from its xpub."""
    _run(ctx, lambda c: c.service.fireblocks_start(xpub, wallet_id=wallet_id))


# ---------------------------------------------------------------------------
# Wallet
# ---------------------------------------------------------------------------

@wallet_app.callback()
def wallet_callback(
    ctx: typer.Context,
    wallet_id: str = typer.Option(DEFAULT_WALLET_ID, "--wallet-id", "-w", help="Id the wallet was started with."),
) -> None:
    ctx.obj.wallet_id = wallet_id


@wallet_app.command()
def status(ctx: typer.Context) -> None:
    _run(ctx, lambda c: c.wallet.status(_wallet(ctx)))


@wallet_app.command()
def balance(ctx: typer.Context, token: str | None = typer.Option(None, "--token", "-t")) -> None:
    """Balance of a token, the native one by default."""
    _run(ctx, lambda c: c.wallet.balance(_wallet(ctx), token=token))


@wallet_app.command()
def address(
    ctx: typer.Context,
    index: int | None = typer.Option(None, "--index", "-i"),
    mark_as_used: bool | None = typer.Option(None, "--mark-as-used/--no-mark-as-used"),
) -> None:
    """Current address, or the address at --index."""
    _run(ctx, lambda c: c.wallet.address(_wallet(ctx), index=index, mark_as_used=mark_as_used))


@wallet_app.command("address-index")
def address_index(ctx: typer.Context, addr: str = typer.Argument(..., metavar="ADDRESS")) -> None:
    _run(ctx, lambda c: c.wallet.address_index(_wallet(ctx), addr))


@wallet_app.command()
def addresses(ctx: typer.Context) -> None:
    _run(ctx, lambda c: c.wallet.addresses(_wallet(ctx)))


@wallet_app.command("address-info")
def address_info(
    ctx: typer.Context,
    addr: str = typer.Argument(..., metavar="ADDRESS"),
    token: str | None = typer.Option(None, "--token", "-t"),
) -> None:
    _run(ctx, lambda c: c.wallet.address_info(_wallet(ctx), addr, token=token))


@wallet_app.command("tx-history")
def tx_history(ctx: typer.Context, limit: int | None = typer.Option(None, "--limit", "-l")) -> None:
    _run(ctx, lambda c: c.wallet.tx_history(_wallet(ctx), limit=limit))


@wallet_app.command()
def transaction(ctx: typer.Context, tx_id: str = typer.Argument(..., metavar="ID")) -> None:
    _run(ctx, lambda c: c.wallet.transaction(_wallet(ctx), tx_id))


@wallet_app.command()
def decode(
    ctx: typer.Context,
    tx_hex: str | None = typer.Option(None, "--tx-hex", "-t"),
    partial_tx: str | None = typer.Option(None, "--partial-tx", "-p"),
) -> None:
    """Decode a transaction hex or a partial transaction."""
    _run(ctx, lambda c: c.wallet.decode(_wallet(ctx), tx_hex=tx_hex, partial_tx=partial_tx))


@wallet_app.command("tx-confirmation")
def tx_confirmation(ctx: typer.Context, tx_id: str = typer.Argument(..., metavar="ID")) -> None:
    """Number of blocks confirming a transaction."""
    _run(ctx, lambda c: c.wallet.tx_confirmation_blocks(_wallet(ctx), tx_id))


@wallet_app.command("simple-send")
def simple_send(
    ctx: typer.Context,
    addr: str = typer.Argument(..., metavar="ADDRESS"),
    value: int = typer.Argument(...),
    change_address: str | None = typer.Option(None, "--change-address", "-c"),
    token: str | None = typer.Option(None, "--token", "-t"),
) -> None:
    _run(
        ctx,
        lambda c: c.wallet.simple_send(_wallet(ctx), addr, value, change_address=change_address, token=token),
    )


@wallet_app.command()
def send(ctx: typer.Context, body: str = typer.Argument(..., help="JSON body, forwarded unchanged.")) -> None:
    """Send a transaction described by a raw send-tx JSON body."""
    _run(ctx, lambda c: c.wallet.send(_wallet(ctx), body))


@wallet_app.command("create-token")
def create_token(
    ctx: typer.Context,
    name: str = typer.Argument(...),
    symbol: str = typer.Argument(...),
    amount: int = typer.Argument(...),
    addr: str | None = typer.Option(None, "--address"),
    change_address: str | None = typer.Option(None, "--change-address"),
    create_mint: bool | None = typer.Option(None, "--create-mint/--no-create-mint"),
    mint_authority_address: str | None = typer.Option(None, "--mint-authority-address"),
    allow_external_mint_authority_address: bool | None = typer.Option(
        None, "--allow-external-mint-authority-address/--no-allow-external-mint-authority-address"
    ),
    create_melt: bool | None = typer.Option(None, "--create-melt/--no-create-melt"),
    melt_authority_address: str | None = typer.Option(None, "--melt-authority-address"),
    allow_external_melt_authority_address: bool | None = typer.Option(
        None, "--allow-external-melt-authority-address/--no-allow-external-melt-authority-address"
    ),
    data: list[str] | None = typer.Option(None, "--data", "-d", help="Data output, may be repeated."),
) -> None:
    _run(
        ctx,
        lambda c: c.wallet.create_token(
            _wallet(ctx),
            name,
            symbol,
            amount,
            address=addr,
            change_address=change_address,
            create_mint=create_mint,
            mint_authority_address=mint_authority_address,
            allow_external_mint_authority_address=allow_external_mint_authority_address,
            create_melt=create_melt,
            melt_authority_address=melt_authority_address,
            allow_external_melt_authority_address=allow_external_melt_authority_address,
            data=data or None,
        ),
    )


@wallet_app.command("mint-tokens")
def mint_tokens(
    ctx: typer.Context,
    token: str = typer.Argument(...),
    amount: int = typer.Argument(...),
    addr: str | None = typer.Option(None, "--address"),
    change_address: str | None = typer.Option(None, "--change-address"),
    mint_authority_address: str | None = typer.Option(None, "--mint-authority-address"),
    allow_external_mint_authority_address: bool | None = typer.Option(
        None, "--allow-external-mint-authority-address/--no-allow-external-mint-authority-address"
    ),
    unshift_data: bool | None = typer.Option(None, "--unshift-data/--no-unshift-data"),
    data: list[str] | None = typer.Option(None, "--data", "-d"),
) -> None:
    _run(
        ctx,
        lambda c: c.wallet.mint_tokens(
            _wallet(ctx),
            token,
            amount,
            address=addr,
            change_address=change_address,
            mint_authority_address=mint_authority_address,
            allow_external_mint_authority_address=allow_external_mint_authority_address,
            unshift_data=unshift_data,
            data=data or None,
        ),
    )


@wallet_app.command("melt-tokens")
def melt_tokens(
    ctx: typer.Context,
    token: str = typer.Argument(...),
    amount: int = typer.Argument(...),
    addr: str | None = typer.Option(None, "--address"),
    deposit_address: str | None = typer.Option(None, "--deposit-address"),
    change_address: str | None = typer.Option(None, "--change-address"),
    melt_authority_address: str | None = typer.Option(None, "--melt-authority-address"),
    allow_external_melt_authority_address: bool | None = typer.Option(
        None, "--allow-external-melt-authority-address/--no-allow-external-melt-authority-address"
    ),
    unshift_data: bool | None = typer.Option(None, "--unshift-data/--no-unshift-data"),
    data: list[str] | None = typer.Option(None, "--data", "-d"),
) -> None:
    _run(
        ctx,
        lambda c: c.wallet.melt_tokens(
            _wallet(ctx),
            token,
            amount,
            address=addr,
            deposit_address=deposit_address,
            change_address=change_address,
            melt_authority_address=melt_authority_address,
            allow_external_melt_authority_address=allow_external_melt_authority_address,
            unshift_data=unshift_data,
            data=data or None,
        ),
    )


@wallet_app.command("utxo-filter")
def utxo_filter(
    ctx: typer.Context,
    max_utxos: int | None = typer.Option(None, "--max-utxos"),
    token: str | None = typer.Option(None, "--token"),
    filter_address: str | None = typer.Option(None, "--filter-address"),
    amount_smaller_than: int | None = typer.Option(None, "--amount-smaller-than"),
    amount_bigger_than: int | None = typer.Option(None, "--amount-bigger-than"),
    maximum_amount: int | None = typer.Option(None, "--maximum-amount"),
    only_available_utxos: bool | None = typer.Option(
        None, "--only-available-utxos/--no-only-available-utxos"
    ),
) -> None:
    _run(
        ctx,
        lambda c: c.wallet.utxo_filter(
            _wallet(ctx),
            max_utxos=max_utxos,
            token=token,
            filter_address=filter_address,
            amount_smaller_than=amount_smaller_than,
            amount_bigger_than=amount_bigger_than,
            maximum_amount=maximum_amount,
            only_available_utxos=only_available_utxos,
        ),
    )


@wallet_app.command("utxo-consolidation")
def utxo_consolidation(
    ctx: typer.Context,
    destination_address: str | None = typer.Option(None, "--destination-address"),
    max_utxos: int | None = typer.Option(None, "--max-utxos"),
    token: str | None = typer.Option(None, "--token"),
    filter_address: str | None = typer.Option(None, "--filter-address"),
    amount_smaller_than: int | None = typer.Option(None, "--amount-smaller-than"),
    amount_bigger_than: int | None = typer.Option(None, "--amount-bigger-than"),
    maximum_amount: int | None = typer.Option(None, "--maximum-amount"),
) -> None:
    _run(
        ctx,
        lambda c: c.wallet.utxo_consolidation(
            _wallet(ctx),
            destination_address=destination_address,
            max_utxos=max_utxos,
            token=token,
            filter_address=filter_address,
            amount_smaller_than=amount_smaller_than,
            amount_bigger_than=amount_bigger_than,
            maximum_amount=maximum_amount,
        ),
    )


@wallet_app.command("create-nft")
def create_nft(
    ctx: typer.Context,
    name: str = typer.Argument(...),
    symbol: str = typer.Argument(...),
    amount: int = typer.Argument(...),
    data: str = typer.Argument(...),
    addr: str | None = typer.Option(None, "--address"),
    change_address: str | None = typer.Option(None, "--change-address"),
    create_mint: bool | None = typer.Option(None, "--create-mint/--no-create-mint"),
    mint_authority_address: str | None = typer.Option(None, "--mint-authority-address"),
    allow_external_mint_authority_address: bool | None = typer.Option(
        None, "--allow-external-mint-authority-address/--no-allow-external-mint-authority-address"
    ),
    create_melt: bool | None = typer.Option(None, "--create-melt/--no-create-melt"),
    melt_authority_address: str | None = typer.Option(None, "--melt-authority-address"),
    allow_external_melt_authority_address: bool | None = typer.Option(
        None, "--allow-external-melt-authority-address/--no-allow-external-melt-authority-address"
    ),
) -> None:
    _run(
        ctx,
        lambda c: c.wallet.create_nft(
            _wallet(ctx),
            name,
            symbol,
            amount,
            data,
            address=addr,
            change_address=change_address,
            create_mint=create_mint,
            mint_authority_address=mint_authority_address,
            allow_external_mint_authority_address=allow_external_mint_authority_address,
            create_melt=create_melt,
            melt_authority_address=melt_authority_address,
            allow_external_melt_authority_address=allow_external_melt_authority_address,
        ),
    )


@wallet_app.command()
def stop(ctx: typer.Context) -> None:
    _run(ctx, lambda c: c.wallet.stop(_wallet(ctx)))


# ---------------------------------------------------------------------------
# P2SH
# ---------------------------------------------------------------------------

def _parse_output(raw: str) -> dict[str, Any]:
    parts = raw.split(":")
    if len(parts) not in (2, 3) or not parts[0]:
        raise typer.BadParameter(f"expected ADDRESS:VALUE[:TOKEN], got {raw!r}")
    try:
        value = int(parts[1])
    except ValueError as exc:
        raise typer.BadParameter(f"output value must be an integer, got {parts[1]!r}") from exc
    output: dict[str, Any] = {"address": parts[0], "value": value}
    if len(parts) == 3 and parts[2]:
        output["token"] = parts[2]
    return output


def _parse_input(raw: str) -> dict[str, Any]:
    tx_hash, sep, index = raw.partition(":")
    if not sep or not tx_hash:
        raise typer.BadParameter(f"expected HASH:INDEX, got {raw!r}")
    try:
        return {"hash": tx_hash, "index": int(index)}
    except ValueError as exc:
        raise typer.BadParameter(f"input index must be an integer, got {index!r}") from exc


@p2sh_app.command("tx-proposal")
def p2sh_tx_proposal(
    ctx: typer.Context,
    outputs: list[str] = typer.Option(..., "--output", "-o", help="ADDRESS:VALUE[:TOKEN], may be repeated."),
    inputs: list[str] | None = typer.Option(None, "--input", "-i", help="HASH:INDEX, may be repeated."),
    change_address: str | None = typer.Option(None, "--change-address", "-c"),
) -> None:
    """Build an unsigned multisig transaction."""
    parsed_outputs = [_parse_output(raw) for raw in outputs]
    parsed_inputs = [_parse_input(raw) for raw in inputs] if inputs else None
    _run(
        ctx,
        lambda c: c.p2sh.tx_proposal(
            _wallet(ctx), parsed_outputs, inputs=parsed_inputs, change_address=change_address
        ),
    )


@p2sh_app.command("create-token")
def p2sh_create_token(
    ctx: typer.Context,
    name: str = typer.Argument(...),
    symbol: str = typer.Argument(...),
    amount: int = typer.Argument(...),
    addr: str | None = typer.Option(None, "--address"),
    change_address: str | None = typer.Option(None, "--change-address"),
    create_mint: bool | None = typer.Option(None, "--create-mint/--no-create-mint"),
    mint_authority_address: str | None = typer.Option(None, "--mint-authority-address"),
    allow_external_mint_authority_address: bool | None = typer.Option(
        None, "--allow-external-mint-authority-address/--no-allow-external-mint-authority-address"
    ),
    create_melt: bool | None = typer.Option(None, "--create-melt/--no-create-melt"),
    melt_authority_address: str | None = typer.Option(None, "--melt-authority-address"),
    allow_external_melt_authority_address: bool | None = typer.Option(
        None, "--allow-external-melt-authority-address/--no-allow-external-melt-authority-address"
    ),
) -> None:
    _run(
        ctx,
        lambda c: c.p2sh.create_token(
            _wallet(ctx),
            name,
            symbol,
            amount,
            address=addr,
            change_address=change_address,
            create_mint=create_mint,
            mint_authority_address=mint_authority_address,
            allow_external_mint_authority_address=allow_external_mint_authority_address,
            create_melt=create_melt,
            melt_authority_address=melt_authority_address,
            allow_external_melt_authority_address=allow_external_melt_authority_address,
        ),
    )


@p2sh_app.command("mint-tokens")
def p2sh_mint_tokens(
    ctx: typer.Context,
    token: str = typer.Argument(...),
    amount: int = typer.Argument(...),
    addr: str | None = typer.Option(None, "--address"),
    change_address: str | None = typer.Option(None, "--change-address"),
    create_mint: bool | None = typer.Option(None, "--create-mint/--no-create-mint"),
    mint_authority_address: str | None = typer.Option(None, "--mint-authority-address"),
    allow_external_mint_authority_address: bool | None = typer.Option(
        None, "--allow-external-mint-authority-address/--no-allow-external-mint-authority-address"
    ),
) -> None:
    _run(
        ctx,
        lambda c: c.p2sh.mint_tokens(
            _wallet(ctx),
            token,
            amount,
            address=addr,
            change_address=change_address,
            create_mint=create_mint,
            mint_authority_address=mint_authority_address,
            allow_external_mint_authority_address=allow_external_mint_authority_address,
        ),
    )


@p2sh_app.command("melt-tokens")
def p2sh_melt_tokens(
    ctx: typer.Context,
    token: str = typer.Argument(...),
    amount: int = typer.Argument(...),
    change_address: str | None = typer.Option(None, "--change-address"),
    deposit_address: str | None = typer.Option(None, "--deposit-address"),
    create_melt: bool | None = typer.Option(None, "--create-melt/--no-create-melt"),
    melt_authority_address: str | None = typer.Option(None, "--melt-authority-address"),
    allow_external_melt_authority_address: bool | None = typer.Option(
        None, "--allow-external-melt-authority-address/--no-allow-external-melt-authority-address"
    ),
) -> None:
    _run(
        ctx,
        lambda c: c.p2sh.melt_tokens(
            _wallet(ctx),
            token,
            amount,
            change_address=change_address,
            deposit_address=deposit_address,
            create_melt=create_melt,
            melt_authority_address=melt_authority_address,
            allow_external_melt_authority_address=allow_external_melt_authority_address,
        ),
    )


@p2sh_app.command("get-my-signatures")
def p2sh_get_my_signatures(ctx: typer.Context, tx_hex: str = typer.Argument(...)) -> None:
    """Signatures this wallet contributes to a proposal."""
    _run(ctx, lambda c: c.p2sh.get_my_signatures(_wallet(ctx), tx_hex))


@p2sh_app.command("sign")
def p2sh_sign(
    ctx: typer.Context,
    tx_hex: str = typer.Argument(...),
    signatures: list[str] = typer.Option(..., "--signature", "-s", help="May be repeated."),
) -> None:
    """Assemble a signed transaction without pushing it."""
    _run(ctx, lambda c: c.p2sh.sign(_wallet(ctx), tx_hex, signatures))


@p2sh_app.command("sign-and-push")
def p2sh_sign_and_push(
    ctx: typer.Context,
    tx_hex: str = typer.Argument(...),
    signatures: list[str] = typer.Option(..., "--signature", "-s", help="May be repeated."),
) -> None:
    _run(ctx, lambda c: c.p2sh.sign_and_push(_wallet(ctx), tx_hex, signatures))


# ---------------------------------------------------------------------------
# Custom
# ---------------------------------------------------------------------------

@custom_app.command("list-tokens")
def list_tokens(
    ctx: typer.Context,
    wallet_id: str = typer.Option(DEFAULT_WALLET_ID, "--wallet-id", "-w"),
) -> None:
    """Tokens the wallet has received or spent, as a JSON array."""

    async def call(client: HeadlessClient) -> str:
        tokens = await client.custom.list_tokens(wallet_id)
        return json.dumps(sorted(tokens), separators=(",", ":"))

    _run(ctx, call)


@custom_app.command("is-mine")
def is_mine(
    ctx: typer.Context,
    addr: str = typer.Argument(..., metavar="ADDRESS"),
    wallet_id: str = typer.Option(DEFAULT_WALLET_ID, "--wallet-id", "-w"),
) -> None:
    """Print true if the address belongs to the wallet."""

    async def call(client: HeadlessClient) -> str:
        return json.dumps(await client.custom.is_address_mine(wallet_id, addr))

    _run(ctx, call)


@custom_app.command()
def curl(
    ctx: typer.Context,
    path: str = typer.Argument(...),
    wallet_id: str = typer.Option(DEFAULT_WALLET_ID, "--wallet-id", "-w"),
    post: bool = typer.Option(False, "--post", "-p"),
    data: bool = typer.Option(False, "--data", "-d"),
) -> None:
    """Print the curl command equivalent to calling PATH. Nothing is sent."""
    target: Target = ctx.obj
    try:
        command = curl_command(target.config.host, path, wallet_id=wallet_id, post=post, data=data)
    except HeadlessError as exc:
        _fail(exc)
    typer.echo(command)


def main() -> None:
    """Entry point for the ``headless`` console script."""
    app()
