# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

import asyncio
import json
import logging
import sys
from dataclasses import dataclass
from typing import Any, Awaitable, Callable

import click

from androidpublisher.client.auth import StaticTokenAuthenticator
from androidpublisher.client.delegate import BackoffDelegate, LoggingDelegate
from androidpublisher.client.errors import AndroidPublisherError
from androidpublisher.client.types import HttpResponse
from androidpublisher.config import HubConfig
from androidpublisher.hub import AndroidPublisher
from androidpublisher.schemas.base import Schema
from androidpublisher.schemas.edits import AppEdit
from androidpublisher.schemas.reviews import ReviewsReplyRequest

logger = logging.getLogger(__name__)

APK_MIME_TYPE = "application/vnd.android.package-archive"
BUNDLE_MIME_TYPE = "application/octet-stream"


@dataclass
class CliContext:
    token: str
    retry: bool

    def hub(self) -> AndroidPublisher:
        return AndroidPublisher(
            StaticTokenAuthenticator(self.token), config=HubConfig.from_env()
        )

    def delegate(self) -> LoggingDelegate | BackoffDelegate:
        if self.retry:
            return BackoffDelegate()
        return LoggingDelegate()


def echo_result(result: Any) -> None:
    if isinstance(result, Schema):
        click.echo(json.dumps(result.to_dict(), indent=2))
    elif isinstance(result, HttpResponse):
        click.echo(json.dumps({"status": result.status_code}))
    else:
        click.echo(json.dumps(result, indent=2))


def run_call(
    ctx: CliContext, factory: Callable[[AndroidPublisher], Awaitable[Any]]
) -> None:
    async def run() -> Any:
        async with ctx.hub() as hub:
            return await factory(hub)

    try:
        result = asyncio.run(run())
    except AndroidPublisherError as e:
        click.echo(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    echo_result(result)


pass_context = click.make_pass_decorator(CliContext)

RESUMABLE_OPTION = click.option(
    "--resumable",
    is_flag=True,
    help="Send the file in chunks through a resumable upload session",
)


@click.group()
@click.option(
    "--token",
    type=str,
    envvar="ANDROIDPUBLISHER_TOKEN",
    required=True,
    help="OAuth2 bearer token granting the androidpublisher scope",
)
@click.option(
    "--retry/--no-retry",
    default=False,
    help="Retry transport errors and 429/5xx responses with exponential backoff",
)
@click.option("--verbose", "-v", is_flag=True, help="Log every request")
@click.pass_context
def cli(ctx: click.Context, token: str, retry: bool, verbose: bool) -> None:
    """Command line access to the Google Play publishing API."""

    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)
    ctx.obj = CliContext(token=token, retry=retry)


@cli.group()
def edits() -> None:
    """Create, validate and commit edits."""


@edits.command("insert")
@click.argument("package_name")
@pass_context
def edits_insert(ctx: CliContext, package_name: str) -> None:
    run_call(
        ctx,
        lambda hub: hub.edits()
        .insert(AppEdit(), package_name)
        .delegate(ctx.delegate())
        .doit(),
    )


@edits.command("commit")
@click.argument("package_name")
@click.argument("edit_id")
@click.option(
    "--changes-not-sent-for-review",
    is_flag=True,
    help="Do not send the committed changes for review",
)
@pass_context
def edits_commit(
    ctx: CliContext,
    package_name: str,
    edit_id: str,
    changes_not_sent_for_review: bool,
) -> None:
    run_call(
        ctx,
        lambda hub: hub.edits()
        .commit(package_name, edit_id)
        .changes_not_sent_for_review(changes_not_sent_for_review or None)
        .delegate(ctx.delegate())
        .doit(),
    )


@edits.command("delete")
@click.argument("package_name")
@click.argument("edit_id")
@pass_context
def edits_delete(ctx: CliContext, package_name: str, edit_id: str) -> None:
    run_call(
        ctx,
        lambda hub: hub.edits()
        .delete(package_name, edit_id)
        .delegate(ctx.delegate())
        .doit(),
    )


@edits.command("validate")
@click.argument("package_name")
@click.argument("edit_id")
@pass_context
def edits_validate(ctx: CliContext, package_name: str, edit_id: str) -> None:
    run_call(
        ctx,
        lambda hub: hub.edits()
        .validate(package_name, edit_id)
        .delegate(ctx.delegate())
        .doit(),
    )


@cli.group()
def tracks() -> None:
    """Inspect the release tracks of an edit."""


@tracks.command("list")
@click.argument("package_name")
@click.argument("edit_id")
@pass_context
def tracks_list(ctx: CliContext, package_name: str, edit_id: str) -> None:
    run_call(
        ctx,
        lambda hub: hub.edits()
        .tracks_list(package_name, edit_id)
        .delegate(ctx.delegate())
        .doit(),
    )


@tracks.command("get")
@click.argument("package_name")
@click.argument("edit_id")
@click.argument("track")
@pass_context
def tracks_get(ctx: CliContext, package_name: str, edit_id: str, track: str) -> None:
    run_call(
        ctx,
        lambda hub: hub.edits()
        .tracks_get(package_name, edit_id, track)
        .delegate(ctx.delegate())
        .doit(),
    )


@cli.group()
def apks() -> None:
    """Upload APKs to an edit."""


@apks.command("upload")
@click.argument("package_name")
@click.argument("edit_id")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@RESUMABLE_OPTION
@pass_context
def apks_upload(
    ctx: CliContext, package_name: str, edit_id: str, path: str, resumable: bool
) -> None:
    async def upload(hub: AndroidPublisher) -> Any:
        call = hub.edits().apks_upload(package_name, edit_id).delegate(ctx.delegate())
        send = call.upload_resumable if resumable else call.upload
        with open(path, "rb") as stream:
            return await send(stream, APK_MIME_TYPE)

    run_call(ctx, upload)


@cli.group()
def bundles() -> None:
    """Upload app bundles to an edit."""


@bundles.command("upload")
@click.argument("package_name")
@click.argument("edit_id")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@RESUMABLE_OPTION
@click.option(
    "--ack-bundle-installation-warning",
    is_flag=True,
    help="Acknowledge the warning about the bundle's download size",
)
@pass_context
def bundles_upload(
    ctx: CliContext,
    package_name: str,
    edit_id: str,
    path: str,
    ack_bundle_installation_warning: bool,
    resumable: bool,
) -> None:
    async def upload(hub: AndroidPublisher) -> Any:
        call = (
            hub.edits()
            .bundles_upload(package_name, edit_id)
            .ack_bundle_installation_warning(ack_bundle_installation_warning or None)
            .delegate(ctx.delegate())
        )
        send = call.upload_resumable if resumable else call.upload
        with open(path, "rb") as stream:
            return await send(stream, BUNDLE_MIME_TYPE)

    run_call(ctx, upload)


@cli.group()
def reviews() -> None:
    """Read and answer user reviews."""


@reviews.command("list")
@click.argument("package_name")
@click.option("--max-results", type=int, default=None)
@click.option("--token", "page_token", type=str, default=None, help="Page token")
@click.option("--translation-language", type=str, default=None)
@pass_context
def reviews_list(
    ctx: CliContext,
    package_name: str,
    max_results: int | None,
    page_token: str | None,
    translation_language: str | None,
) -> None:
    run_call(
        ctx,
        lambda hub: hub.reviews()
        .list(package_name)
        .max_results(max_results)
        .token(page_token)
        .translation_language(translation_language)
        .delegate(ctx.delegate())
        .doit(),
    )


@reviews.command("reply")
@click.argument("package_name")
@click.argument("review_id")
@click.argument("text")
@pass_context
def reviews_reply(ctx: CliContext, package_name: str, review_id: str, text: str) -> None:
    run_call(
        ctx,
        lambda hub: hub.reviews()
        .reply(ReviewsReplyRequest(reply_text=text), package_name, review_id)
        .delegate(ctx.delegate())
        .doit(),
    )


@cli.group()
def purchases() -> None:
    """Look up purchases and subscriptions."""


@purchases.command("product")
@click.argument("package_name")
@click.argument("product_id")
@click.argument("purchase_token")
@pass_context
def purchases_product(
    ctx: CliContext, package_name: str, product_id: str, purchase_token: str
) -> None:
    run_call(
        ctx,
        lambda hub: hub.purchases()
        .products_get(package_name, product_id, purchase_token)
        .delegate(ctx.delegate())
        .doit(),
    )


@purchases.command("subscription")
@click.argument("package_name")
@click.argument("subscription_id")
@click.argument("purchase_token")
@pass_context
def purchases_subscription(
    ctx: CliContext, package_name: str, subscription_id: str, purchase_token: str
) -> None:
    run_call(
        ctx,
        lambda hub: hub.purchases()
        .subscriptions_get(package_name, subscription_id, purchase_token)
        .delegate(ctx.delegate())
        .doit(),
    )


def main() -> None:
    cli()
