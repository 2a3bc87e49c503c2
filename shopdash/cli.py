"""
Command-line interface for the shop dashboard.
"""

from __future__ import annotations

import asyncio
import os
from typing import TYPE_CHECKING

import click

from shopdash.client.client import DashboardClient
from shopdash.common.config import Config
from shopdash.common.fixtures import CATALOG
from shopdash.common.models import ProductInput
from shopdash.server import start_server

if TYPE_CHECKING:
    from shopdash.client.domain.entities import StoreState


def _check(state: StoreState) -> StoreState:
    if state.error:
        raise click.ClickException(state.error)
    return state


@click.group()
@click.option(
    "--api-url",
    default=None,
    help="Base URL of the remote API (default: from SHOPDASH_API_URL env or https://fakestoreapi.com)",
)
@click.pass_context
def cli(ctx: click.Context, api_url: str | None) -> None:
    """Shop dashboard CLI"""
    ctx.ensure_object(dict)
    ctx.obj["api_url"] = api_url


def _client(ctx: click.Context) -> DashboardClient:
    return DashboardClient(api_url=ctx.obj.get("api_url"))


@cli.group()
def products() -> None:
    """Fetch, add and remove products"""


@products.command("list")
@click.pass_context
def list_products(ctx: click.Context) -> None:
    """List products from the remote API"""
    with _client(ctx) as client:
        state = _check(asyncio.run(client.products.fetch_all()))
    for product in state.items:
        click.echo(f"{product.id}\t{product.price:.2f}\t{product.category}\t{product.title}")
    click.echo(f"{state.count} product(s)")


@products.command("add")
@click.option("--title", required=True)
@click.option("--price", required=True, type=click.FloatRange(min=0))
@click.option("--description", default="")
@click.option("--image", default="")
@click.option("--category", default="")
@click.pass_context
def add_product(
    ctx: click.Context,
    title: str,
    price: float,
    description: str,
    image: str,
    category: str,
) -> None:
    """Create a product"""
    product_input = ProductInput(
        title=title,
        price=price,
        description=description,
        image=image,
        category=category,
    )
    with _client(ctx) as client:
        state = _check(asyncio.run(client.products.add(product_input)))
    created = state.items[0]
    click.echo(f"Added product {created.id}: {created.title}")


@products.command("remove")
@click.argument("product_id", type=int)
@click.pass_context
def remove_product(ctx: click.Context, product_id: int) -> None:
    """Delete a product by id"""
    with _client(ctx) as client:
        _check(asyncio.run(client.products.remove(product_id)))
    click.echo(f"Removed product {product_id}")


@cli.command("users")
@click.pass_context
def list_users(ctx: click.Context) -> None:
    """List users from the remote API"""
    with _client(ctx) as client:
        state = _check(asyncio.run(client.users.fetch_all()))
    for user in state.items:
        click.echo(f"{user.id}\t{user.username}\t{user.email}\t{user.display_name}")
    click.echo(f"{state.count} user(s)")


@cli.command()
def catalog() -> None:
    """Show the built-in sample catalog"""
    for item in CATALOG:
        stock = "in stock" if item.in_stock else "sold out"
        click.echo(
            f"{item.name}\t{item.discounted_price:.2f} (-{item.discount}%)\t{stock}"
        )


@cli.command()
@click.option(
    "--host",
    default=None,
    help="Host to bind server to (default: from SHOPDASH_SERVER_HOST env or 127.0.0.1)",
)
@click.option(
    "--port",
    default=None,
    type=int,
    help="Port to bind server to (default: from SHOPDASH_SERVER_PORT env or 8000)",
)
@click.pass_context
def serve(ctx: click.Context, host: str | None, port: int | None) -> None:
    """Start the dashboard server"""
    # Set environment variables before building the config
    if host:
        os.environ["SHOPDASH_SERVER_HOST"] = host
    if port:
        os.environ["SHOPDASH_SERVER_PORT"] = str(port)
    if ctx.obj.get("api_url"):
        os.environ["SHOPDASH_API_URL"] = ctx.obj["api_url"]

    start_server(Config())


if __name__ == "__main__":
    cli()
