# app/cli/products.py
"""
Command line access to the product store and the sync pipeline.

    python -m app.cli.products list
    python -m app.cli.products create --name Mug --price 9.5 --description "Blue mug" --category Kitchen
    python -m app.cli.products sync <product_id> commerce
    python -m app.cli.products delete <product_id>

Runs in-process against the configured DATA_FILE, so the short-video quota and
photo-share tokens are those of this process only.
"""

import asyncio
import json
import logging

import click
from pydantic import ValidationError

from app.core.config import get_settings
from app.core.enums import PlatformName
from app.core.exceptions import BaseServiceError
from app.core.logging_config import configure_logging
from app.integrations.base import SyncContext
from app.integrations.setup import build_adapters, build_credential_store, build_rate_limiter
from app.schemas.product import ProductCreate
from app.services.product_service import ProductService
from app.services.sync_service import SyncOrchestrator
from app.store.json_store import ProductStore

logger = logging.getLogger(__name__)


class CliContext:
    def __init__(self, data_file=None):
        self.settings = get_settings()
        self.store = ProductStore(data_file or self.settings.DATA_FILE)
        self.rate_limiter = build_rate_limiter(self.settings)
        self.credentials = build_credential_store(self.settings)
        self.products = ProductService(self.store)
        self.orchestrator = SyncOrchestrator(
            self.store,
            build_adapters(self.settings, self.rate_limiter, self.credentials),
        )


def _run(coro):
    try:
        return asyncio.run(coro)
    except BaseServiceError as e:
        raise click.ClickException(str(e))


@click.group()
@click.option('--data-file', type=click.Path(dir_okay=False), help='Override DATA_FILE')
@click.option('--log-level', default=None, help='Override LOG_LEVEL')
@click.pass_context
def cli(ctx, data_file, log_level):
    """Manage products and push them to the external platforms"""
    configure_logging(log_level or get_settings().LOG_LEVEL)
    ctx.obj = CliContext(data_file)


@cli.command('list')
@click.pass_obj
def list_products(obj: CliContext):
    """List products with their sync state per platform"""
    products = _run(obj.products.list_products())
    if not products:
        click.echo("No products")
        return
    for product in products:
        states = ", ".join(
            f"{platform.value}={product.sync_status.get(platform).state.value}" for platform in PlatformName
        )
        click.echo(f"{product.id}  {product.name}  {product.price}  [{states}]")


@cli.command('create')
@click.option('--name', required=True)
@click.option('--price', required=True)
@click.option('--description', required=True)
@click.option('--category', required=True)
@click.pass_obj
def create_product(obj: CliContext, name, price, description, category):
    """Create a product"""
    try:
        data = ProductCreate(name=name, price=price, description=description, category=category)
    except ValidationError as e:
        raise click.BadParameter(str(e))
    product = _run(obj.products.create_product(data))
    click.echo(product.id)


@cli.command('delete')
@click.argument('product_id')
@click.pass_obj
def delete_product(obj: CliContext, product_id):
    """Delete the product with this id"""
    _run(obj.products.delete_product(product_id))
    click.echo(f"Deleted {product_id}")


@cli.command('sync')
@click.argument('product_id')
@click.argument('platform')
@click.option('--token', default=None, help='Photo-share token; one is issued in-process when omitted')
@click.pass_obj
def sync_product(obj: CliContext, product_id, platform, token):
    """Sync a product to one platform"""
    if token is None and PlatformName.from_slug(platform) == PlatformName.PHOTOSHARE:
        token = obj.credentials.issue()
    result = _run(obj.orchestrator.sync_product(product_id, platform, SyncContext(token=token)))
    click.echo(json.dumps(result.model_dump(mode="json", by_alias=True), indent=2))
    if not result.success:
        raise SystemExit(1)


@cli.command('issue-token')
@click.pass_obj
def issue_token(obj: CliContext):
    """Print a photo-share token (valid for this process only)"""
    click.echo(obj.credentials.issue())


if __name__ == "__main__":
    cli()
