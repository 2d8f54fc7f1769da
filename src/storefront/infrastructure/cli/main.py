import click

from storefront.infrastructure.cli.product_commands import product_list, product_show
from storefront.infrastructure.cli.server_commands import serve


@click.group()
def cli() -> None:
    """Storefront catalog API and tools."""


@cli.group()
def product() -> None:
    """Browse the catalog."""


# Register subcommands
cli.add_command(serve)
product.add_command(product_list)
product.add_command(product_show)
