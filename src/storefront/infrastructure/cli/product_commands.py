"""CLI commands for browsing the catalog."""

from __future__ import annotations

import click

from storefront.application.search_products import SearchProductsHandler
from storefront.application.show_product import ShowProductHandler
from storefront.domain.exceptions import DomainException
from storefront.domain.model.criteria import FilterCriteria, SortOrder
from storefront.infrastructure.bootstrap import product_repository


@click.command("list")
@click.option("--category", default=None, help="Exact category tag (e.g. hats).")
@click.option("--q", default=None, help="Search term for title or description.")
@click.option("--min-price", default=None, help="Lowest price to include.")
@click.option("--max-price", default=None, help="Highest price to include.")
@click.option(
    "--sort",
    type=click.Choice([s.value for s in SortOrder]),
    default=None,
    help="Result ordering.",
)
def product_list(
    category: str | None,
    q: str | None,
    min_price: str | None,
    max_price: str | None,
    sort: str | None,
) -> None:
    """List catalog products, optionally filtered and sorted."""
    handler = SearchProductsHandler(product_repo=product_repository())
    result = handler.handle(
        FilterCriteria(
            category=category, q=q, min_price=min_price, max_price=max_price, sort=sort
        )
    )

    if not result.items:
        click.echo("No products match the filters.")
        return

    click.echo(f"{'ID':<10} {'Title':<20} {'Category':<10} {'Price':>10} {'Stock':>6}")
    click.echo("-" * 60)
    for p in result.items:
        stock = "-" if p.stock is None else str(p.stock)
        click.echo(
            f"{p.id:<10} {p.title:<20} {p.category:<10} {str(p.price):>10} {stock:>6}"
        )
    click.echo(f"\nResults: {result.total}")


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_show(product_id: str) -> None:
    """Show one product."""
    handler = ShowProductHandler(product_repo=product_repository())

    try:
        p = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{p.title}  ({p.id})")
    click.echo(p.description)
    click.echo(f"Price:    {p.price}")
    click.echo(f"Category: {p.category}")
    if p.colors:
        click.echo(f"Colors:   {', '.join(p.colors)}")
    if p.sizes:
        click.echo(f"Sizes:    {', '.join(p.sizes)}")
    click.echo(f"Stock:    {'unknown' if p.stock is None else p.stock}")
