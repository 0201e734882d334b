"""Create, edit and view screens for WishPocket lists on the terminal."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from datetime import date
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from app.schemas.wishlist import WishList
from client.api import ListNotFoundError, WishPocketClient, WishPocketError
from client.config import ClientSettings, get_client_settings
from client.local_store import LocalListStore
from client.strings import STRINGS

console = Console()


def days_until_birthday(birthday: str, today: Optional[date] = None) -> Optional[int]:
    """Days until the next occurrence of ``birthday`` (YYYY-MM-DD), 0 on the day itself."""
    today = today or date.today()
    try:
        born = date.fromisoformat(birthday)
    except ValueError:
        return None

    for year in (today.year, today.year + 1):
        try:
            upcoming = born.replace(year=year)
        except ValueError:
            # Feb 29 in a non-leap year
            upcoming = date(year, 3, 1)
        if upcoming >= today:
            return (upcoming - today).days
    return None


def format_price(price: str) -> str:
    if not price or not price.isdigit() or int(price) == 0:
        return STRINGS["price_unknown"]
    return STRINGS["price"].format(price=f"{int(price):,}")


def render_list(wishlist: WishList, editable: bool = False) -> Table:
    title_key = "editor_title" if editable else "list_title"
    table = Table(title=STRINGS[title_key].format(owner=escape(wishlist.owner)), show_lines=False)
    table.add_column(STRINGS["col_no"], justify="right")
    table.add_column(STRINGS["col_item"])
    table.add_column(STRINGS["col_price"], justify="right")
    table.add_column(STRINGS["col_site"])
    table.add_column(STRINGS["col_comment"])
    if editable:
        table.add_column(STRINGS["col_id"], style="dim")

    for index, item in enumerate(wishlist.items, start=1):
        name = item.title
        if item.priority == 1:
            name = f"{STRINGS['priority_high']} {name}"
        row = [str(index), f"[link={item.url}]{escape(name)}[/link]", format_price(item.price), escape(item.site_name), escape(item.comment or "")]
        if editable:
            row.append(item.id)
        table.add_row(*row)
    return table


def _header(wishlist: WishList, today: Optional[date] = None) -> str:
    lines = [f"{STRINGS['birthday']}: {wishlist.birthday}"]
    days = days_until_birthday(wishlist.birthday, today)
    if days is not None:
        lines.append(STRINGS["d_day_today"] if days == 0 else STRINGS["d_day"].format(days=days))
    lines.append(STRINGS["items_count"].format(count=len(wishlist.items)))
    return "\n".join(lines)


async def create_screen(client: WishPocketClient, settings: ClientSettings, args: argparse.Namespace) -> int:
    wishlist = await client.create_list(args.owner, args.birthday, args.password)
    console.print(STRINGS["created"].format(owner=escape(wishlist.owner)))
    console.print(f"{STRINGS['edit_link']}: {settings.edit_link(wishlist.id)}")
    console.print(f"{STRINGS['share_link']}: {settings.share_link(wishlist.id)}")
    return 0


async def edit_screen(client: WishPocketClient, settings: ClientSettings, args: argparse.Namespace) -> int:
    if args.action == "add":
        if not args.url.startswith("http"):
            console.print(STRINGS["error"].format(message=STRINGS["invalid_url"]))
            return 2
        priority = 1 if args.high else None
        with console.status(STRINGS["scraping"]):
            wishlist = await client.add_item(args.list_id, args.url, comment=args.comment, priority=priority)
        console.print(STRINGS["item_added"].format(title=escape(wishlist.items[0].title)))
    elif args.action == "remove":
        wishlist = await client.get_list(args.list_id)
        if not any(item.id == args.item_id for item in wishlist.items):
            console.print(STRINGS["item_missing"].format(item_id=args.item_id))
            return 1
        wishlist = await client.remove_item(args.list_id, args.item_id)
        console.print(STRINGS["item_removed"])
    elif args.action == "share":
        console.print(settings.share_link(args.list_id))
        return 0
    else:
        wishlist = await client.get_list(args.list_id)

    console.print(render_list(wishlist, editable=True) if wishlist.items else STRINGS["empty"])
    return 0


async def view_screen(client: WishPocketClient, settings: ClientSettings, args: argparse.Namespace) -> int:
    wishlist = await client.get_list(args.list_id)
    console.print(Panel(_header(wishlist), title=STRINGS["list_title"].format(owner=escape(wishlist.owner))))
    console.print(render_list(wishlist) if wishlist.items else STRINGS["empty"])
    console.print(STRINGS["create_own"], style="dim")
    return 0


async def delete_screen(client: WishPocketClient, settings: ClientSettings, args: argparse.Namespace) -> int:
    await client.delete_list(args.list_id)
    console.print(STRINGS["list_deleted"])
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="wishpocket", description=STRINGS["app_title"])
    sub = parser.add_subparsers(dest="command", required=True)

    create = sub.add_parser("create", help="create a new list")
    create.add_argument("--owner", required=True)
    create.add_argument("--birthday", required=True, help="YYYY-MM-DD")
    create.add_argument("--password")
    create.set_defaults(handler=create_screen)

    edit = sub.add_parser("edit", help="add or remove items")
    edit.add_argument("list_id")
    actions = edit.add_subparsers(dest="action")
    add = actions.add_parser("add", help="add a product URL")
    add.add_argument("url")
    add.add_argument("--comment")
    add.add_argument("--high", action="store_true", help="mark as high priority")
    remove = actions.add_parser("remove", help="remove an item by id")
    remove.add_argument("item_id")
    actions.add_parser("share", help="print the read-only link")
    edit.set_defaults(handler=edit_screen)

    view = sub.add_parser("view", help="show a list read-only")
    view.add_argument("list_id")
    view.set_defaults(handler=view_screen)

    delete = sub.add_parser("delete", help="delete a list")
    delete.add_argument("list_id")
    delete.set_defaults(handler=delete_screen)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_client_settings()
    logging.basicConfig(level=settings.log_level.upper())

    client = WishPocketClient(
        settings.api_base,
        LocalListStore(settings.local_db),
        timeout_s=settings.timeout,
    )
    try:
        return asyncio.run(args.handler(client, settings, args))
    except ListNotFoundError:
        console.print(STRINGS["error"].format(message=STRINGS["not_found"]))
        return 1
    except WishPocketError as exc:
        console.print(STRINGS["error"].format(message=exc))
        return 1


if __name__ == "__main__":
    sys.exit(main())
