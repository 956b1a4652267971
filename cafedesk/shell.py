"""The main screen after logging in: menu editing, ordering, receipts."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterable
from pathlib import Path
from typing import TextIO

from cafedesk.menu import Menu, MenuError, MenuItem, load_menu, save_menu
from cafedesk.orders import Order, OrderError
from cafedesk.receipt import DailyLog, Receipt, checkout, format_amount, write_receipt

__all__ = ["MENU_FILE", "RECEIPT_FILE", "SUMMARY_FILE", "Shell"]

MENU_FILE = "menu.txt"
RECEIPT_FILE = "receipt.txt"
SUMMARY_FILE = "daily_summary.txt"

_MAIN_HELP = (
    "1) menu     edit the drink menu\n"
    "2) order    take an order\n"
    "3) receipt  show the last receipt\n"
    "4) print    print the saved receipt\n"
    "5) logout   log out\n"
    "q) quit     leave the program"
)

_MENU_HELP = (
    "Commands: list, search TEXT, add, remove N [N ...], save (save menu and exit), back"
)

_ORDER_HELP = (
    "Commands: list, search TEXT, add, show, remove N, calc (calculate order), "
    "summary (summary daily orders), back"
)


class _EndOfInput(Exception):
    """The input stream ran dry."""


def _plain(value: float) -> str:
    """A number as the running total label shows it."""
    return str(int(value)) if float(value).is_integer() else repr(float(value))


class Shell:
    """Line-driven main menu for a logged-in user.

    The menu, receipt and daily summary files live in ``workdir``.
    """

    def __init__(
        self,
        username: str = "",
        workdir: str | os.PathLike[str] = ".",
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self.username = username
        self.workdir = Path(workdir)
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout
        self.daily_log = DailyLog()
        self.last_receipt: Receipt | None = None

    # -- input and output -------------------------------------------------

    def _say(self, text: str = "") -> None:
        self._out.write(text + "\n")
        self._out.flush()

    def _ask(self, prompt: str) -> str:
        self._out.write(prompt)
        self._out.flush()
        line = self._in.readline()
        if line == "":
            raise _EndOfInput
        return line.rstrip("\n").rstrip("\r")

    # -- main screen ------------------------------------------------------

    def run(self) -> bool:
        """Serve commands until the user leaves.

        Returns True when the user logged out, False when they quit or
        the input ended.
        """
        if self.username:
            self._say(f"Welcome, {self.username}!")
        self._say(_MAIN_HELP)
        try:
            while True:
                command = self._ask("> ").strip().lower()
                if not command:
                    continue
                if command in ("1", "menu"):
                    self._menu_screen()
                elif command in ("2", "order"):
                    self._order_screen()
                elif command in ("3", "receipt"):
                    self._show_receipt()
                elif command in ("4", "print"):
                    self._print_receipt()
                elif command in ("5", "logout"):
                    self._say("Logged out.")
                    return True
                elif command in ("q", "quit", "exit"):
                    return False
                elif command in ("h", "help", "?"):
                    self._say(_MAIN_HELP)
                else:
                    self._say(f"Unknown command: {command}")
        except _EndOfInput:
            self._say()
            return False

    # -- shared helpers ---------------------------------------------------

    def _load_menu(self) -> Menu:
        try:
            return load_menu(self.workdir / MENU_FILE)
        except MenuError as exc:
            self._say(f"Error: {exc}")
            return Menu()

    def _list_menu(self, menu: Menu, shown: Iterable[MenuItem] | None = None) -> None:
        visible = None if shown is None else {id(item) for item in shown}
        self._say(f"{'#':>3}  {'Drink':<20}{'Price (VND)':>12}")
        for pos, item in enumerate(menu, 1):
            if visible is None or id(item) in visible:
                self._say(f"{pos:>3}  {item.name:<20}{item.price:>12}")

    # -- menu editor ------------------------------------------------------

    def _menu_screen(self) -> None:
        menu = self._load_menu()
        self._list_menu(menu)
        self._say(_MENU_HELP)
        while True:
            command, _, arg = self._ask("menu> ").strip().partition(" ")
            command = command.lower()
            if not command:
                continue
            if command == "list":
                self._list_menu(menu)
            elif command == "search":
                self._list_menu(menu, menu.search(arg))
            elif command == "add":
                name = self._ask("Drink: ")
                price = self._ask("Price: ")
                try:
                    item = menu.add(name, price)
                except MenuError as exc:
                    self._say(str(exc))
                else:
                    self._say(f"Added {item.name}.")
            elif command == "remove":
                self._remove_from_menu(menu, arg.split())
            elif command == "save":
                try:
                    save_menu(menu, self.workdir / MENU_FILE)
                except MenuError as exc:
                    self._say(f"Error: {exc}")
                else:
                    self._say("Saved menu successfully!")
                return
            elif command == "back":
                return
            else:
                self._say(_MENU_HELP)

    def _remove_from_menu(self, menu: Menu, tokens: list[str]) -> None:
        try:
            positions = [int(token) - 1 for token in tokens]
        except ValueError:
            self._say("Positions must be numbers.")
            return
        try:
            removed = menu.remove(positions)
        except IndexError as exc:
            self._say(str(exc))
            return
        for item in removed:
            self._say(f"Removed {item.name}.")

    # -- ordering ---------------------------------------------------------

    def _order_screen(self) -> None:
        menu = self._load_menu()
        order = Order(menu)
        self._list_menu(menu)
        self._say(_ORDER_HELP)
        while True:
            command, _, arg = self._ask("order> ").strip().partition(" ")
            command = command.lower()
            if not command:
                continue
            if command == "list":
                self._list_menu(menu)
            elif command == "search":
                self._list_menu(menu, menu.search(arg))
            elif command == "add":
                self._add_to_order(order)
            elif command == "show":
                self._show_order(order)
            elif command == "remove":
                self._remove_from_order(order, arg.strip())
            elif command == "calc":
                self._calculate(order)
            elif command == "summary":
                self._write_summary()
            elif command == "back":
                return
            else:
                self._say(_ORDER_HELP)

    def _say_total(self, order: Order) -> None:
        self._say(f"Total: {_plain(order.total())} VND")

    def _add_to_order(self, order: Order) -> None:
        name = self._ask("Drink: ")
        quantity_text = self._ask("Quantity [1]: ").strip() or "1"
        try:
            quantity = int(quantity_text)
        except ValueError:
            self._say("Quantity must be a whole number.")
            return
        try:
            order.add(name, quantity)
        except OrderError as exc:
            self._say(str(exc))
            return
        self._say_total(order)

    def _show_order(self, order: Order) -> None:
        self._say(f"{'#':>3}  {'Drink':<20}{'Price (VND)':>12}{'Quantity':>10}{'Total (VND)':>14}")
        for pos, line in enumerate(order, 1):
            self._say(
                f"{pos:>3}  {line.name:<20}{line.price:>12}{line.quantity:>10}"
                f"{format_amount(line.total):>14}"
            )
        self._say_total(order)

    def _remove_from_order(self, order: Order, arg: str) -> None:
        try:
            index = int(arg) - 1
        except ValueError:
            self._say("Position must be a number.")
            return
        try:
            line = order.remove(index)
        except IndexError as exc:
            self._say(str(exc))
            return
        self._say(f"Removed {line.name}.")
        self._say_total(order)

    def _calculate(self, order: Order) -> None:
        try:
            receipt = checkout(order)
        except OrderError as exc:
            self._say(str(exc))
            return
        self.daily_log.record(receipt.stats)
        self.last_receipt = receipt
        try:
            write_receipt(receipt, self.workdir / RECEIPT_FILE)
        except OSError as exc:
            self._say(f"Error saving receipt: {exc}")
        else:
            self._say(f"Receipt saved to {RECEIPT_FILE}")
        self._say("Total: 0 VND")

    def _write_summary(self) -> None:
        try:
            self.daily_log.write(self.workdir / SUMMARY_FILE)
        except OSError as exc:
            self._say(f"Error saving summary: {exc}")
        else:
            self._say(f"Saved daily summary to {SUMMARY_FILE}")

    # -- receipts ---------------------------------------------------------

    def _show_receipt(self) -> None:
        self._say(f"{'Tên Món':<20}{'Số Lượng':>10}{'Đơn Giá':>12}{'Thành Tiền':>14}")
        if self.last_receipt is None:
            self._say("(no receipt yet)")
            return
        for line in self.last_receipt.lines:
            self._say(
                f"{line.name:<20}{line.quantity:>10}{format_amount(line.unit_price):>12}"
                f"{format_amount(line.total):>14}"
            )

    def _print_receipt(self) -> None:
        path = self.workdir / RECEIPT_FILE
        try:
            text = path.read_text(encoding="utf-8-sig")
        except FileNotFoundError:
            self._say("Nothing to print.")
            return
        except (OSError, UnicodeDecodeError) as exc:
            self._say(f"Error: {exc}")
            return
        self._out.write(text)
        self._out.flush()