# cafedesk

A small point-of-sale desk for a coffee shop, run from the terminal. It keeps
the drink menu in a plain text file, takes orders, writes receipts with
volume discounts and writes a summary of the orders taken.

## Installing

```
pip install .
```

## Running

```
cafedesk
cafedesk --workdir /path/to/shop
```

The program starts at a login prompt (`1`/`login`, `2`/`register`,
`q`/`quit`). Logging in asks for a user name and a password, and takes you to
the main screen:

| Command       | What it does                                              |
|---------------|-----------------------------------------------------------|
| `1`, `menu`   | edit the drink menu                                       |
| `2`, `order`  | take an order                                             |
| `3`, `receipt`| list the drinks of the last receipt checked out           |
| `4`, `print`  | show the contents of the saved `receipt.txt`              |
| `5`, `logout` | go back to the login prompt                               |
| `q`, `quit`   | leave the program                                         |

In the **menu** screen: `list`, `search TEXT`, `add` (asks for drink and
price), `remove N [N ...]`, `save` (writes `menu.txt` and returns) and `back`
(returns without saving).

In the **order** screen: `list`, `search TEXT`, `add` (asks for drink and
quantity), `show`, `remove N`, `calc` (checks out and writes `receipt.txt`),
`summary` (writes `daily_summary.txt`) and `back`.

Files are read from and written to the directory given by `-d`/`--workdir`,
the current directory by default:

| File                | Contents                                                  |
|---------------------|-----------------------------------------------------------|
| `menu.txt`          | one drink per line, `name,price`, UTF-8                   |
| `receipt.txt`       | the receipt of the last order checked out                 |
| `daily_summary.txt` | every order checked out since logging in, and the revenue |

Lines of `menu.txt` that do not hold exactly one comma are skipped. The file
is written with a UTF-8 byte-order mark.

## Orders and discounts

An order holds at most 5 different drinks. Adding a drink that is already in
the order raises its quantity, and each addition takes between 1 and 20 of a
drink.

At checkout the order total decides the discount:

| Total (VND)            | Discount |
|------------------------|----------|
| more than 1,000,000    | 20 %     |
| more than 500,000      | 15 %     |
| more than 200,000      | 10 %     |
| otherwise              | none     |

## What it does not do

- There are no user accounts. The password is asked for but never checked,
  and `register` asks for a name and password but stores nothing.
- `print` writes the saved receipt to the terminal; it does not send it to a
  printer.
- The list of orders for the summary is kept in memory only, and starts
  empty again after each login.

## Using it as a library

```python
from datetime import datetime
from cafedesk.menu import Menu, load_menu, save_menu
from cafedesk.orders import Order
from cafedesk.receipt import DailyLog, checkout, write_receipt

menu = Menu([])
menu.add("Espresso", "25000")
menu.add("Latte", "35000")
save_menu(menu, "menu.txt")

order = Order(load_menu("menu.txt"))
order.add("Latte", 3)
order.add("Espresso", 2)

receipt = checkout(order, datetime.now())   # also empties the order
print(receipt.text)
write_receipt(receipt, "receipt.txt")

log = DailyLog()
log.record(receipt.stats)
log.write("daily_summary.txt")
print(log.revenue())
```

`cafedesk.menu` raises `MenuError` for invalid entries and unreadable files;
`cafedesk.orders` and `checkout` raise `OrderError` for orders that cannot be
built or checked out. `cafedesk.shell.Shell` is the main screen and
`cafedesk.cli.login` the login prompt, both reading from and writing to any
text streams given to them.

## Testing

```
pip install .[test]
pytest
```