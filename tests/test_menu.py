import pytest

from cafedesk.menu import Menu, MenuError, MenuItem, load_menu, save_menu


@pytest.fixture
def menu():
    return Menu([("Espresso", "25000"), ("Latte", "35000"), ("Iced Tea", "15000")])


def test_add_appends_item(menu):
    item = menu.add("Mocha", "40000")
    assert item == MenuItem("Mocha", "40000")
    assert len(menu) == 4
    assert list(menu)[-1] == item


@pytest.mark.parametrize(
    "name,price",
    [("", "1000"), ("Tea", ""), ("   ", "1000"), ("Tea", "  ")],
)
def test_add_rejects_blank_fields(menu, name, price):
    with pytest.raises(MenuError, match="Please enter drink name and price."):
        menu.add(name, price)
    assert len(menu) == 3


@pytest.mark.parametrize("price", ["abc", "12a", "nan", "1_000"])
def test_add_rejects_non_numeric_price(menu, price):
    with pytest.raises(MenuError, match="Drink price must be a number."):
        menu.add("Tea", price)
    assert len(menu) == 3


def test_add_keeps_price_text(menu):
    menu.add("Cocoa", "12.5")
    assert menu.price_of("Cocoa") == 12.5
    assert menu[-1].price == "12.5"


def test_remove_selected_positions(menu):
    removed = menu.remove([0, 2])
    assert [item.name for item in removed] == ["Espresso", "Iced Tea"]
    assert [item.name for item in menu] == ["Latte"]


def test_remove_out_of_range(menu):
    with pytest.raises(IndexError):
        menu.remove([5])
    assert len(menu) == 3


def test_search_is_case_insensitive(menu):
    assert [item.name for item in menu.search("LAT")] == ["Latte"]
    assert [item.name for item in menu.search("e")] == ["Espresso", "Latte", "Iced Tea"]


def test_search_blank_returns_all(menu):
    assert menu.search("   ") == list(menu)
    assert menu.search("") == list(menu)


def test_search_no_match(menu):
    assert menu.search("juice") == []


def test_price_of(menu):
    assert menu.price_of("Latte") == 35000.0


def test_price_of_unknown(menu):
    with pytest.raises(MenuError):
        menu.price_of("Juice")


def test_save_and_load_round_trip(menu, tmp_path):
    path = tmp_path / "menu.txt"
    save_menu(menu, path)
    loaded = load_menu(path)
    assert list(loaded) == list(menu)


def test_save_writes_bom_and_lines(menu, tmp_path):
    path = tmp_path / "menu.txt"
    save_menu(menu, path)
    data = path.read_bytes()
    assert data.startswith(b"\xef\xbb\xbf")
    assert data[3:].decode("utf-8").splitlines() == [
        "Espresso,25000",
        "Latte,35000",
        "Iced Tea,15000",
    ]


def test_load_skips_malformed_lines(tmp_path):
    path = tmp_path / "menu.txt"
    path.write_text("Cà phê sữa,20000\r\nbad line\r\na,b,c\r\nTrà,10000\r\n", encoding="utf-8")
    loaded = load_menu(path)
    assert list(loaded) == [MenuItem("Cà phê sữa", "20000"), MenuItem("Trà", "10000")]


def test_load_missing_file(tmp_path):
    with pytest.raises(MenuError, match="Cannot find"):
        load_menu(tmp_path / "absent.txt")


def test_load_empty_file(tmp_path):
    path = tmp_path / "menu.txt"
    path.write_bytes(b"")
    assert len(load_menu(path)) == 0