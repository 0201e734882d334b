from datetime import date

import pytest

from client.screens import build_parser, days_until_birthday, format_price


@pytest.mark.parametrize(
    "birthday, today, expected",
    [
        ("1999-03-14", date(2026, 3, 14), 0),
        ("1999-03-14", date(2026, 3, 10), 4),
        ("1999-03-14", date(2026, 3, 15), 364),
        ("2000-02-29", date(2026, 2, 20), 9),
        ("not-a-date", date(2026, 1, 1), None),
    ],
)
def test_days_until_birthday(birthday, today, expected):
    assert days_until_birthday(birthday, today) == expected


def test_format_price():
    assert format_price("1290000") == "1,290,000원"
    assert format_price("0") == "-"
    assert format_price("") == "-"


def test_parser_edit_add():
    args = build_parser().parse_args(["edit", "l1", "add", "https://ohou.se/p/1", "--comment", "화이트", "--high"])

    assert args.list_id == "l1"
    assert args.action == "add"
    assert args.url == "https://ohou.se/p/1"
    assert args.comment == "화이트"
    assert args.high is True
