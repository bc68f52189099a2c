"""Разбор HTML-таблицы лидеров роста/падения."""
import math

from bs4 import BeautifulSoup

TABLE_SELECTOR = ".hist_tbl_hm table"

# колонки 1..6 таблицы по порядку
NUMERIC_FIELDS = ["high", "low", "last_price", "prev_close", "change", "gain_or_loss_pct"]


def parse_number(text: str | None) -> float:
    """'1,234.50' -> 1234.5; пустое или нечисловое значение даёт 0."""
    if not text:
        return 0.0
    t = text.replace(",", "").strip()
    if not t:
        return 0.0
    try:
        value = float(t)
    except ValueError:
        return 0.0
    if not math.isfinite(value):
        return 0.0
    return value


def _company_name(cell) -> str:
    if cell is None:
        return ""
    return "".join(h3.get_text() for h3 in cell.select(":scope > span > h3")).strip()


def extract_records(html: str) -> list[dict]:
    """Возвращает записи по строкам первой подходящей таблицы, в исходном порядке."""
    soup = BeautifulSoup(html, "html.parser")
    table = soup.select_one(TABLE_SELECTOR)
    if table is None:
        return []

    body = table.find("tbody", recursive=False) or table
    records: list[dict] = []
    for row in body.find_all("tr", recursive=False):
        cells = row.find_all("td", recursive=False)
        if not cells:
            continue  # заголовок
        record = {"company_name": _company_name(cells[0])}
        for i, field in enumerate(NUMERIC_FIELDS, 1):
            text = cells[i].get_text() if i < len(cells) else ""
            record[field] = parse_number(text)
        records.append(record)
    return records
