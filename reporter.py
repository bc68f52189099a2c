"""Вывод таблицы в консоль через rich."""
from rich.console import Console
from rich.table import Table
from rich.text import Text

from delta import NEW_ENTRANT

# (поле, заголовок, выравнивание, цвет); цвет None берётся из типа отчёта
COLUMNS = [
    ("company_name", "Company Name", "left", "cyan"),
    ("high", "High", "right", "yellow"),
    ("low", "Low", "right", "yellow"),
    ("last_price", "Last Price", "right", "yellow"),
    ("prev_close", "Prev Close", "right", "yellow"),
    ("change", "Change", "right", "magenta"),
    ("gain_or_loss_pct", None, "right", None),
]
DELTA_TITLE = "Gain/Loss since last run"


def format_number(value) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_delta(value) -> Text:
    """Синий для New Entrant и нуля, зелёный для роста, красный для падения."""
    if not isinstance(value, (int, float)):
        return Text(str(value if value is not None else NEW_ENTRANT), style="blue")
    label = format_number(value) + "%"
    if value == 0:
        return Text(label, style="blue")
    if value > 0:
        return Text(label, style="green")
    return Text(label, style="red")


def build_table(title: str, is_gainer: bool, records: list[dict]) -> Table:
    table = Table(title=title)
    for field, label, justify, style in COLUMNS:
        if field == "gain_or_loss_pct":
            label = "%Gain" if is_gainer else "%Loss"
            style = "green" if is_gainer else "red"
        table.add_column(label, justify=justify, style=style)
    table.add_column(DELTA_TITLE, justify="right")

    for rec in records:
        cells = [format_number(rec.get(field, "")) for field, *_ in COLUMNS]
        table.add_row(*cells, format_delta(rec.get("gain_loss_since_last_run")))
    return table


def render(title: str, is_gainer: bool, records: list[dict], console: Console | None = None) -> None:
    console = console or Console()
    console.print(build_table(title, is_gainer, records))
    console.print()
