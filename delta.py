import math

NEW_ENTRANT = "New Entrant"


def find_previous(prior: list[dict], name: str) -> dict | None:
    return next((r for r in prior if r.get("company_name") == name), None)


def compute_delta(prior: list[dict] | None, record: dict) -> None:
    """Записывает в record изменение цены в % с прошлого запуска.

    Компании, которой не было в прошлом снимке, ставится метка New Entrant.
    Также помечается прошлая цена 0, NaN или Infinity: сравнивать не с чем.
    """
    if not prior:
        record["gain_loss_since_last_run"] = NEW_ENTRANT
        return

    previous = find_previous(prior, record["company_name"])
    old_price = previous.get("last_price") if previous else None
    if (not isinstance(old_price, (int, float)) or not math.isfinite(old_price)
            or old_price == 0):
        record["gain_loss_since_last_run"] = NEW_ENTRANT
        return

    pct = (record["last_price"] - old_price) * 100 / old_price
    record["gain_loss_since_last_run"] = round(pct, 2)
