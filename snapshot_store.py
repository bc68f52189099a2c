"""Хранение снимка последнего запуска в JSON-файле."""
import json
import logging
from pathlib import Path

log = logging.getLogger(__name__)

# ключи в файле (camelCase) -> ключи записей в коде
FILE_KEYS = {
    "companyName": "company_name",
    "high": "high",
    "low": "low",
    "lastPrice": "last_price",
    "prevClose": "prev_close",
    "change": "change",
    "gainOrLossPct": "gain_or_loss_pct",
    "gainLossSinceLastRun": "gain_loss_since_last_run",
}
RECORD_KEYS = {v: k for k, v in FILE_KEYS.items()}


def _from_file(item) -> dict | None:
    if not isinstance(item, dict):
        return None
    return {FILE_KEYS.get(k, k): v for k, v in item.items()}


def _to_file(record: dict) -> dict:
    return {RECORD_KEYS.get(k, k): v for k, v in record.items()}


def load_snapshot(path: Path) -> list[dict] | None:
    """Читает снимок прошлого запуска.

    Нет файла, пустой файл или битый JSON означают «истории нет»: возвращаем None
    и не мешаем текущему запуску.
    """
    path = Path(path)
    if not path.exists():
        return None
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        log.debug("snapshot %s unreadable: %s", path, e)
        return None
    if not isinstance(data, list):
        return None
    return [rec for rec in map(_from_file, data) if rec is not None]


def save_snapshot(path: Path, records: list[dict]) -> bool:
    """Перезаписывает файл снимка текущими записями."""
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            json.dump([_to_file(r) for r in records], f, indent=2, ensure_ascii=False)
    except OSError as e:
        log.error("could not write snapshot %s: %s", path, e)
        return False
    return True
